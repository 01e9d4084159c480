# tagcontent/database/models/content.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tagcontent.database.core.main import Base
from tagcontent.database.core.service_object import JSONType, ServiceObject


# Localized columns hold {"base": "...", "translations": {"nl": "..."}}

class ProductIngredient(ServiceObject, Base):
    __tablename__ = "product_ingredient"
    __table_args__ = (
        CheckConstraint("product_id IS NOT NULL OR sku IS NOT NULL", name="owner_required"),
        Index("ix_product_ingredient_product_id", "product_id"),
        Index("ix_product_ingredient_sku", "sku"),
    )

    product_id: Mapped[Optional[int]] = mapped_column(BigInteger)
    sku: Mapped[Optional[str]] = mapped_column(String(128))
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    name: Mapped[dict] = mapped_column(JSONType, nullable=False)
    description: Mapped[Optional[dict]] = mapped_column(JSONType)


class ProductDescriptionRow(ServiceObject, Base):
    __tablename__ = "product_description"
    __table_args__ = (Index("ix_product_description_product_id", "product_id"),)

    product_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    description_type: Mapped[str] = mapped_column(String(32), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    title: Mapped[Optional[dict]] = mapped_column(JSONType)
    content: Mapped[Optional[dict]] = mapped_column(JSONType)
