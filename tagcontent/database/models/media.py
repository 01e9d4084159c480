# tagcontent/database/models/media.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tagcontent.database.core.main import Base
from tagcontent.database.core.service_object import JSONType, ServiceObject


# =======================
# Product media assignments
# =======================
class ProductMedia(ServiceObject, Base):
    __tablename__ = "product_media"
    __table_args__ = (
        UniqueConstraint("product_id", "tag_key", name="uq_product_media_product_tag"),
        CheckConstraint("image_position IS NULL OR image_position >= 0", name="position_nonneg"),
        Index("ix_product_media_product_id", "product_id"),
    )

    product_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    tag_key: Mapped[str] = mapped_column(String(64), nullable=False)
    source_kind: Mapped[str] = mapped_column(String(32), nullable=False)   # upload|url|platform_image
    attachment_id: Mapped[Optional[str]] = mapped_column(String(64))
    media_url: Mapped[Optional[str]] = mapped_column(Text)
    image_position: Mapped[Optional[int]] = mapped_column(Integer)


# =======================
# Uploaded attachments
# =======================
class Attachment(ServiceObject, Base):
    __tablename__ = "attachment"

    url: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255))
    alt: Mapped[Optional[str]] = mapped_column(String(255))
    mime_type: Mapped[Optional[str]] = mapped_column(String(127))
    # {"thumbnail": {"url": ..., "width": 150, "height": 150}, ...}
    sizes: Mapped[Optional[dict]] = mapped_column(JSONType)
