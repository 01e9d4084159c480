# tagcontent/database/models/options.py
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tagcontent.database.core.main import Base
from tagcontent.database.core.service_object import JSONType, ServiceObject


# =======================
# Key/value options
# =======================
class Option(ServiceObject, Base):
    """Named JSON blob; the tag map lives in a single row."""
    __tablename__ = "option"
    __table_args__ = (UniqueConstraint("name", name="uq_option_name"),)

    name: Mapped[str] = mapped_column(String(191), nullable=False)
    value: Mapped[Optional[Any]] = mapped_column(JSONType, nullable=True)
