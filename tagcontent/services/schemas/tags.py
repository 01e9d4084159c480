from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tagcontent.domain.enums import MediaType, TagCategory


# Media tag
class TagBase(BaseModel):
    label: str = Field(..., min_length=1, max_length=128)
    description: str = ""
    category: TagCategory = TagCategory.primary
    expected_media_type: MediaType = MediaType.image


class TagCreate(TagBase):
    # validated again by the registry; the pattern here gives a 422 up front
    key: str = Field(..., pattern=r"^[a-z0-9_]+$", max_length=64)


class TagUpdate(BaseModel):
    label: Optional[str] = Field(None, min_length=1, max_length=128)
    description: Optional[str] = None
    category: Optional[TagCategory] = None
    expected_media_type: Optional[MediaType] = None


class TagRead(TagBase):
    key: str
    expected_media_type_label: str
    is_default: bool = False
    model_config = ConfigDict(from_attributes=True)
