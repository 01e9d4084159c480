from __future__ import annotations
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class MediaSizeRead(BaseModel):
    url: str
    width: int = 0
    height: int = 0
    model_config = ConfigDict(from_attributes=True)


class ValidationRead(BaseModel):
    ok: bool
    message: str = ""
    model_config = ConfigDict(from_attributes=True)


class ResolvedMediaRead(BaseModel):
    tag_key: Optional[str] = None
    product_id: Optional[int] = None
    url: str
    title: str
    alt: str
    mime_type: str
    coarse_type: str
    source_kind: str
    is_fallback: bool = False
    sizes: Dict[str, MediaSizeRead]
    validation: ValidationRead
    # set when a size was requested
    size_url: Optional[str] = None
