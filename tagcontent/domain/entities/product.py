# tagcontent/domain/entities/product.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from tagcontent.domain.entities.resolved_media import MediaSize


@dataclass(frozen=True)
class ProductRef:
    """Minimal product data needed to resolve media and text."""
    product_id: int
    sku: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.product_id, bool) or not isinstance(self.product_id, int):
            raise ValueError("product_id must be an int")
        if self.product_id <= 0:
            raise ValueError("product_id must be > 0")

    @property
    def display_name(self) -> str:
        return self.name or "Product"


@dataclass(frozen=True)
class PlatformImage:
    """
    One image from the product-image provider. `available_sizes` maps pixel
    width to URL for every rendition the platform offers.
    """
    url: str
    alt: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    available_sizes: Dict[int, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.url:
            raise ValueError("url is required")

    def largest(self) -> tuple[int, str] | None:
        if not self.available_sizes:
            return None
        w = max(self.available_sizes)
        return w, self.available_sizes[w]


@dataclass(frozen=True)
class AttachmentInfo:
    """What the attachment store knows about an uploaded file."""
    url: str
    title: str = ""
    alt: str = ""
    mime_type: str = ""
    sizes: Dict[str, MediaSize] = field(default_factory=dict)
