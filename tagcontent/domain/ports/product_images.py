from __future__ import annotations
from typing import Optional, Protocol
from tagcontent.domain.entities.product import PlatformImage, ProductRef


class ProductImagePort(Protocol):
    """
    Ordered product images from the commerce platform. Position 0 is the
    primary image, position N >= 1 is gallery image N-1. Out of range -> None.
    """
    def get_image_at(self, product: ProductRef, position: int) -> Optional[PlatformImage]: ...
