# tagcontent/services/platform/ecwid_images.py
"""
Product-image provider backed by the Ecwid REST API.

Ecwid returns product images in two shapes: the current `media.images`
list (position 0 is the main image) and the legacy flat fields
(`thumbnailUrl`, `imageUrl`, ...) plus `galleryImages`. Both are read into
PlatformImage with a width -> URL map.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from tagcontent.common.logging import get_logger
from tagcontent.common.settings import PlatformConfig
from tagcontent.domain.entities.product import PlatformImage, ProductRef
from tagcontent.domain.errors import ProviderUnavailable

logger = get_logger(__name__)

# Ecwid image field -> approximate width in px
SIZE_FIELDS: Dict[str, int] = {
    "image160pxUrl": 160,
    "image400pxUrl": 400,
    "image800pxUrl": 800,
    "image1500pxUrl": 1500,
    "imageOriginalUrl": 2000,
}
LEGACY_SIZE_FIELDS: Dict[str, int] = {
    "thumbnailUrl": 160,
    "smallThumbnailUrl": 80,
    "hdThumbnailUrl": 400,
    "imageUrl": 800,
    "originalImageUrl": 2000,
}
PREFERRED_WIDTH = 800


def widths_from_image_data(data: Mapping[str, Any]) -> Dict[int, str]:
    sizes: Dict[int, str] = {}
    # legacy first so current fields win on equal widths
    for field_map in (LEGACY_SIZE_FIELDS, SIZE_FIELDS):
        for name, width in field_map.items():
            url = data.get(name)
            if url:
                sizes[width] = str(url)
    return dict(sorted(sizes.items()))


def image_from_data(data: Mapping[str, Any]) -> Optional[PlatformImage]:
    sizes = widths_from_image_data(data)
    url = data.get("url") or sizes.get(PREFERRED_WIDTH) or (sizes[max(sizes)] if sizes else None)
    if not url:
        return None
    return PlatformImage(
        url=str(url),
        alt=str(data.get("alt") or ""),
        width=data.get("width"),
        height=data.get("height"),
        available_sizes=sizes,
    )


def image_at(product: Mapping[str, Any], position: int) -> Optional[PlatformImage]:
    """Pick the image at `position` from an Ecwid product payload."""
    if position < 0:
        return None
    media = product.get("media") or {}
    images = media.get("images") if isinstance(media, Mapping) else None
    if isinstance(images, list):
        if position < len(images) and isinstance(images[position], Mapping):
            return image_from_data(images[position])
        return None

    if position == 0:
        main = {k: product[k] for k in LEGACY_SIZE_FIELDS if product.get(k)}
        if not main.get("thumbnailUrl") and not main.get("imageUrl"):
            return None
        return image_from_data(main)

    gallery = product.get("galleryImages") or []
    idx = position - 1
    if idx < len(gallery) and isinstance(gallery[idx], Mapping):
        return image_from_data(gallery[idx])
    return None


class EcwidImageProvider:
    """
    ProductImagePort over `GET {api_base}/{store_id}/products/{id}`.
    A 404 means no images; transport failures raise ProviderUnavailable.
    """

    def __init__(self, cfg: PlatformConfig, *, client: Optional[httpx.Client] = None) -> None:
        self.cfg = cfg
        self._client = client or httpx.Client(timeout=cfg.timeout_sec)

    def close(self) -> None:
        self._client.close()

    def fetch_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        url = f"{self.cfg.api_base.rstrip('/')}/{self.cfg.store_id}/products/{product_id}"
        headers = {"Authorization": f"Bearer {self.cfg.token}"} if self.cfg.token else {}
        try:
            response = self._client.get(url, headers=headers)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            # ValueError: body was not JSON
            logger.warning("Ecwid product %s request failed: %s", product_id, e)
            raise ProviderUnavailable(
                f"Product image provider unavailable: {e}", details={"product_id": product_id}
            ) from e

    def get_image_at(self, product: ProductRef, position: int) -> Optional[PlatformImage]:
        payload = self.fetch_product(product.product_id)
        if not isinstance(payload, Mapping):
            return None
        return image_at(payload, position)
