# tagcontent/services/api/routers/product_media.py
from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query

from tagcontent.common.settings import get_settings
from tagcontent.domain.entities.product import ProductRef
from tagcontent.domain.errors import ContentError
from tagcontent.services.api.deps import get_facade, product_ref
from tagcontent.services.api.errors import http_error
from tagcontent.services.mappers.media import to_read
from tagcontent.services.resolution.facade import ResolutionFacade
from tagcontent.services.schemas import ResolvedMediaRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/products", tags=["product-media"])


@router.get("/{product_id}/media", response_model=Dict[str, ResolvedMediaRead])
def list_product_media(
    product: ProductRef = Depends(product_ref),
    facade: ResolutionFacade = Depends(get_facade),
) -> Dict[str, ResolvedMediaRead]:
    try:
        resolved = facade.resolve_all_media(product)
    except ContentError as e:
        raise http_error(e)
    return {key: to_read(m) for key, m in resolved.items()}


@router.get("/{product_id}/media/{tag_key}", response_model=ResolvedMediaRead)
def get_product_media(
    tag_key: str,
    size: Optional[str] = Query(None, description="thumbnail | medium | large | full"),
    product: ProductRef = Depends(product_ref),
    facade: ResolutionFacade = Depends(get_facade),
) -> ResolvedMediaRead:
    try:
        media = facade.resolve_media(product, tag_key)
    except ContentError as e:
        raise http_error(e)
    return to_read(media, size=size)
