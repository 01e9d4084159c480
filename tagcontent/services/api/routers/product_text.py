# tagcontent/services/api/routers/product_text.py
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from tagcontent.common.settings import get_settings
from tagcontent.domain.entities.product import ProductRef
from tagcontent.services.api.deps import get_facade, product_ref
from tagcontent.services.resolution.facade import ResolutionFacade
from tagcontent.services.schemas import DescriptionList, DescriptionRead, IngredientList, IngredientRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/products", tags=["product-text"])


@router.get("/{product_id}/ingredients", response_model=IngredientList)
def list_ingredients(
    lang: Optional[str] = Query(None),
    product: ProductRef = Depends(product_ref),
    facade: ResolutionFacade = Depends(get_facade),
) -> IngredientList:
    items = facade.resolve_ingredients(product, lang)
    return IngredientList(
        product_id=product.product_id,
        language=facade.text.normalize(lang),
        items=[IngredientRead(**i) for i in items],
    )


@router.get("/{product_id}/descriptions", response_model=DescriptionList)
def list_descriptions(
    lang: Optional[str] = Query(None),
    product: ProductRef = Depends(product_ref),
    facade: ResolutionFacade = Depends(get_facade),
) -> DescriptionList:
    items = facade.resolve_descriptions(product, lang)
    return DescriptionList(
        product_id=product.product_id,
        language=facade.text.normalize(lang),
        items=[DescriptionRead(**d) for d in items],
    )


@router.get("/{product_id}/descriptions/{description_type}", response_model=DescriptionRead)
def get_description(
    description_type: str,
    lang: Optional[str] = Query(None),
    product: ProductRef = Depends(product_ref),
    facade: ResolutionFacade = Depends(get_facade),
) -> DescriptionRead:
    found = facade.resolve_description(product, description_type, lang)
    if found is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Description not found")
    return DescriptionRead(**found)
