# tagcontent/services/api/routers/tags.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from tagcontent.common.settings import get_settings
from tagcontent.domain.errors import ContentError
from tagcontent.services.api.deps import get_tag_registry
from tagcontent.services.api.errors import http_error
from tagcontent.services.mappers.tag import to_read
from tagcontent.services.registry.tag_registry import TagRegistry
from tagcontent.services.schemas import TagCreate, TagRead, TagUpdate

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/media-tags", tags=["media-tags"])


@router.get("", response_model=List[TagRead])
def list_tags(registry: TagRegistry = Depends(get_tag_registry)) -> List[TagRead]:
    return [to_read(t) for t in registry.list_tags().values()]


@router.get("/category/{category}", response_model=List[TagRead])
def list_tags_by_category(category: str, registry: TagRegistry = Depends(get_tag_registry)) -> List[TagRead]:
    try:
        return [to_read(t) for t in registry.list_by_category(category).values()]
    except ContentError as e:
        raise http_error(e)


@router.get("/{key}", response_model=TagRead)
def get_tag(key: str, registry: TagRegistry = Depends(get_tag_registry)) -> TagRead:
    tag = registry.get_tag(key)
    if tag is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Tag not found")
    return to_read(tag)


@router.post("", response_model=TagRead, status_code=HTTPStatus.CREATED)
def create_tag(
    payload: TagCreate,
    registry: TagRegistry = Depends(get_tag_registry),
) -> TagRead:
    try:
        tag = registry.add_tag(
            payload.key,
            payload.label,
            description=payload.description,
            category=payload.category,
            expected_media_type=payload.expected_media_type,
        )
    except ContentError as e:
        raise http_error(e)
    return to_read(tag)


@router.put("/{key}", response_model=TagRead)
def update_tag(
    key: str,
    payload: TagUpdate,
    registry: TagRegistry = Depends(get_tag_registry),
) -> TagRead:
    try:
        tag = registry.update_tag(key, **payload.model_dump(exclude_unset=True, exclude_none=True))
    except ContentError as e:
        raise http_error(e)
    return to_read(tag)


@router.delete("/{key}", status_code=HTTPStatus.NO_CONTENT)
def delete_tag(
    key: str,
    registry: TagRegistry = Depends(get_tag_registry),
) -> Response:
    try:
        registry.delete_tag(key)
    except ContentError as e:
        raise http_error(e)
    return Response(status_code=HTTPStatus.NO_CONTENT)
