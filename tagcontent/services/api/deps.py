# tagcontent/services/api/deps.py
from __future__ import annotations
from functools import lru_cache
from typing import Generator, List, Optional

from fastapi import Depends, Path, Query
from sqlalchemy import event
from sqlalchemy.orm import Session

from tagcontent.common.cache.ttl_cache import TTLCache
from tagcontent.common.settings import get_settings
from tagcontent.database.core.main import new_session
from tagcontent.database.repos.attachment_repo import SqlAttachmentRepo
from tagcontent.database.repos.content_repo import SqlProductContentRepo
from tagcontent.database.repos.media_assignment_repo import SqlMediaAssignmentRepo
from tagcontent.database.repos.tag_storage_repo import SqlTagStorage
from tagcontent.domain.entities.product import ProductRef
from tagcontent.domain.ports.product_images import ProductImagePort
from tagcontent.domain.ports.translation import TranslationRegistrarPort
from tagcontent.services.platform.ecwid_images import EcwidImageProvider
from tagcontent.services.registry.tag_registry import TagRegistry
from tagcontent.services.resolution.facade import ResolutionFacade
from tagcontent.services.resolution.media_resolver import MediaResolver
from tagcontent.services.resolution.text_resolver import TextResolver
from tagcontent.services.resolution.type_validator import TypeValidator


def get_db() -> Generator[Session, None, None]:
    db = new_session()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.
    """
    with db.begin():
        yield db


@lru_cache(maxsize=1)
def get_cache() -> TTLCache:
    """Process-wide resolution cache shared by every request."""
    cfg = get_settings().resolution
    return TTLCache(ttl=cfg.cache_ttl_sec, max_size=cfg.cache_max_entries)


@lru_cache(maxsize=1)
def get_image_provider() -> ProductImagePort:
    return EcwidImageProvider(get_settings().platform)


def get_registrars() -> List[TranslationRegistrarPort]:
    # no translation system wired in by default; deployments override this
    return []


def get_tag_registry(
    db: Session = Depends(transactional_session),
    cache: TTLCache = Depends(get_cache),
) -> TagRegistry:
    """
    The registry empties the shared cache on every write. The write only
    becomes visible to other requests at commit, so the cache is emptied
    again then; anything refilled in between came from the old data.
    """
    storage = SqlTagStorage(db)

    @event.listens_for(db, "after_commit")
    def _drop_cache_after_commit(session: Session) -> None:
        if storage.writes:
            cache.invalidate()

    return TagRegistry(storage, cache=cache)


def get_text_resolver(registrars: List[TranslationRegistrarPort] = Depends(get_registrars)) -> TextResolver:
    cfg = get_settings()
    return TextResolver(
        cfg.resolution.default_language,
        registrars if cfg.translation.enabled else (),
        namespace=cfg.translation.namespace,
    )


def get_facade(
    db: Session = Depends(transactional_session),
    registry: TagRegistry = Depends(get_tag_registry),
    images: ProductImagePort = Depends(get_image_provider),
    text: TextResolver = Depends(get_text_resolver),
    cache: TTLCache = Depends(get_cache),
) -> ResolutionFacade:
    cfg = get_settings().resolution
    media = MediaResolver(
        registry,
        SqlMediaAssignmentRepo(db),
        SqlAttachmentRepo(db),
        images,
        TypeValidator(registry, video_hosts=cfg.video_host_patterns),
        primary_image_tag=cfg.primary_image_tag,
        cache=cache,
    )
    return ResolutionFacade(
        media,
        text,
        content=SqlProductContentRepo(db),
        cache=cache,
        default_size=cfg.default_size,
    )


def product_ref(
    product_id: int = Path(..., gt=0),
    sku: Optional[str] = Query(None, description="Product SKU, used for SKU-level ingredients"),
    name: Optional[str] = Query(None, description="Display name used in generated titles"),
) -> ProductRef:
    return ProductRef(product_id=product_id, sku=sku, name=name)
