# tagcontent/services/mappers/media.py
from __future__ import annotations

from typing import Optional

from tagcontent.domain.entities.resolved_media import ResolvedMedia
from tagcontent.services.schemas.media import MediaSizeRead, ResolvedMediaRead, ValidationRead


def to_read(m: ResolvedMedia, *, size: Optional[str] = None) -> ResolvedMediaRead:
    return ResolvedMediaRead(
        tag_key=m.tag_key,
        product_id=m.product_id,
        url=m.url,
        title=m.title,
        alt=m.alt,
        mime_type=m.mime_type,
        coarse_type=m.coarse_type.value,
        source_kind=m.source_kind.value,
        is_fallback=m.is_fallback,
        sizes={name: MediaSizeRead.model_validate(s) for name, s in m.sizes.items()},
        validation=ValidationRead.model_validate(m.validation),
        size_url=m.url_for_size(size) if size else None,
    )
