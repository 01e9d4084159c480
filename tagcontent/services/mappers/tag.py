# tagcontent/services/mappers/tag.py
from __future__ import annotations

from tagcontent.domain.entities.tag import Tag
from tagcontent.domain.policies.tag_defaults import is_default_tag
from tagcontent.services.schemas.tags import TagRead


def to_read(t: Tag) -> TagRead:
    return TagRead(
        key=t.key,
        label=t.label,
        description=t.description,
        category=t.category,
        expected_media_type=t.expected_media_type,
        expected_media_type_label=t.expected_media_type.label,
        is_default=is_default_tag(t.key),
    )
