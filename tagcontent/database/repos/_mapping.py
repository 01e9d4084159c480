# tagcontent/database/repos/_mapping.py
from __future__ import annotations

from typing import Any, Dict, Optional

from tagcontent.database.models.content import ProductDescriptionRow, ProductIngredient
from tagcontent.database.models.media import Attachment, ProductMedia
from tagcontent.domain.entities.localized_text import Ingredient, LocalizedTextEntry, ProductDescription
from tagcontent.domain.entities.media_source import MediaAssignment
from tagcontent.domain.entities.product import AttachmentInfo
from tagcontent.domain.entities.resolved_media import MediaSize


def to_domain_assignment(row: ProductMedia) -> Optional[MediaAssignment]:
    return MediaAssignment.from_record(
        row.product_id,
        {
            "tag_name": row.tag_key,
            "media_type": row.source_kind,
            "attachment_id": row.attachment_id,
            "media_url": row.media_url,
            "position": row.image_position,
        },
    )


def to_domain_attachment(row: Attachment) -> AttachmentInfo:
    sizes: Dict[str, MediaSize] = {}
    for name, s in (row.sizes or {}).items():
        if isinstance(s, dict) and s.get("url"):
            sizes[name] = MediaSize(url=s["url"], width=int(s.get("width") or 0), height=int(s.get("height") or 0))
    return AttachmentInfo(
        url=row.url,
        title=row.title or "",
        alt=row.alt or "",
        mime_type=row.mime_type or "",
        sizes=sizes,
    )


def sizes_to_json(sizes: Dict[str, MediaSize]) -> Dict[str, Dict[str, Any]]:
    return {name: {"url": s.url, "width": s.width, "height": s.height} for name, s in sizes.items()}


def text_to_json(entry: LocalizedTextEntry) -> Dict[str, Any]:
    return {"base": entry.base, "translations": dict(entry.overrides)}


def to_domain_ingredient(row: ProductIngredient) -> Ingredient:
    return Ingredient(
        name=LocalizedTextEntry.from_value(row.name),
        description=LocalizedTextEntry.from_value(row.description),
    )


def to_domain_description(row: ProductDescriptionRow) -> ProductDescription:
    return ProductDescription(
        description_type=row.description_type,
        title=LocalizedTextEntry.from_value(row.title),
        content=LocalizedTextEntry.from_value(row.content),
    )
