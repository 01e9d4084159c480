# tagcontent/domain/policies/tag_defaults.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from tagcontent.domain.entities.tag import EXPECTED_TYPE_FIELD, LEGACY_EXPECTED_TYPE_FIELD, Tag
from tagcontent.domain.enums import MediaType, TagCategory

DEFAULT_TAGS: Dict[str, Tag] = {
    t.key: t
    for t in (
        Tag("hero_image", "Hero Image", MediaType.image, "Main product showcase image", TagCategory.primary),
        Tag(
            "ingredients_image",
            "Ingredients Image",
            MediaType.image,
            "Image showing product ingredients or composition",
            TagCategory.reference,
        ),
        Tag("size_chart", "Size Chart", MediaType.image, "Product sizing information and measurements", TagCategory.reference),
        Tag("demo_video", "Demo Video", MediaType.video, "Product demonstration or usage video", TagCategory.media),
        Tag("user_manual", "User Manual", MediaType.document, "Downloadable user manual or instructions", TagCategory.reference),
        Tag("audio_sample", "Audio Sample", MediaType.audio, "Product sound sample or audio guide", TagCategory.media),
    )
}


def is_default_tag(key: str) -> bool:
    return key in DEFAULT_TAGS


def default_records() -> Dict[str, Dict[str, Any]]:
    return {key: tag.to_record() for key, tag in DEFAULT_TAGS.items()}


def guess_media_type_from_tag(key: str, record: Mapping[str, Any]) -> MediaType:
    """
    Keyword guess for tags stored before they carried an expected type.
    Video keywords win over audio, audio over document.
    """
    k = (key or "").lower()
    label = str(record.get("label") or "").lower()
    desc = str(record.get("description") or "").lower()

    if "video" in k or "video" in label or "video" in desc:
        return MediaType.video
    if "audio" in k or "audio" in label or "audio" in desc or "sound" in k:
        return MediaType.audio
    if (
        "manual" in k
        or "document" in k
        or "pdf" in k
        or "manual" in label
        or "document" in label
        or "manual" in desc
    ):
        return MediaType.document
    return MediaType.image


def backfill_expected_types(
    records: Mapping[str, Mapping[str, Any]],
) -> Tuple[Dict[str, Dict[str, Any]], List[str]]:
    """
    Bring legacy records up to date:
      - `expected_media_type` is renamed to `expectedMediaType`
      - a record with neither gets a keyword guess
    A present `expectedMediaType` is never touched. Returns the (copied)
    records and the keys that changed; an empty list means nothing to persist.
    """
    out: Dict[str, Dict[str, Any]] = {}
    changed: List[str] = []
    for key, rec in records.items():
        new = dict(rec)
        if not new.get(EXPECTED_TYPE_FIELD):
            legacy = new.pop(LEGACY_EXPECTED_TYPE_FIELD, None)
            if legacy:
                new[EXPECTED_TYPE_FIELD] = str(legacy)
            else:
                new[EXPECTED_TYPE_FIELD] = guess_media_type_from_tag(key, new).value
            changed.append(key)
        out[key] = new
    return out, changed
