# tagcontent/domain/entities/tag.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from tagcontent.common.naming.slugger import is_valid_tag_key
from tagcontent.common.strings.sanitize import clean_text
from tagcontent.domain.enums import MediaType, TagCategory
from tagcontent.domain.errors import InvalidCategory, InvalidKey, InvalidMediaType, InvalidTag

# option-store field names
EXPECTED_TYPE_FIELD = "expectedMediaType"
LEGACY_EXPECTED_TYPE_FIELD = "expected_media_type"


def parse_media_type(value: Any) -> MediaType:
    try:
        return MediaType(str(value))
    except ValueError:
        raise InvalidMediaType(value) from None


def parse_category(value: Any) -> TagCategory:
    try:
        return TagCategory(str(value))
    except ValueError:
        raise InvalidCategory(value) from None


@dataclass(frozen=True)
class Tag:
    """
    A named content slot a product can fill (e.g. `hero_image`).

    `key` is the identity and never changes; everything else is editable
    through `with_changes()`, which returns a new Tag.
    """
    key: str
    label: str
    expected_media_type: MediaType = MediaType.image
    description: str = ""
    category: TagCategory = TagCategory.primary

    def __post_init__(self):
        if not is_valid_tag_key(self.key):
            raise InvalidKey(self.key)
        label = clean_text(self.label)
        if not label:
            raise InvalidTag("Tag label is required", details={"tag_key": self.key})
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "description", clean_text(self.description, multiline=True))
        object.__setattr__(self, "expected_media_type", parse_media_type(self.expected_media_type))
        object.__setattr__(self, "category", parse_category(self.category))

    def with_changes(
        self,
        *,
        label: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        expected_media_type: Optional[str] = None,
    ) -> "Tag":
        changes: Dict[str, Any] = {}
        if label is not None:
            changes["label"] = label
        if description is not None:
            changes["description"] = description
        if category is not None:
            changes["category"] = category
        if expected_media_type is not None:
            changes["expected_media_type"] = expected_media_type
        return replace(self, **changes)

    # ---- option-store records ----

    def to_record(self) -> Dict[str, str]:
        return {
            "name": self.label,
            "label": self.label,
            "description": self.description,
            "category": self.category.value,
            EXPECTED_TYPE_FIELD: self.expected_media_type.value,
        }

    @classmethod
    def from_record(cls, key: str, record: Mapping[str, Any]) -> "Tag":
        """
        Hydrate from a stored record. Stored data predates validation, so an
        unknown category degrades to `other` and a missing label to the key.
        """
        raw_type = record.get(EXPECTED_TYPE_FIELD) or record.get(LEGACY_EXPECTED_TYPE_FIELD) or MediaType.image
        try:
            media_type = parse_media_type(raw_type)
        except InvalidMediaType:
            media_type = MediaType.image
        raw_cat = record.get("category") or TagCategory.other
        try:
            category = parse_category(raw_cat)
        except InvalidCategory:
            category = TagCategory.other
        return cls(
            key=key,
            label=record.get("label") or record.get("name") or key,
            expected_media_type=media_type,
            description=record.get("description") or "",
            category=category,
        )
