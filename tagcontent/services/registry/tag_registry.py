# tagcontent/services/registry/tag_registry.py
from __future__ import annotations

from typing import Any, Dict, Optional

from tagcontent.common.cache.ttl_cache import TTLCache
from tagcontent.common.logging import get_logger
from tagcontent.common.naming.slugger import is_valid_tag_key
from tagcontent.domain.dataclasses.reports import SeedReport
from tagcontent.domain.entities.tag import Tag, parse_category, parse_media_type
from tagcontent.domain.enums import MediaType, TagCategory
from tagcontent.domain.errors import (
    DuplicateKey,
    InvalidKey,
    ProtectedTag,
    TagNotFound,
    TagValidationError,
)
from tagcontent.domain.policies.tag_defaults import backfill_expected_types, default_records, is_default_tag
from tagcontent.domain.ports.tag_storage import TagStoragePort

logger = get_logger(__name__)

_CACHE_KEY = ("tags", "all")


class TagRegistry:
    """
    Source of truth for which tags exist and what media type each expects.

    Storage holds the whole tag map as loosely-typed records; the registry
    hydrates it into `Tag` entities and keeps the result in memory (or in
    the shared `cache` when one is given) until the next write or
    `clear_cache()`. A write empties the whole shared cache, since cached
    media descriptors carry tag state. Default tags are seeded on first use.

    Writes validate everything first and then persist the whole map in one
    call, so a rejected write leaves storage untouched.
    """

    def __init__(self, storage: TagStoragePort, *, cache: Optional[TTLCache] = None) -> None:
        self.storage = storage
        self._cache = cache
        self._tags: Optional[Dict[str, Tag]] = None
        self._seeded = False

    # ---------------- reads ----------------

    def list_tags(self) -> Dict[str, Tag]:
        return dict(self._all())

    def list_by_category(self, category: str | TagCategory) -> Dict[str, Tag]:
        cat = parse_category(category)
        return {k: t for k, t in self._all().items() if t.category == cat}

    def list_by_media_type(self, media_type: str | MediaType) -> Dict[str, Tag]:
        mt = parse_media_type(media_type)
        return {k: t for k, t in self._all().items() if t.expected_media_type == mt}

    def get_tag(self, key: str) -> Optional[Tag]:
        if not isinstance(key, str) or not key:
            return None
        return self._all().get(key)

    def tag_exists(self, key: str) -> bool:
        return self.get_tag(key) is not None

    def expected_media_type(self, key: str) -> Optional[MediaType]:
        tag = self.get_tag(key)
        return tag.expected_media_type if tag else None

    # ---------------- writes ----------------

    def add_tag(
        self,
        key: str,
        label: str,
        description: str = "",
        category: str = TagCategory.primary,
        expected_media_type: str = MediaType.image,
    ) -> Tag:
        if not is_valid_tag_key(key):
            raise InvalidKey(key)
        # raises InvalidMediaType / InvalidCategory / InvalidTag before anything is written
        tag = Tag(
            key=key,
            label=label,
            expected_media_type=expected_media_type,
            description=description or "",
            category=category or TagCategory.primary,
        )
        records = self._records()
        if key in records:
            raise DuplicateKey(key)
        records[key] = tag.to_record()
        self._persist(records)
        logger.info("Added media tag %s (%s)", key, tag.expected_media_type.value)
        return tag

    def update_tag(
        self,
        key: str,
        *,
        label: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        expected_media_type: Optional[str] = None,
    ) -> Tag:
        current = self.get_tag(key)
        if current is None:
            raise TagNotFound(key)
        updated = current.with_changes(
            label=label,
            description=description,
            category=category,
            expected_media_type=expected_media_type,
        )
        records = self._records()
        rec = dict(records.get(key) or {})
        rec.update(updated.to_record())
        records[key] = rec
        self._persist(records)
        logger.info("Updated media tag %s", key)
        return updated

    def delete_tag(self, key: str) -> None:
        """Remove a tag. Assignments that reference it are left alone."""
        if is_default_tag(key):
            raise ProtectedTag(key)
        records = self._records()
        if key not in records:
            raise TagNotFound(key)
        del records[key]
        self._persist(records)
        logger.info("Deleted media tag %s", key)

    # ---------------- seeding ----------------

    def seed(self) -> SeedReport:
        """
        Write the default tag set into empty storage, or bring legacy
        records up to date. Safe to call repeatedly; persists only when
        something changed.
        """
        rpt = SeedReport()
        rpt.start()
        existing = self.storage.load_all_tags() or {}
        if not existing:
            defaults = default_records()
            self._persist(defaults)
            rpt.seeded = list(defaults)
            logger.info("Default media tags initialized (%d)", len(defaults))
        else:
            records, changed = backfill_expected_types(existing)
            if changed:
                self._persist(records)
                rpt.backfilled = changed
                logger.info("Back-filled expected media type on %d tag(s): %s", len(changed), ", ".join(changed))
        self._seeded = True
        self.clear_cache()
        rpt.stop()
        return rpt

    def clear_cache(self) -> None:
        self._tags = None
        if self._cache is not None:
            self._cache.invalidate("tags")

    # ---------------- internals ----------------

    def _ensure_seeded(self) -> None:
        if not self._seeded:
            self.seed()

    def _records(self) -> Dict[str, Dict[str, Any]]:
        self._ensure_seeded()
        return {k: dict(v) for k, v in (self.storage.load_all_tags() or {}).items()}

    def _persist(self, records: Dict[str, Dict[str, Any]]) -> None:
        self.storage.persist_all_tags(records)
        self._tags = None
        # resolved media embeds tag state, so the whole shared cache goes
        if self._cache is not None:
            self._cache.invalidate()

    def _all(self) -> Dict[str, Tag]:
        self._ensure_seeded()
        if self._cache is not None:
            return self._cache.get_or_set(_CACHE_KEY, self._hydrate)
        if self._tags is None:
            self._tags = self._hydrate()
        return self._tags

    def _hydrate(self) -> Dict[str, Tag]:
        tags: Dict[str, Tag] = {}
        for key, rec in (self.storage.load_all_tags() or {}).items():
            try:
                tags[key] = Tag.from_record(key, rec or {})
            except TagValidationError as e:
                logger.warning("Skipping stored tag %r: %s", key, e.message)
        return tags
