# tagcontent/services/storage/memory.py
"""
Dict-backed implementations of the storage and provider ports, for tests
and for running the resolvers without a database.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from tagcontent.domain.entities.localized_text import Ingredient, ProductDescription
from tagcontent.domain.entities.media_source import MediaAssignment, MediaSource
from tagcontent.domain.entities.product import AttachmentInfo, PlatformImage, ProductRef


class InMemoryTagStorage:
    def __init__(self, initial: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(dict(initial or {}))
        self.writes = 0

    def load_all_tags(self) -> Dict[str, Dict[str, Any]]:
        return copy.deepcopy(self._data)

    def persist_all_tags(self, tags: Mapping[str, Mapping[str, Any]]) -> None:
        self._data = copy.deepcopy({k: dict(v) for k, v in tags.items()})
        self.writes += 1


class InMemoryAssignments:
    def __init__(self) -> None:
        self._data: Dict[Tuple[int, str], MediaAssignment] = {}

    def get_assignment(self, product_id: int, tag_key: str) -> Optional[MediaAssignment]:
        return self._data.get((product_id, tag_key))

    def save(self, assignment: MediaAssignment) -> MediaAssignment:
        self._data[(assignment.product_id, assignment.tag_key)] = assignment
        return assignment

    def assign(self, product_id: int, tag_key: str, source: MediaSource) -> MediaAssignment:
        return self.save(MediaAssignment(product_id=product_id, tag_key=tag_key, source=source))

    def remove(self, product_id: int, tag_key: str) -> bool:
        return self._data.pop((product_id, tag_key), None) is not None

    def for_product(self, product_id: int) -> List[MediaAssignment]:
        return [a for (pid, _), a in self._data.items() if pid == product_id]


class InMemoryAttachments:
    def __init__(self, items: Optional[Mapping[str, AttachmentInfo]] = None):
        self._data: Dict[str, AttachmentInfo] = dict(items or {})

    def add(self, attachment_id: str, info: AttachmentInfo) -> None:
        self._data[str(attachment_id)] = info

    def delete(self, attachment_id: str) -> None:
        self._data.pop(str(attachment_id), None)

    def resolve_attachment(self, attachment_id: str) -> Optional[AttachmentInfo]:
        return self._data.get(str(attachment_id))


class StaticProductImages:
    """Fixed image lists per product id: index 0 primary, then gallery."""

    def __init__(self, images: Optional[Mapping[int, Sequence[PlatformImage]]] = None):
        self._data: Dict[int, List[PlatformImage]] = {pid: list(imgs) for pid, imgs in (images or {}).items()}
        self.calls = 0

    def set_images(self, product_id: int, images: Sequence[PlatformImage]) -> None:
        self._data[product_id] = list(images)

    def get_image_at(self, product: ProductRef, position: int) -> Optional[PlatformImage]:
        self.calls += 1
        images = self._data.get(product.product_id, [])
        if 0 <= position < len(images):
            return images[position]
        return None


class InMemoryProductContent:
    def __init__(self) -> None:
        self._ingredients: Dict[int, List[Ingredient]] = {}
        self._by_sku: Dict[str, List[Ingredient]] = {}
        self._descriptions: Dict[int, List[ProductDescription]] = {}
        self.lookups = 0

    def set_ingredients(self, product_id: int, ingredients: Sequence[Ingredient]) -> None:
        self._ingredients[product_id] = list(ingredients)

    def set_sku_ingredients(self, sku: str, ingredients: Sequence[Ingredient]) -> None:
        self._by_sku[sku] = list(ingredients)

    def set_descriptions(self, product_id: int, descriptions: Sequence[ProductDescription]) -> None:
        self._descriptions[product_id] = list(descriptions)

    def ingredients_for(self, product_id: int) -> List[Ingredient]:
        self.lookups += 1
        return list(self._ingredients.get(product_id, []))

    def ingredients_for_sku(self, sku: str) -> List[Ingredient]:
        self.lookups += 1
        return list(self._by_sku.get(sku, []))

    def descriptions_for(self, product_id: int) -> List[ProductDescription]:
        self.lookups += 1
        return list(self._descriptions.get(product_id, []))


class RecordingRegistrar:
    """Translation registrar that remembers what it was given."""

    def __init__(self) -> None:
        self.strings: List[Tuple[str, str, str]] = []

    def register_string(self, namespace: str, key: str, text: str) -> None:
        self.strings.append((namespace, key, text))
