# tagcontent/services/resolution/facade.py
from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Tuple

from tagcontent.common.cache.ttl_cache import TTLCache
from tagcontent.common.logging import get_logger
from tagcontent.domain.entities.localized_text import Ingredient, LocalizedTextEntry, ProductDescription, ResolvedText
from tagcontent.domain.entities.product import ProductRef
from tagcontent.domain.entities.resolved_media import ResolvedMedia
from tagcontent.domain.errors import MediaNotFound, ProviderUnavailable, TagNotFound
from tagcontent.domain.ports.product_content import ProductContentPort
from tagcontent.services.resolution.media_resolver import MediaResolver
from tagcontent.services.resolution.text_resolver import TextResolver

logger = get_logger(__name__)


class ResolutionFacade:
    """
    Single read-only entry point for rendering callers (REST handlers,
    template helpers). Nothing here mutates a tag or an assignment.

    `clear_cache(product_id)` is the hook the admin-save path calls after
    changing a product's assignments or content.
    """

    def __init__(
        self,
        media_resolver: MediaResolver,
        text_resolver: TextResolver,
        *,
        content: Optional[ProductContentPort] = None,
        cache: Optional[TTLCache] = None,
        default_size: str = "large",
    ) -> None:
        self.media = media_resolver
        self.text = text_resolver
        self.content = content
        self.cache = cache
        self.default_size = default_size

    # ---------------- core ----------------

    def resolve_media(self, product: ProductRef, tag_key: str) -> ResolvedMedia:
        return self.media.resolve(product, tag_key)

    def resolve_text(self, entry: LocalizedTextEntry, lang: Optional[str] = None) -> ResolvedText:
        return self.text.resolve(entry, lang)

    # ---------------- media helpers ----------------

    def resolve_all_media(self, product: ProductRef) -> Dict[str, ResolvedMedia]:
        """Every registered tag that resolves for the product; missing media is skipped."""
        out: Dict[str, ResolvedMedia] = {}
        for key in self.media.registry.list_tags():
            try:
                out[key] = self.media.resolve(product, key)
            except MediaNotFound:
                continue
        return out

    def media_url(self, product: ProductRef, tag_key: str, size: Optional[str] = None) -> Optional[str]:
        """Template helper: URL of the requested size, or None when nothing resolves."""
        try:
            return self.media.resolve(product, tag_key).url_for_size(size or self.default_size)
        except (MediaNotFound, TagNotFound, ProviderUnavailable) as e:
            logger.debug("No media url for %s on product %s: %s", tag_key, product.product_id, e.message)
            return None

    # ---------------- text helpers ----------------

    def resolve_ingredients(self, product: ProductRef, lang: Optional[str] = None) -> List[Dict[str, str]]:
        ingredients = self._cached(
            (product.product_id, "ingredients", product.sku), lambda: self._load_ingredients(product)
        )
        return [self.text.resolve_ingredient(i, lang) for i in ingredients]

    def resolve_descriptions(self, product: ProductRef, lang: Optional[str] = None) -> List[Dict[str, str]]:
        descriptions = self._cached((product.product_id, "descriptions"), lambda: self._load_descriptions(product))
        return [self.text.resolve_description(d, lang) for d in descriptions]

    def resolve_description(
        self, product: ProductRef, description_type: str, lang: Optional[str] = None
    ) -> Optional[Dict[str, str]]:
        wanted = (description_type or "").strip().lower()
        for d in self._cached((product.product_id, "descriptions"), lambda: self._load_descriptions(product)):
            if d.description_type == wanted:
                return self.text.resolve_description(d, lang)
        return None

    def clear_cache(self, product_id: Optional[int] = None) -> None:
        if self.cache is not None:
            self.cache.invalidate(product_id)
        if self.media.cache is not None and self.media.cache is not self.cache:
            self.media.cache.invalidate(product_id)

    # ---------------- internals ----------------

    def _cached(self, key: Tuple[Hashable, ...], factory):
        # key[0] is the product id so clear_cache(product_id) reaches it
        if self.cache is None:
            return factory()
        return self.cache.get_or_set(key, factory)

    def _load_ingredients(self, product: ProductRef) -> List[Ingredient]:
        if self.content is None:
            return []
        found = self.content.ingredients_for(product.product_id)
        if not found and product.sku:
            found = self.content.ingredients_for_sku(product.sku)
        return list(found or [])

    def _load_descriptions(self, product: ProductRef) -> List[ProductDescription]:
        if self.content is None:
            return []
        return list(self.content.descriptions_for(product.product_id) or [])
