# tagcontent/services/resolution/text_resolver.py
from __future__ import annotations

from typing import Dict, Iterable, Optional

from tagcontent.common.logging import get_logger
from tagcontent.common.naming.slugger import string_name
from tagcontent.domain.entities.localized_text import (
    Ingredient,
    LocalizedTextEntry,
    ProductDescription,
    ResolvedText,
)
from tagcontent.domain.errors import TextNotFound
from tagcontent.domain.policies.language import normalize_language_code
from tagcontent.domain.ports.translation import TranslationRegistrarPort
from tagcontent.services.translation.publisher import TranslationPublisher

logger = get_logger(__name__)

DEFAULT_NAMESPACE = "Ecwid Shopping Cart"


class TextResolver:
    """
    Picks the text for a language from a LocalizedTextEntry:

        default language -> base
        other language   -> its override if non-empty, else base

    Base is the terminal fallback, so resolution only fails when base is
    empty and no override applies.
    """

    def __init__(
        self,
        default_language: str = "en",
        registrars: Optional[Iterable[TranslationRegistrarPort]] = None,
        *,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.default_language = normalize_language_code(default_language, "en")
        self.publisher = TranslationPublisher(registrars or ())
        self.namespace = namespace

    def normalize(self, lang: Optional[str]) -> str:
        return normalize_language_code(lang, self.default_language)

    def resolve(self, entry: LocalizedTextEntry, lang: Optional[str] = None) -> ResolvedText:
        code = self.normalize(lang)

        if code != self.default_language:
            override = entry.override_for(code)
            if override:
                return ResolvedText(text=override, language_used=code, had_translation=True)

        if entry.base:
            return ResolvedText(text=entry.base, language_used=self.default_language, had_translation=False)
        raise TextNotFound(code)

    def resolve_or_empty(self, entry: LocalizedTextEntry, lang: Optional[str] = None) -> str:
        try:
            return self.resolve(entry, lang).text
        except TextNotFound:
            return ""

    def register_for_translation(
        self,
        entry: LocalizedTextEntry,
        *,
        name: str,
        namespace: Optional[str] = None,
    ) -> Optional[str]:
        """
        Offer the base text to external translation systems under a stable
        name ('<name>_<md5(text)>'). Never raises; returns the name used,
        or None when there was nothing to register.
        """
        if not entry.base:
            return None
        key = string_name(name, entry.base)
        self.publisher.publish(namespace or self.namespace, key, entry.base)
        return key

    # ---------------- product content ----------------

    def resolve_ingredient(self, ingredient: Ingredient, lang: Optional[str] = None) -> Dict[str, str]:
        return {
            "name": self.resolve_or_empty(ingredient.name, lang),
            "description": self.resolve_or_empty(ingredient.description, lang),
            "language": self.normalize(lang),
        }

    def register_ingredient(self, ingredient: Ingredient) -> None:
        self.register_for_translation(ingredient.name, name="ingredient_name")
        self.register_for_translation(ingredient.description, name="ingredient_desc")

    def resolve_description(self, description: ProductDescription, lang: Optional[str] = None) -> Dict[str, str]:
        return {
            "type": description.description_type,
            "title": self.resolve_or_empty(description.title, lang) or description.default_title,
            "content": self.resolve_or_empty(description.content, lang),
            "language": self.normalize(lang),
        }
