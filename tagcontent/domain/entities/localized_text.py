# tagcontent/domain/entities/localized_text.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from tagcontent.domain.enums import default_title_for
from tagcontent.domain.policies.language import normalize_language_code


@dataclass(frozen=True)
class LocalizedTextEntry:
    """
    A piece of text in the default language (`base`) plus per-language
    overrides. Override keys are normalized ("nl_NL" -> "nl") on
    construction; blank keys are dropped.
    """
    base: str = ""
    overrides: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "base", self.base or "")
        norm: Dict[str, str] = {}
        for lang, text in (self.overrides or {}).items():
            code = normalize_language_code(lang)
            if code:
                norm[code] = text or ""
        object.__setattr__(self, "overrides", norm)

    def override_for(self, lang: str) -> str:
        return self.overrides.get(lang, "")

    @classmethod
    def from_value(cls, value: Any) -> "LocalizedTextEntry":
        """
        Accept either a plain string or a mapping shaped like
        {"base": "...", "translations": {"nl": "..."}}.
        """
        if isinstance(value, LocalizedTextEntry):
            return value
        if isinstance(value, Mapping):
            return cls(
                base=str(value.get("base") or ""),
                overrides=dict(value.get("translations") or value.get("overrides") or {}),
            )
        return cls(base="" if value is None else str(value))


@dataclass(frozen=True)
class ResolvedText:
    text: str
    language_used: str
    had_translation: bool = False


@dataclass(frozen=True)
class Ingredient:
    name: LocalizedTextEntry
    description: LocalizedTextEntry = field(default_factory=LocalizedTextEntry)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Ingredient":
        return cls(
            name=LocalizedTextEntry.from_value(record.get("name")),
            description=LocalizedTextEntry.from_value(record.get("description")),
        )


@dataclass(frozen=True)
class ProductDescription:
    description_type: str
    title: LocalizedTextEntry = field(default_factory=LocalizedTextEntry)
    content: LocalizedTextEntry = field(default_factory=LocalizedTextEntry)

    def __post_init__(self):
        object.__setattr__(self, "description_type", (self.description_type or "custom").strip().lower())

    @property
    def default_title(self) -> str:
        return default_title_for(self.description_type)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], description_type: Optional[str] = None) -> "ProductDescription":
        return cls(
            description_type=description_type or str(record.get("type") or "custom"),
            title=LocalizedTextEntry.from_value(record.get("title")),
            content=LocalizedTextEntry.from_value(record.get("content")),
        )
