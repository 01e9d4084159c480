# tagcontent/domain/entities/resolved_media.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from tagcontent.domain.enums import MediaType, SourceKind


@dataclass(frozen=True)
class MediaSize:
    url: str
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("size dimensions must be >= 0")


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str = ""


@dataclass(frozen=True)
class ResolvedMedia:
    """
    Normalized media descriptor returned by resolution; never persisted.
    A type mismatch shows up as `validation.ok == False`, the media is
    still returned.
    """
    url: str
    title: str
    alt: str
    mime_type: str
    coarse_type: MediaType
    source_kind: SourceKind
    validation: ValidationResult
    sizes: Dict[str, MediaSize] = field(default_factory=dict)
    tag_key: Optional[str] = None
    product_id: Optional[int] = None
    is_fallback: bool = False

    def url_for_size(self, size: str) -> str:
        """
        Pick a rendition by name, degrading like the storefront does:
        full/original/large -> widest, medium -> large, thumbnail -> narrowest.
        """
        if size in self.sizes:
            return self.sizes[size].url
        if not self.sizes:
            return self.url
        by_width = sorted(self.sizes.values(), key=lambda s: s.width)
        if size in ("full", "original", "large"):
            return by_width[-1].url
        if size == "medium" and "large" in self.sizes:
            return self.sizes["large"].url
        if size == "thumbnail":
            return by_width[0].url
        return self.url

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["coarse_type"] = self.coarse_type.value
        d["source_kind"] = self.source_kind.value
        return d
