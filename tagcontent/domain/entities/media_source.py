# tagcontent/domain/entities/media_source.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from tagcontent.domain.enums import SourceKind


@dataclass(frozen=True)
class UploadSource:
    """Media uploaded to the attachment store; payload is its opaque id."""
    attachment_id: str
    kind: ClassVar[SourceKind] = SourceKind.upload

    def __post_init__(self):
        if self.attachment_id is None or not str(self.attachment_id).strip():
            raise ValueError("attachment_id is required")
        object.__setattr__(self, "attachment_id", str(self.attachment_id).strip())


@dataclass(frozen=True)
class UrlSource:
    """Media hosted elsewhere, referenced by absolute URL."""
    url: str
    kind: ClassVar[SourceKind] = SourceKind.url

    def __post_init__(self):
        if not self.url or not str(self.url).strip():
            raise ValueError("url is required")
        object.__setattr__(self, "url", str(self.url).strip())


@dataclass(frozen=True)
class PlatformImageSource:
    """
    Image at a position of the product's ordered platform image list:
    0 is the primary image, N >= 1 is gallery index N-1.
    """
    position: int
    kind: ClassVar[SourceKind] = SourceKind.platform_image

    def __post_init__(self):
        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise ValueError("position must be an int")
        if self.position < 0:
            raise ValueError("position must be >= 0")


MediaSource = Union[UploadSource, UrlSource, PlatformImageSource]

# Stored record kinds; "ecwid" is the name older records use for platform images.
_PLATFORM_KINDS = {SourceKind.platform_image.value, "ecwid", "platformImage"}


@dataclass(frozen=True)
class MediaAssignment:
    """
    Binds one tag to one product with exactly one source. At most one
    assignment exists per (product_id, tag_key); saving replaces it.
    """
    product_id: int
    tag_key: str
    source: MediaSource

    @property
    def source_kind(self) -> SourceKind:
        return self.source.kind

    def to_record(self) -> Dict[str, Any]:
        rec: Dict[str, Any] = {"tag_name": self.tag_key, "media_type": self.source.kind.value}
        if isinstance(self.source, UploadSource):
            rec["attachment_id"] = self.source.attachment_id
        elif isinstance(self.source, UrlSource):
            rec["media_url"] = self.source.url
        else:
            rec["position"] = self.source.position
        return rec

    @classmethod
    def from_record(cls, product_id: int, record: Mapping[str, Any]) -> Optional["MediaAssignment"]:
        """
        Parse a loosely-typed stored record. A record whose payload for its
        kind is empty is treated as no assignment at all (returns None).
        """
        tag_key = record.get("tag_name") or record.get("tag_key")
        if not tag_key:
            return None
        kind = str(record.get("media_type") or record.get("source_kind") or "")
        source = parse_source(kind, record)
        if source is None:
            return None
        return cls(product_id=product_id, tag_key=str(tag_key), source=source)


def parse_source(kind: str, record: Mapping[str, Any]) -> Optional[MediaSource]:
    try:
        if kind == SourceKind.upload.value:
            aid = record.get("attachment_id")
            return UploadSource(aid) if aid not in (None, "", 0, "0") else None
        if kind == SourceKind.url.value:
            url = record.get("media_url") or record.get("url")
            return UrlSource(url) if url else None
        if kind in _PLATFORM_KINDS:
            pos = record.get("position", record.get("ecwid_position"))
            if pos is None or pos == "":
                return None
            return PlatformImageSource(int(pos))
    except (TypeError, ValueError):
        return None
    return None
