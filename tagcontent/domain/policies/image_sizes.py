# tagcontent/domain/policies/image_sizes.py
from __future__ import annotations

from typing import Dict, Mapping

from tagcontent.domain.entities.resolved_media import MediaSize

FULL = "full"

# (max width inclusive, size name)
_SIZE_BANDS = (
    (160, "thumbnail"),
    (400, "medium"),
    (800, "large"),
    (1500, "extra-large"),
)


def size_name_for_width(width: int) -> str:
    for limit, name in _SIZE_BANDS:
        if width <= limit:
            return name
    return "original"


def sizes_from_widths(widths: Mapping[int, str]) -> Dict[str, MediaSize]:
    """
    Name a platform image's renditions by width and add `full` for the
    widest one. Two widths that land in the same band keep the wider.
    """
    sizes: Dict[str, MediaSize] = {}
    for width in sorted(widths):
        url = widths[width]
        if not url:
            continue
        sizes[size_name_for_width(width)] = MediaSize(url=url, width=width)
    if sizes:
        widest = max(sizes.values(), key=lambda s: s.width)
        sizes[FULL] = widest
    return sizes


def with_full_size(sizes: Mapping[str, MediaSize], url: str) -> Dict[str, MediaSize]:
    """Guarantee a `full` entry, defaulting to the media's own URL."""
    out = dict(sizes)
    if FULL not in out:
        out[FULL] = MediaSize(url=url)
    return out
