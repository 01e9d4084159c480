# tagcontent/common/naming/slugger.py
from __future__ import annotations

import hashlib
import re
import unicodedata

_slug_re = re.compile(r"[^a-z0-9]+")
_key_re = re.compile(r"^[a-z0-9_]+$")


def slugify(text: str, *, sep: str = "-", max_len: int = 64) -> str:
    """
    Deterministic, human-readable slug:
      - lowercases
      - NFKD normalize and strip to ASCII
      - collapse separators to a single `sep`
      - trim leading/trailing `sep`
      - truncate to `max_len`
      - returns '' if nothing remains

    Examples:
      "Exterior Color" -> "exterior-color"
      "  Funny__Name!! " -> "funny-name"
      "Éxämple" -> "example"
    """
    if text is None:
        return ""

    value = unicodedata.normalize("NFKD", str(text).strip().lower())
    value = value.encode("ascii", "ignore").decode("ascii")
    value = _slug_re.sub(sep, value).strip(sep)

    if max_len > 0 and len(value) > max_len:
        value = value[:max_len].rstrip(sep)

    return value


def tag_key_from_label(label: str, *, max_len: int = 64) -> str:
    """
    Suggest a tag key for a label: "Hero Image" -> "hero_image".
    Mirrors what the admin form generates client-side.
    """
    return slugify(label, sep="_", max_len=max_len)


def is_valid_tag_key(key: object) -> bool:
    return isinstance(key, str) and bool(_key_re.match(key))


def string_name(prefix: str, text: str) -> str:
    """Stable registrar name for a translatable string: '<prefix>_<md5(text)>'."""
    digest = hashlib.md5(text.encode("utf-8")).hexdigest()
    return f"{prefix}_{digest}"
