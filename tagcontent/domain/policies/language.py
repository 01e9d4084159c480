# tagcontent/domain/policies/language.py
from __future__ import annotations

import re
from typing import Optional

_sep_re = re.compile(r"[_-]")


def normalize_language_code(code: Optional[str], default: str = "") -> str:
    """
    Reduce a locale to its language part:
        "nl_NL" -> "nl", "pt-BR" -> "pt", " DE " -> "de"
    Empty input normalizes to `default` (itself normalized).
    """
    s = (code or "").strip().lower()
    if s:
        s = _sep_re.split(s, 1)[0]
    if not s:
        d = (default or "").strip().lower()
        return _sep_re.split(d, 1)[0] if d else ""
    return s
