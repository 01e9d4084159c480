from __future__ import annotations

import re

_ctrl_re = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def clean_text(v: object, *, multiline: bool = False) -> str:
    """Strip control characters and surrounding whitespace; collapse newlines unless multiline."""
    if v is None:
        return ""
    s = _ctrl_re.sub("", str(v))
    if not multiline:
        s = " ".join(s.split())
    return s.strip()
