from __future__ import annotations
from enum import StrEnum


class SourceKind(StrEnum):
    upload = "upload"
    url = "url"
    platform_image = "platform_image"
    # produced by resolution only, never stored on an assignment
    fallback_platform = "fallback-platform"
