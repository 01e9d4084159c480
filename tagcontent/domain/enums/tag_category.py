from __future__ import annotations
from enum import StrEnum


class TagCategory(StrEnum):
    primary = "primary"
    secondary = "secondary"
    reference = "reference"
    media = "media"
    gallery = "gallery"
    other = "other"
