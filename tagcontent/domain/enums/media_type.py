# tagcontent/domain/enums/media_type.py
from __future__ import annotations

from enum import StrEnum


class MediaType(StrEnum):
    image = "image"
    video = "video"
    audio = "audio"
    document = "document"

    @property
    def label(self) -> str:
        return self.value.title()
