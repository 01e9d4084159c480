from __future__ import annotations
from typing import Optional, Protocol
from tagcontent.domain.entities.media_source import MediaAssignment


class MediaAssignmentPort(Protocol):
    def get_assignment(self, product_id: int, tag_key: str) -> Optional[MediaAssignment]: ...
