from __future__ import annotations
from typing import Optional, Protocol
from tagcontent.domain.entities.product import AttachmentInfo


class AttachmentStorePort(Protocol):
    # None when the attachment was deleted after being assigned
    def resolve_attachment(self, attachment_id: str) -> Optional[AttachmentInfo]: ...
