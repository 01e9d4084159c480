# tagcontent/database/repos/attachment_repo.py
from __future__ import annotations

from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from tagcontent.database.models.media import Attachment
from tagcontent.database.repos._mapping import sizes_to_json, to_domain_attachment
from tagcontent.domain.entities.product import AttachmentInfo
from tagcontent.domain.entities.resolved_media import MediaSize


class SqlAttachmentRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def add(
        self,
        *,
        url: str,
        title: str = "",
        alt: str = "",
        mime_type: str = "",
        sizes: Optional[Dict[str, MediaSize]] = None,
    ) -> str:
        row = Attachment(url=url, title=title, alt=alt, mime_type=mime_type, sizes=sizes_to_json(sizes or {}))
        self.db.add(row)
        self.db.flush()
        return str(row.id)

    def delete(self, attachment_id: str) -> bool:
        row = self._get(attachment_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    def resolve_attachment(self, attachment_id: str) -> Optional[AttachmentInfo]:
        row = self._get(attachment_id)
        return to_domain_attachment(row) if row is not None else None

    def _get(self, attachment_id: str) -> Optional[Attachment]:
        try:
            key = UUID(str(attachment_id))
        except ValueError:
            return None
        return self.db.get(Attachment, key)
