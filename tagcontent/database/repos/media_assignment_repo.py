# tagcontent/database/repos/media_assignment_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from tagcontent.database.models.media import ProductMedia
from tagcontent.database.repos._mapping import to_domain_assignment
from tagcontent.domain.entities.media_source import (
    MediaAssignment,
    PlatformImageSource,
    UploadSource,
    UrlSource,
)


class SqlMediaAssignmentRepo:
    """One row per (product_id, tag_key); saving again overwrites it."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _row(self, product_id: int, tag_key: str) -> Optional[ProductMedia]:
        stmt = (
            select(ProductMedia)
            .where(ProductMedia.product_id == product_id, ProductMedia.tag_key == tag_key)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def get_assignment(self, product_id: int, tag_key: str) -> Optional[MediaAssignment]:
        row = self._row(product_id, tag_key)
        return to_domain_assignment(row) if row is not None else None

    def for_product(self, product_id: int) -> List[MediaAssignment]:
        stmt = select(ProductMedia).where(ProductMedia.product_id == product_id).order_by(ProductMedia.tag_key)
        out = []
        for row in self.db.execute(stmt).scalars():
            a = to_domain_assignment(row)
            if a is not None:
                out.append(a)
        return out

    def save(self, assignment: MediaAssignment) -> MediaAssignment:
        row = self._row(assignment.product_id, assignment.tag_key)
        if row is None:
            row = ProductMedia(product_id=assignment.product_id, tag_key=assignment.tag_key)
            self.db.add(row)
        src = assignment.source
        row.source_kind = src.kind.value
        row.attachment_id = src.attachment_id if isinstance(src, UploadSource) else None
        row.media_url = src.url if isinstance(src, UrlSource) else None
        row.image_position = src.position if isinstance(src, PlatformImageSource) else None
        self.db.flush()
        return assignment

    def remove(self, product_id: int, tag_key: str) -> bool:
        res = self.db.execute(
            delete(ProductMedia).where(ProductMedia.product_id == product_id, ProductMedia.tag_key == tag_key)
        )
        return bool(res.rowcount)
