# tagcontent/database/repos/tag_storage_repo.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from tagcontent.database.models.options import Option

TAGS_OPTION = "media_tags"


class SqlTagStorage:
    """TagStoragePort over one JSON row in the `option` table."""

    def __init__(self, db: Session, *, option_name: str = TAGS_OPTION) -> None:
        self.db = db
        self.option_name = option_name
        self.writes = 0

    def _row(self) -> Optional[Option]:
        stmt = select(Option).where(Option.name == self.option_name).limit(1)
        return self.db.execute(stmt).scalars().first()

    def load_all_tags(self) -> Dict[str, Dict[str, Any]]:
        row = self._row()
        if row is None or not isinstance(row.value, dict):
            return {}
        return {k: dict(v) for k, v in row.value.items() if isinstance(v, dict)}

    def persist_all_tags(self, tags: Mapping[str, Mapping[str, Any]]) -> None:
        value = {k: dict(v) for k, v in tags.items()}
        row = self._row()
        if row is None:
            self.db.add(Option(name=self.option_name, value=value))
        else:
            # new object so the JSON column is seen as changed
            row.value = value
        self.db.flush()
        self.writes += 1
