from __future__ import annotations
from typing import Any, Dict, Mapping, Protocol


class TagStoragePort(Protocol):
    """
    Persistent home of the tag map: key -> loosely-typed record
    (see Tag.to_record). The whole map is read and written at once.
    """
    def load_all_tags(self) -> Dict[str, Dict[str, Any]]: ...
    def persist_all_tags(self, tags: Mapping[str, Mapping[str, Any]]) -> None: ...
