from __future__ import annotations
from typing import Protocol


class TranslationRegistrarPort(Protocol):
    def register_string(self, namespace: str, key: str, text: str) -> None: ...
