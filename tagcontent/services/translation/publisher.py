# tagcontent/services/translation/publisher.py
from __future__ import annotations

from typing import Iterable, List

from tagcontent.common.logging import get_logger
from tagcontent.domain.ports.translation import TranslationRegistrarPort

logger = get_logger(__name__)


class TranslationPublisher:
    """
    Hands translatable strings to every configured translation system.
    Registration is best effort: a failing registrar is logged and the
    remaining ones still run.
    """

    def __init__(self, registrars: Iterable[TranslationRegistrarPort] = ()) -> None:
        self._registrars: List[TranslationRegistrarPort] = list(registrars)

    def subscribe(self, registrar: TranslationRegistrarPort) -> None:
        self._registrars.append(registrar)

    def __len__(self) -> int:
        return len(self._registrars)

    def publish(self, namespace: str, key: str, text: str) -> int:
        """Returns how many registrars accepted the string."""
        if not text:
            return 0
        accepted = 0
        for registrar in self._registrars:
            try:
                registrar.register_string(namespace, key, text)
                accepted += 1
            except Exception:
                logger.warning(
                    "Translation registrar %s failed for %s",
                    type(registrar).__name__,
                    key,
                    exc_info=True,
                )
        return accepted
