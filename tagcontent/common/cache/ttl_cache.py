# tagcontent/common/cache/ttl_cache.py
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass
class CacheEntry:
    value: Any
    created_at: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        return now > self.created_at + self.ttl


class TTLCache:
    """
    Small in-process cache with per-entry TTL, keyed by tuples such as
    (product_id, field). A ttl of 0 turns every call into a miss.

    Keys whose first element is a product id can be dropped together with
    `invalidate(product_id)`.
    """

    def __init__(self, ttl: float = 300, max_size: int = 1000, clock: Callable[[], float] = time.monotonic):
        self.ttl = float(ttl)
        self.max_size = max(1, int(max_size))
        self._clock = clock
        self._data: Dict[Tuple[Hashable, ...], CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: Tuple[Hashable, ...], default: Any = None) -> Any:
        if not self.enabled:
            return default
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._data[key]
                return default
            return entry.value

    def set(self, key: Tuple[Hashable, ...], value: Any) -> None:
        if not self.enabled:
            return
        with self._lock:
            now = self._clock()
            if len(self._data) >= self.max_size and key not in self._data:
                self._evict(now)
            self._data[key] = CacheEntry(value=value, created_at=now, ttl=self.ttl)

    def get_or_set(self, key: Tuple[Hashable, ...], factory: Callable[[], T]) -> T:
        hit = self.get(key, _MISSING)
        if hit is not _MISSING:
            return hit
        value = factory()
        self.set(key, value)
        return value

    def invalidate(self, scope: Optional[Hashable] = None) -> int:
        """Drop everything (scope=None) or every key whose first element == scope."""
        with self._lock:
            if scope is None:
                count = len(self._data)
                self._data.clear()
                return count
            doomed = [k for k in self._data if k and k[0] == scope]
            for k in doomed:
                del self._data[k]
            return len(doomed)

    # ---------------- internals ----------------

    def _evict(self, now: float) -> None:
        expired = [k for k, e in self._data.items() if e.is_expired(now)]
        for k in expired:
            del self._data[k]
        if len(self._data) >= self.max_size:
            oldest = min(self._data, key=lambda k: self._data[k].created_at)
            del self._data[oldest]
