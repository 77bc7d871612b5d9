"""In-memory display cache, single process, with per-entry expiry."""

from __future__ import annotations

import time
from typing import Callable


class MemoryCacheBackend:
    """Dict-backed IDisplayCache.

    Entries expire ``ttl`` seconds after they are put. Expired entries are
    dropped when they are next read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[tuple[str, str], tuple[float, str]] = {}

    def get_grouped(self, config_key: str, canonical: str) -> str | None:
        entry = self._entries.get((config_key, canonical))
        if entry is None:
            return None
        expires_at, grouped = entry
        if self._clock() >= expires_at:
            del self._entries[(config_key, canonical)]
            return None
        return grouped

    def put_grouped(self, config_key: str, canonical: str, grouped: str, ttl: int) -> None:
        self._entries[(config_key, canonical)] = (self._clock() + ttl, grouped)

    def invalidate(self, config_key: str, canonical: str) -> None:
        self._entries.pop((config_key, canonical), None)

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for expires_at, _ in self._entries.values() if now < expires_at)
