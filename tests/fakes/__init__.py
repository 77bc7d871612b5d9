"""Shared test doubles: memory cache, failing cache, callback recorder."""

from __future__ import annotations

from decimal import Decimal

from currencyfield.core.exceptions import CacheError
from currencyfield.persistence.memory_backend import MemoryCacheBackend


class FailingCacheBackend:
    """IDisplayCache whose every call fails like an unreachable Redis."""

    def get_grouped(self, config_key: str, canonical: str) -> str | None:
        raise CacheError(f"GET failed for {config_key}:{canonical}")

    def put_grouped(self, config_key: str, canonical: str, grouped: str, ttl: int) -> None:
        raise CacheError(f"SETEX failed for {config_key}:{canonical}")

    def invalidate(self, config_key: str, canonical: str) -> None:
        raise CacheError(f"DELETE failed for {config_key}:{canonical}")


class ManualClock:
    """Monotonic clock stand-in advanced by hand."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CallbackRecorder:
    """Collects session callbacks in call order."""

    def __init__(self) -> None:
        self.texts: list[str] = []
        self.values: list[Decimal | int] = []
        self.calls: list[str] = []

    def on_text_changed(self, text: str) -> None:
        self.calls.append("text")
        self.texts.append(text)

    def on_value_changed(self, value: Decimal | int) -> None:
        self.calls.append("value")
        self.values.append(value)


__all__ = ["CallbackRecorder", "FailingCacheBackend", "ManualClock", "MemoryCacheBackend"]
