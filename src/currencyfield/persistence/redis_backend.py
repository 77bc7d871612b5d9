"""Redis display cache, shareable across processes.

Each entry is a JSON object ``{"grouped": "<text>"}`` stored under
``<prefix>:<config hash>:<canonical>`` with a Redis-side TTL.
"""

from __future__ import annotations

import json
import logging

import redis

from currencyfield.core.exceptions import CacheError

logger = logging.getLogger(__name__)

DISPLAY_KEY_PREFIX = "currencyfield:display"


def display_key(config_key: str, canonical: str, prefix: str = DISPLAY_KEY_PREFIX) -> str:
    return f"{prefix}:{config_key}:{canonical}"


def encode_entry(grouped: str) -> str:
    return json.dumps({"grouped": grouped})


def decode_entry(payload: str | bytes) -> str | None:
    """Grouped text from a stored payload, or None if the payload is unusable."""
    try:
        grouped = json.loads(payload)["grouped"]
    except (json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError):
        return None
    return grouped if isinstance(grouped, str) else None


class RedisCacheBackend:
    """IDisplayCache backed by Redis.

    Transport errors surface as CacheError. A payload that does not decode
    is logged and read as a miss, so the next put overwrites it.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        decode_responses: bool = True,
        key_prefix: str = DISPLAY_KEY_PREFIX,
    ) -> None:
        self._key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=decode_responses,
        )

    def key(self, config_key: str, canonical: str) -> str:
        return display_key(config_key, canonical, self._key_prefix)

    def get_grouped(self, config_key: str, canonical: str) -> str | None:
        key = self.key(config_key, canonical)
        try:
            payload = self._client.get(key)
        except Exception as exc:
            raise CacheError(f"Redis GET failed for key={key!r}: {exc}") from exc
        if payload is None:
            return None
        grouped = decode_entry(payload)
        if grouped is None:
            logger.warning("Ignoring malformed display cache entry %s: %r", key, payload)
        return grouped

    def put_grouped(self, config_key: str, canonical: str, grouped: str, ttl: int) -> None:
        key = self.key(config_key, canonical)
        try:
            self._client.setex(key, ttl, encode_entry(grouped))
        except Exception as exc:
            raise CacheError(f"Redis SETEX failed for key={key!r}: {exc}") from exc

    def invalidate(self, config_key: str, canonical: str) -> None:
        key = self.key(config_key, canonical)
        try:
            self._client.delete(key)
        except Exception as exc:
            raise CacheError(f"Redis DELETE failed for key={key!r}: {exc}") from exc
