"""Pluggable display caches behind the IDisplayCache protocol."""

from __future__ import annotations

import logging

from currencyfield.core.config import AppSettings
from currencyfield.core.protocols import IDisplayCache
from currencyfield.persistence.memory_backend import MemoryCacheBackend
from currencyfield.persistence.redis_backend import RedisCacheBackend

logger = logging.getLogger(__name__)


def create_cache(settings: AppSettings | None = None) -> IDisplayCache | None:
    """Create the display cache selected by ``settings.cache.backend``.

    Returns:
        A cache backend, or None when caching is disabled.
    """
    if settings is None:
        settings = AppSettings()

    backend = settings.cache.backend
    if backend == "memory":
        return MemoryCacheBackend()
    if backend == "redis":
        logger.info(
            "Using Redis display cache at %s:%s/%s",
            settings.redis.host, settings.redis.port, settings.redis.db,
        )
        return RedisCacheBackend(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            decode_responses=settings.redis.decode_responses,
            key_prefix=settings.redis.key_prefix,
        )
    return None


__all__ = ["MemoryCacheBackend", "RedisCacheBackend", "create_cache"]
