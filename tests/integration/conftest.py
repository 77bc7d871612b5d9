"""Integration test fixtures — a live Redis for the display cache."""

from __future__ import annotations

import os

import pytest
import redis

REDIS_HOST = os.environ.get("CURRENCYFIELD_REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("CURRENCYFIELD_REDIS_PORT", "6379"))
REDIS_DB = 15  # scratch database, flushed by the fixture


def _redis_available() -> bool:
    """Check if Redis is reachable."""
    try:
        return bool(redis.Redis(host=REDIS_HOST, port=REDIS_PORT, socket_connect_timeout=1).ping())
    except Exception:
        return False


skip_no_redis = pytest.mark.skipif(
    not _redis_available(),
    reason="Redis not available",
)


@pytest.fixture
def redis_client():
    """Client on the scratch database, emptied before and after each test."""
    client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB, decode_responses=True)
    client.flushdb()
    yield client
    client.flushdb()
