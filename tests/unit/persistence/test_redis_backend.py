"""Unit tests for RedisCacheBackend using fakeredis."""

from __future__ import annotations

import json
from unittest.mock import patch

import fakeredis
import pytest

from currencyfield.core.exceptions import CacheError
from currencyfield.core.protocols import IDisplayCache
from currencyfield.engine.transformation import CurrencyTransformation
from currencyfield.models.format_config import FormatConfig
from currencyfield.persistence.redis_backend import (
    DISPLAY_KEY_PREFIX,
    RedisCacheBackend,
    decode_entry,
    display_key,
)


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def client(fake_server):
    return fakeredis.FakeRedis(server=fake_server, decode_responses=True)


@pytest.fixture
def backend(fake_server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server, decode_responses=True)):
        return RedisCacheBackend(host="localhost", port=6379, db=0)


def test_satisfies_protocol(backend):
    assert isinstance(backend, IDisplayCache)


class TestKeys:
    def test_default_namespace(self, backend):
        assert backend.key("abc", "1234.5") == f"{DISPLAY_KEY_PREFIX}:abc:1234.5"
        assert display_key("abc", "1") == "currencyfield:display:abc:1"

    def test_custom_prefix(self, fake_server):
        with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server)):
            backend = RedisCacheBackend(key_prefix="shop:amounts")
        assert backend.key("abc", "7") == "shop:amounts:abc:7"


class TestGetGrouped:
    def test_returns_none_on_miss(self, backend):
        assert backend.get_grouped("cfg", "1234") is None

    def test_reads_json_entry(self, backend, client):
        client.set(display_key("cfg", "1234"), json.dumps({"grouped": "1,234"}))
        assert backend.get_grouped("cfg", "1234") == "1,234"


class TestMalformedEntries:
    @pytest.mark.parametrize("payload", [
        "not json",
        json.dumps(["1,234"]),
        json.dumps({"text": "1,234"}),
        json.dumps({"grouped": 1234}),
    ])
    def test_reads_as_miss_and_warns(self, backend, client, caplog, payload):
        client.set(display_key("cfg", "1234"), payload)
        with caplog.at_level("WARNING"):
            assert backend.get_grouped("cfg", "1234") is None
        assert "malformed display cache entry" in caplog.text

    def test_transformation_formats_and_overwrites(self, backend, client):
        config = FormatConfig(symbol=" ₩")
        key = display_key(config.cache_key(), "1234")
        client.set(key, "{truncated")
        assert CurrencyTransformation(config, cache=backend).filter("1234").text == "1,234 ₩"
        assert json.loads(client.get(key)) == {"grouped": "1,234"}

    def test_decode_entry_accepts_bytes(self):
        assert decode_entry(b'{"grouped": "9,999"}') == "9,999"
        assert decode_entry(b"\xff\xfe") is None


class TestPutGrouped:
    def test_stores_json_with_ttl(self, backend, client):
        backend.put_grouped("cfg", "1234", "1,234", 60)
        key = display_key("cfg", "1234")
        assert json.loads(client.get(key)) == {"grouped": "1,234"}
        assert 0 < client.ttl(key) <= 60

    def test_overwrites_existing_entry(self, backend):
        backend.put_grouped("cfg", "1234", "old", 60)
        backend.put_grouped("cfg", "1234", "1,234", 60)
        assert backend.get_grouped("cfg", "1234") == "1,234"


class TestInvalidate:
    def test_removes_existing_entry(self, backend):
        backend.put_grouped("cfg", "1234", "1,234", 60)
        backend.invalidate("cfg", "1234")
        assert backend.get_grouped("cfg", "1234") is None

    def test_noop_on_missing_entry(self, backend):
        backend.invalidate("cfg", "never_existed")


class TestBytesResponses:
    def test_round_trip_without_decoding(self, fake_server):
        with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server)) as redis_cls:
            backend = RedisCacheBackend(decode_responses=False)
        redis_cls.assert_called_once_with(host="localhost", port=6379, db=0, decode_responses=False)
        backend.put_grouped("cfg", "1234567", "1,234,567", 60)
        assert backend.get_grouped("cfg", "1234567") == "1,234,567"


class TestErrorWrapping:
    @pytest.mark.parametrize("call", [
        lambda b: b.get_grouped("cfg", "1"),
        lambda b: b.put_grouped("cfg", "1", "1", 1),
        lambda b: b.invalidate("cfg", "1"),
    ])
    def test_wraps_redis_error(self, call):
        b = RedisCacheBackend.__new__(RedisCacheBackend)
        b._key_prefix = DISPLAY_KEY_PREFIX
        b._client = None  # will cause AttributeError -> CacheError
        with pytest.raises(CacheError):
            call(b)


class TestAsDisplayCache:
    def test_transformations_share_entries_across_clients(self, fake_server, client):
        config = FormatConfig(symbol=" ₩")
        with patch("redis.Redis", side_effect=lambda **_: fakeredis.FakeRedis(
            server=fake_server, decode_responses=True,
        )):
            first = CurrencyTransformation(config, cache=RedisCacheBackend())
            second_cache = RedisCacheBackend()
        first.filter("9876543")
        assert second_cache.get_grouped(config.cache_key(), "9876543") == "9,876,543"
        assert CurrencyTransformation(config, cache=second_cache).filter("9876543").text == "9,876,543 ₩"
