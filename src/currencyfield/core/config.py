"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings


class FormatSettings(BaseSettings):
    """Display formatting knobs (grouping and currency symbol)."""

    model_config = {"env_prefix": "CURRENCYFIELD_FORMAT_"}

    chunk_size: int = 3
    separator: str = ","
    symbol: str | None = None  # None: resolve from the process locale
    show_symbol: bool = True
    symbol_trailing: bool = True


class BoundSettings(BaseSettings):
    """Edit ceilings. Unset means unbounded."""

    model_config = {"env_prefix": "CURRENCYFIELD_BOUND_"}

    max_value: Decimal | None = None
    max_length: int | None = None
    integer_only: bool = False  # clamp to the 64-bit integer flavor


class CacheConfig(BaseSettings):
    """Display memo configuration."""

    model_config = {"env_prefix": "CURRENCYFIELD_CACHE_"}

    backend: Literal["none", "memory", "redis"] = "none"
    ttl: int = 300


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "CURRENCYFIELD_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    decode_responses: bool = True
    key_prefix: str = "currencyfield:display"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CURRENCYFIELD_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    formatting: FormatSettings = FormatSettings()
    bound: BoundSettings = BoundSettings()
    cache: CacheConfig = CacheConfig()
    redis: RedisConfig = RedisConfig()
