"""CurrencyTransformation — canonical amount to display text plus caret mapping.

Optionally memoized through an IDisplayCache. Entries are keyed by the
config hash and the canonical amount, so one backend can serve any number
of sessions and configs.
"""

from __future__ import annotations

import logging

from currencyfield.core.exceptions import CacheError
from currencyfield.core.protocols import IDisplayCache
from currencyfield.engine.formatter import attach_symbol, to_formatted_number_string
from currencyfield.engine.offset_mapper import OffsetMapper
from currencyfield.models.edit import TransformedText
from currencyfield.models.format_config import FormatConfig

logger = logging.getLogger(__name__)


class CurrencyTransformation:
    """Visual transformation for one FormatConfig."""

    CACHE_TTL = 300  # 5 minutes

    def __init__(
        self,
        config: FormatConfig,
        cache: IDisplayCache | None = None,
        ttl: int = CACHE_TTL,
    ) -> None:
        self._config = config
        self._config_key = config.cache_key()
        self._cache = cache
        self._ttl = ttl

    @property
    def config(self) -> FormatConfig:
        return self._config

    def filter(self, canonical: str) -> TransformedText:
        grouped = self._grouped(canonical)
        return TransformedText(
            text=attach_symbol(grouped, self._config),
            mapping=OffsetMapper.from_grouped(canonical, grouped, self._config),
        )

    def _grouped(self, canonical: str) -> str:
        if self._cache is None:
            return self._format(canonical)

        try:
            cached = self._cache.get_grouped(self._config_key, canonical)
        except CacheError as exc:
            logger.warning("Display cache read failed, formatting directly: %s", exc)
            return self._format(canonical)
        if cached is not None:
            return cached

        grouped = self._format(canonical)
        try:
            self._cache.put_grouped(self._config_key, canonical, grouped, self._ttl)
        except CacheError as exc:
            logger.warning("Display cache write failed for %r: %s", canonical, exc)
        return grouped

    def _format(self, canonical: str) -> str:
        return to_formatted_number_string(canonical, self._config.chunk_size, self._config.separator)
