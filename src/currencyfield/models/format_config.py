"""Formatting parameters shared by the formatter and the offset mapper."""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, Field

DEFAULT_CHUNK_SIZE = 3
DEFAULT_SEPARATOR = ","


class FormatConfig(BaseModel):
    """Immutable per-call formatting configuration.

    Neither ``symbol`` nor ``separator`` may contain digits or ``"."``.
    Display strings are parsed back by dropping every other character, so
    such a symbol or separator would leak into the canonical amount (with
    ``separator="."``, ``"1.234"`` parses as one point two three four). This
    is a caller contract and is not checked.
    """

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    separator: str = Field(default=DEFAULT_SEPARATOR, min_length=1, max_length=1)
    symbol: str = ""
    show_symbol: bool = True
    symbol_trailing: bool = True

    model_config = {"frozen": True}

    @property
    def symbol_prefix_length(self) -> int:
        """Characters the symbol occupies in front of the number."""
        if self.show_symbol and not self.symbol_trailing:
            return len(self.symbol)
        return 0

    def cache_key(self) -> str:
        """Stable short hash of every field, for keying derived values."""
        digest = hashlib.sha256(self.model_dump_json().encode("utf-8"))
        return digest.hexdigest()[:16]
