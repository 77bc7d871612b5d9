"""OffsetMapper — caret translation between canonical and display strings.

The display string is the canonical string with separators inserted into the
integer part (and possibly a trimmed fraction) plus an optional symbol. Both
directions are closed-form: the number of separators to the right of the
caret follows from how many characters lie to its right.

Terms used below, for a canonical string of length ``N`` and its grouped
numeric text (no symbol) of length ``M``:

- ``right``: characters to the right of the caret in the canonical string,
  ``N - 1 - offset``; ``-1`` when the caret sits at the end.
- separators to the right of a caret in the display string: one for every
  ``chunk_size + 1`` display characters.

Integer division truncates toward zero. Only the ``-1`` produced by an
end-of-string caret is ever negative, and it must count as zero separators.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from currencyfield.engine.formatter import to_formatted_number_string
from currencyfield.models.format_config import FormatConfig


def _div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // divisor
    return quotient if dividend >= 0 else -quotient


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


class OffsetMapper(BaseModel):
    """Pure offset mapping for one canonical amount under one FormatConfig.

    Build it with :meth:`for_amount`; rebuild it whenever the amount or the
    config changes.
    """

    canonical_length: int = Field(ge=0)
    grouped_length: int = Field(ge=0)
    chunk_size: int = Field(gt=0)
    symbol_prefix_length: int = Field(default=0, ge=0)
    symbol_leading: bool = False

    model_config = {"frozen": True}

    @classmethod
    def for_amount(cls, canonical: str, config: FormatConfig) -> OffsetMapper:
        grouped = to_formatted_number_string(canonical, config.chunk_size, config.separator)
        return cls.from_grouped(canonical, grouped, config)

    @classmethod
    def from_grouped(cls, canonical: str, grouped: str, config: FormatConfig) -> OffsetMapper:
        """Mapper for an already formatted numeric text (symbol excluded)."""
        return cls(
            canonical_length=len(canonical),
            grouped_length=len(grouped),
            chunk_size=config.chunk_size,
            symbol_prefix_length=config.symbol_prefix_length,
            symbol_leading=config.show_symbol and not config.symbol_trailing,
        )

    def canonical_to_display(self, offset: int) -> int:
        right = self.canonical_length - 1 - offset
        separators_at_right = _div(right, self.chunk_size)
        transformed = (self.grouped_length - 1) - (right + separators_at_right)
        return _clamp(transformed, 0, self.grouped_length) + self.symbol_prefix_length

    def display_to_canonical(self, offset: int) -> int:
        separators = max(_div(self.canonical_length - 1, self.chunk_size), 0)
        right = (self.grouped_length - 1) - offset
        separators_at_right = _div(right, self.chunk_size + 1)
        original = offset - (separators - separators_at_right)
        if self.symbol_leading:
            return _clamp(
                original - self.symbol_prefix_length,
                0,
                self.canonical_length - 1 + self.symbol_prefix_length,
            )
        return _clamp(original, 0, self.canonical_length)
