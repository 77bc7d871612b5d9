"""Formatter for canonical amounts: grouping plus the currency symbol."""

from __future__ import annotations

from currencyfield.engine.sanitizer import divide, to_number_string, to_number_string_or_default
from currencyfield.models.format_config import DEFAULT_CHUNK_SIZE, DEFAULT_SEPARATOR, FormatConfig


def reverse_chunked(text: str, size: int, separator: str = DEFAULT_SEPARATOR) -> str:
    """Group ``text`` into ``size``-character chunks counted from the right.

    The leftmost chunk may be shorter than ``size``.
    """
    remain = len(text) % size
    chunks = [text[i:i + size] for i in range(remain, len(text), size)]
    if remain:
        chunks.insert(0, text[:remain])
    return separator.join(chunks)


def to_formatted_number_string(
    canonical: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Group the integer part and drop trailing zeros of the fraction.

    A blank amount formats as ``"0"``; a fraction that trims to nothing is
    omitted together with its decimal point.
    """
    integer, fraction = divide(to_number_string_or_default(canonical, "0"), ".")
    fraction = fraction.rstrip("0")
    formatted = reverse_chunked(integer, chunk_size, separator)
    if fraction:
        formatted += "." + fraction
    return formatted


def format_display(canonical: str, config: FormatConfig) -> str:
    """Full display string: grouped number plus the optional symbol."""
    return attach_symbol(
        to_formatted_number_string(canonical, config.chunk_size, config.separator), config
    )


def attach_symbol(number: str, config: FormatConfig) -> str:
    if not config.show_symbol:
        return number
    if config.symbol_trailing:
        return number + config.symbol
    return config.symbol + number


def parse_display(display: str) -> str:
    """Recover the numeric text from a display string.

    Separators and the symbol are non-numeric, so this is just
    ``to_number_string``. Trailing fractional zeros trimmed by formatting are
    not restored.
    """
    return to_number_string(display)
