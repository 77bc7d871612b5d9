"""Sanitizer — reduces raw keystrokes to a numeric token.

Everything here is a pure function of its arguments. Nothing raises on
malformed input: unparsable text degrades to an empty string or to zero.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

_DIGITS = frozenset("0123456789")
_NUMERIC = _DIGITS | {"."}


def to_number_string(raw: str) -> str:
    """Keep ASCII digits and ``"."`` in their original order.

    Returns:
        The filtered string, empty when ``raw`` has neither.
    """
    return "".join(c for c in raw if c in _NUMERIC)


def to_number_string_or_default(raw: str, fallback: str) -> str:
    """``to_number_string`` with ``fallback`` for a blank result."""
    filtered = to_number_string(raw)
    return filtered if filtered.strip() else fallback


def to_decimal_or_zero(raw: str) -> Decimal:
    """Filter ``raw`` and parse it as an arbitrary-precision decimal.

    Returns:
        The parsed value, or ``Decimal(0)`` when the filtered string is empty
        or not a number (``"1.2.3"``, ``"."``).
    """
    filtered = to_number_string(raw)
    if not filtered:
        return Decimal(0)
    try:
        return Decimal(filtered)
    except InvalidOperation:
        return Decimal(0)


def decimal_to_canonical(value: Decimal) -> str:
    """Plain positional string of ``value``, never in exponent notation.

    Parsing folds leading zeros (``"007"`` -> ``"7"``) but keeps the scale,
    so ``"1.50"`` stays ``"1.50"``.
    """
    return format(value, "f")


def divide(text: str, delimiter: str, ignore_case: bool = False) -> tuple[str, str]:
    """Split ``text`` on the first ``delimiter``.

    Returns:
        ``(before, after)``, or ``(text, "")`` when ``delimiter`` is absent.
    """
    if ignore_case:
        index = text.casefold().find(delimiter.casefold())
    else:
        index = text.find(delimiter)
    if index == -1:
        return text, ""
    return text[:index], text[index + len(delimiter):]
