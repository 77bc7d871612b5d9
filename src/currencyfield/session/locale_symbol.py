"""Default currency symbol taken from the process locale."""

from __future__ import annotations

import locale

FALLBACK_SYMBOL = "₩"


def resolve_currency_symbol(fallback: str = FALLBACK_SYMBOL) -> str:
    """Currency symbol of the active ``LC_MONETARY`` locale.

    Reads the locale the application already selected and never calls
    ``setlocale``. The C/POSIX locale has no symbol, so ``fallback`` is
    returned there.
    """
    symbol = locale.localeconv().get("currency_symbol") or ""
    return symbol or fallback
