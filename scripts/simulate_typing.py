"""Replay keystrokes through a currency field session and print each step.

Usage:
    python scripts/simulate_typing.py 1 2 3 4 . 5 --symbol " ₩"
    python scripts/simulate_typing.py 9 9 9 9 --max-value 1000 --leading-symbol --symbol "$"

Each positional argument is appended to the current canonical amount, the
way a text widget proposes its new text after a keystroke. ``<`` deletes the
last character.
"""

from __future__ import annotations

import argparse
from decimal import Decimal
from typing import Any

from currencyfield.core.logging import configure
from currencyfield.models.bound import Bound
from currencyfield.models.format_config import FormatConfig
from currencyfield.session.field_session import CurrencyFieldSession

BACKSPACE = "<"


def next_text(canonical: str, key: str) -> str:
    """Text the widget would propose after ``key`` is pressed at the end."""
    if key == BACKSPACE:
        return canonical[:-1]
    return canonical + key


def replay(session: CurrencyFieldSession, keys: list[str]) -> list[dict[str, Any]]:
    """Feed ``keys`` to ``session``; one row per key with the resulting state."""
    rows: list[dict[str, Any]] = []
    for key in keys:
        result = session.propose(next_text(session.canonical, key))
        caret = len(session.canonical)
        rows.append({
            "key": key,
            "accepted": result.accepted,
            "reason": result.reason.value if result.reason else "",
            "canonical": session.canonical,
            "display": session.display,
            "caret": session.caret_to_display(caret),
        })
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay keystrokes through a currency field")
    parser.add_argument("keys", nargs="*", help="Keys to type ('<' is backspace)")
    parser.add_argument("--init", default="0", help="Initial amount")
    parser.add_argument("--symbol", default="₩", help="Currency symbol")
    parser.add_argument("--leading-symbol", action="store_true", help="Put the symbol in front")
    parser.add_argument("--hide-symbol", action="store_true", help="Do not show the symbol")
    parser.add_argument("--chunk-size", type=int, default=3, help="Digits per group")
    parser.add_argument("--separator", default=",", help="Group separator")
    parser.add_argument("--max-value", default=None, help="Largest accepted amount")
    parser.add_argument("--max-length", type=int, default=None, help="Longest accepted amount")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    configure(args.log_level)

    config = FormatConfig(
        chunk_size=args.chunk_size,
        separator=args.separator,
        symbol=args.symbol,
        show_symbol=not args.hide_symbol,
        symbol_trailing=not args.leading_symbol,
    )
    bound = Bound(
        max_value=Decimal(args.max_value) if args.max_value is not None else None,
        max_length=args.max_length,
    )
    session = CurrencyFieldSession(config=config, bound=bound, init_amount=args.init)

    print(f"start: {session.canonical!r} -> {session.display!r}")
    for row in replay(session, args.keys):
        status = "ok" if row["accepted"] else f"rejected ({row['reason']})"
        print(
            f"  {row['key']!r:>5} {status:<32} "
            f"{row['canonical']!r:<16} {row['display']!r:<20} caret={row['caret']}"
        )


if __name__ == "__main__":
    main()
