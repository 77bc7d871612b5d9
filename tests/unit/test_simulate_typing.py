"""Tests for the keystroke replay script."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from simulate_typing import BACKSPACE, main, next_text, replay  # noqa: E402

from currencyfield.models.bound import Bound  # noqa: E402
from currencyfield.models.format_config import FormatConfig  # noqa: E402
from currencyfield.session.field_session import CurrencyFieldSession  # noqa: E402


def _session(**kwargs) -> CurrencyFieldSession:
    return CurrencyFieldSession(config=FormatConfig(symbol=" ₩"), **kwargs)


class TestNextText:
    def test_appends_key(self):
        assert next_text("12", "3") == "123"

    def test_backspace_drops_last_character(self):
        assert next_text("123", BACKSPACE) == "12"


class TestReplay:
    def test_typing_builds_grouped_display(self):
        rows = replay(_session(), list("12345"))
        assert [row["display"] for row in rows] == ["1 ₩", "12 ₩", "123 ₩", "1,234 ₩", "12,345 ₩"]
        assert rows[-1]["caret"] == len("12,345")

    def test_second_point_is_rejected(self):
        rows = replay(_session(init_amount="1.5"), ["."])
        assert rows[-1]["accepted"] is False
        assert rows[-1]["reason"] == "second_decimal_point"
        assert rows[-1]["canonical"] == "1.5"

    def test_trailing_point_is_normalized_away(self):
        rows = replay(_session(init_amount=1), [".", "5"])
        assert [row["canonical"] for row in rows] == ["1", "15"]

    def test_backspace_to_empty_is_rejected(self):
        rows = replay(_session(init_amount=7), [BACKSPACE])
        assert rows[0]["reason"] == "zero_or_unparsable"
        assert rows[0]["canonical"] == "7"

    def test_bound_stops_growth(self):
        rows = replay(_session(init_amount=500, bound=Bound(max_value=Decimal(1000))), ["0"])
        assert rows[0]["reason"] == "too_large"
        assert rows[0]["display"] == "500 ₩"


def test_main_prints_each_step(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["simulate_typing.py", "1", "2", "3", "4", "--symbol", "$", "--leading-symbol"])
    main()
    out = capsys.readouterr().out
    assert "start: '0' -> '$0'" in out
    assert "'$1,234'" in out
