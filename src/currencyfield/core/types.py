"""Type aliases used across currencyfield."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

TextChangedCallback = Callable[[str], None]
ValueChangedCallback = Callable[[Decimal], None]
IntValueChangedCallback = Callable[[int], None]
