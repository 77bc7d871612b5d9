"""CurrencyFieldSession — the caller-owned state of one currency input.

The engine is stateless; this class is the single mutable cell holding the
committed canonical amount. A text widget forwards every proposed text to
:meth:`CurrencyFieldSession.propose`, shows :attr:`display`, and translates
its caret through :meth:`caret_to_display` / :meth:`caret_to_canonical`.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from currencyfield.core.config import AppSettings
from currencyfield.core.exceptions import ConfigurationError
from currencyfield.core.protocols import IDisplayCache
from currencyfield.core.types import (
    IntValueChangedCallback,
    TextChangedCallback,
    ValueChangedCallback,
)
from currencyfield.engine.edit_policy import UNBOUNDED, admit_initial_amount, evaluate_edit
from currencyfield.engine.sanitizer import to_number_string_or_default
from currencyfield.engine.transformation import CurrencyTransformation
from currencyfield.models.bound import Bound
from currencyfield.models.edit import EditResult, RejectReason, TransformedText
from currencyfield.models.format_config import FormatConfig
from currencyfield.persistence import create_cache
from currencyfield.session.locale_symbol import resolve_currency_symbol

logger = logging.getLogger(__name__)


class CurrencyFieldSession:
    """Edit session for a single currency amount.

    Callbacks fire only after an accepted edit, value first, then text.
    Rejected edits and edits while the field is read-only or disabled leave
    the amount untouched and fire nothing.
    """

    def __init__(
        self,
        *,
        config: FormatConfig,
        bound: Bound = UNBOUNDED,
        init_amount: Decimal | int | str = Decimal(0),
        on_text_changed: Optional[TextChangedCallback] = None,
        on_value_changed: Optional[ValueChangedCallback] = None,
        editable: bool = True,
        enabled: bool = True,
        reject_zero: bool = True,
        cache: IDisplayCache | None = None,
        cache_ttl: int = CurrencyTransformation.CACHE_TTL,
    ) -> None:
        self._bound = bound
        self._transformation = CurrencyTransformation(config, cache=cache, ttl=cache_ttl)
        self._on_text_changed = on_text_changed
        self._on_value_changed = on_value_changed
        self._reject_zero = reject_zero
        self.editable = editable
        self.enabled = enabled
        self._canonical = admit_initial_amount(init_amount, bound)

    @classmethod
    def for_integer(
        cls,
        *,
        config: FormatConfig,
        init_amount: int = 0,
        max_value: Optional[int] = None,
        max_length: Optional[int] = None,
        on_text_changed: Optional[TextChangedCallback] = None,
        on_value_changed: Optional[IntValueChangedCallback] = None,
        **kwargs,
    ) -> CurrencyFieldSession:
        """Session whose amount must fit a signed 64-bit integer.

        ``on_value_changed`` receives the amount with any fraction truncated.
        """
        value_handler: Optional[ValueChangedCallback] = None
        if on_value_changed is not None:
            def truncate(value: Decimal) -> None:
                on_value_changed(int(value))

            value_handler = truncate

        return cls(
            config=config,
            bound=Bound.for_integer(max_value, max_length),
            init_amount=Decimal(init_amount),
            on_text_changed=on_text_changed,
            on_value_changed=value_handler,
            **kwargs,
        )

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        **kwargs,
    ) -> CurrencyFieldSession:
        """Session wired from application settings (format, bound, cache)."""
        if settings is None:
            settings = AppSettings()
        return cls(
            config=format_config_from_settings(settings),
            bound=bound_from_settings(settings),
            cache=create_cache(settings),
            cache_ttl=settings.cache.ttl,
            **kwargs,
        )

    # ---- state ----

    @property
    def config(self) -> FormatConfig:
        return self._transformation.config

    @property
    def bound(self) -> Bound:
        return self._bound

    @property
    def canonical(self) -> str:
        return self._canonical

    @property
    def value(self) -> Decimal:
        return Decimal(to_number_string_or_default(self._canonical, "0"))

    @property
    def value_as_int(self) -> int:
        return int(self.value)

    @property
    def display(self) -> str:
        return self.transformed().text

    def transformed(self) -> TransformedText:
        return self._transformation.filter(self._canonical)

    # ---- editing ----

    def propose(self, raw: str) -> EditResult:
        """Offer the widget's new text; commit it if the edit policy accepts."""
        if not (self.editable and self.enabled):
            return EditResult.reject(RejectReason.READ_ONLY)

        result = evaluate_edit(
            self._canonical, raw, self._bound, reject_zero=self._reject_zero,
        )
        if not result.accepted:
            return result

        self._canonical = result.new_canonical
        logger.debug("Committed amount %s", self._canonical)
        if self._on_value_changed is not None:
            self._on_value_changed(self.value)
        if self._on_text_changed is not None:
            self._on_text_changed(self.display)
        return result

    # ---- caret ----

    def caret_to_display(self, offset: int) -> int:
        return self.transformed().mapping.canonical_to_display(offset)

    def caret_to_canonical(self, offset: int) -> int:
        return self.transformed().mapping.display_to_canonical(offset)


def format_config_from_settings(settings: AppSettings) -> FormatConfig:
    """FormatConfig from ``settings.formatting``; a missing symbol comes from the locale."""
    fmt = settings.formatting
    symbol = fmt.symbol if fmt.symbol is not None else resolve_currency_symbol()
    try:
        return FormatConfig(
            chunk_size=fmt.chunk_size,
            separator=fmt.separator,
            symbol=symbol,
            show_symbol=fmt.show_symbol,
            symbol_trailing=fmt.symbol_trailing,
        )
    except ValidationError as exc:
        raise ConfigurationError("format", str(exc)) from exc


def bound_from_settings(settings: AppSettings) -> Bound:
    bound = settings.bound
    try:
        if bound.integer_only:
            max_value = None if bound.max_value is None else int(bound.max_value)
            return Bound.for_integer(max_value, bound.max_length)
        return Bound(max_value=bound.max_value, max_length=bound.max_length)
    except ValidationError as exc:
        raise ConfigurationError("bound", str(exc)) from exc
