"""currencyfield exception hierarchy."""

from __future__ import annotations


class CurrencyFieldError(Exception):
    """Base exception for all currencyfield errors."""


class ConfigurationError(CurrencyFieldError):
    """Settings could not be turned into a valid format config or bound."""

    def __init__(self, section: str, message: str) -> None:
        self.section = section
        super().__init__(f"Invalid {section} configuration: {message}")


class CacheError(CurrencyFieldError):
    """Cache backend operation failed."""
