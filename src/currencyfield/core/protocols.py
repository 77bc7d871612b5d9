"""Protocol interfaces for currencyfield abstractions.

Structural typing only: backends and mappings satisfy these without
inheriting from them, and tests can check conformance with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Display Cache
# ---------------------------------------------------------------------------

@runtime_checkable
class IDisplayCache(Protocol):
    """Grouped display text keyed by format config hash and canonical amount.

    Expired or unreadable entries read as a miss (None).
    Transport failures raise CacheError.
    """

    def get_grouped(self, config_key: str, canonical: str) -> str | None: ...

    def put_grouped(self, config_key: str, canonical: str, grouped: str, ttl: int) -> None: ...

    def invalidate(self, config_key: str, canonical: str) -> None: ...


# ---------------------------------------------------------------------------
# Offset Mapping
# ---------------------------------------------------------------------------

@runtime_checkable
class IOffsetMapping(Protocol):
    """Caret translation between the canonical and the displayed string."""

    def canonical_to_display(self, offset: int) -> int: ...

    def display_to_canonical(self, offset: int) -> int: ...
