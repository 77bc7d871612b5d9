"""Edit ceilings enforced against every proposed canonical amount."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

# Largest value of a signed 64-bit integer, the ceiling of the integer flavor.
LONG_MAX_VALUE = 2**63 - 1
# One digit short of LONG_MAX_VALUE so any admitted amount fits.
LONG_MAX_LENGTH = len(str(LONG_MAX_VALUE)) - 1


class Bound(BaseModel):
    """Optional value and length ceilings, enforced independently.

    ``max_length`` counts characters of the canonical string, not the
    display string.
    """

    max_value: Optional[Decimal] = None
    max_length: Optional[int] = Field(default=None, ge=0)

    model_config = {"frozen": True}

    @classmethod
    def for_integer(
        cls, max_value: Optional[int] = None, max_length: Optional[int] = None
    ) -> Bound:
        """Bound for integer-valued amounts: both ceilings capped to a 64-bit integer."""
        value = LONG_MAX_VALUE if max_value is None else min(max_value, LONG_MAX_VALUE)
        length = LONG_MAX_LENGTH if max_length is None else min(max_length, LONG_MAX_LENGTH)
        return cls(max_value=Decimal(value), max_length=length)

    def exceeds_length(self, canonical: str) -> bool:
        return self.max_length is not None and len(canonical) > self.max_length

    def exceeds_value(self, value: Decimal) -> bool:
        return self.max_value is not None and value > self.max_value
