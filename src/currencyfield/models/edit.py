"""Edit proposal outcomes and the transformed text handed to the caller."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel

from currencyfield.engine.offset_mapper import OffsetMapper


class RejectReason(StrEnum):
    SECOND_DECIMAL_POINT = "second_decimal_point"
    ZERO_OR_UNPARSABLE = "zero_or_unparsable"
    TOO_LONG = "too_long"
    TOO_LARGE = "too_large"
    READ_ONLY = "read_only"


class EditResult(BaseModel):
    """Outcome of proposing a raw edit against the current canonical amount."""

    accepted: bool
    new_canonical: Optional[str] = None
    reason: Optional[RejectReason] = None

    model_config = {"frozen": True}

    @classmethod
    def accept(cls, canonical: str) -> EditResult:
        return cls(accepted=True, new_canonical=canonical)

    @classmethod
    def reject(cls, reason: RejectReason) -> EditResult:
        return cls(accepted=False, reason=reason)


class TransformedText(BaseModel):
    """Display string plus the caret mapping derived from the same inputs."""

    text: str
    mapping: OffsetMapper

    model_config = {"frozen": True}
