"""Edit acceptance: decides whether a raw proposal becomes the new amount.

Rejections are not errors: the caller keeps its current canonical amount and
may compare old and new values if it wants to give feedback.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from currencyfield.engine.sanitizer import decimal_to_canonical, to_decimal_or_zero
from currencyfield.models.bound import Bound
from currencyfield.models.edit import EditResult, RejectReason

logger = logging.getLogger(__name__)

UNBOUNDED = Bound()


def evaluate_edit(
    current: str,
    proposed: str,
    bound: Bound = UNBOUNDED,
    *,
    reject_zero: bool = True,
) -> EditResult:
    """Run the acceptance checks in order; the first failure wins.

    Args:
        current: Canonical amount currently committed.
        proposed: Raw text of the edit (keystroke, paste, composition).
        bound: Value and length ceilings.
        reject_zero: Reject proposals that parse to zero.

    Returns:
        Accepted result carrying the normalized canonical amount, or a
        rejection with its reason.
    """
    if "." in current and proposed.count(".") > 1:
        return _rejected(proposed, RejectReason.SECOND_DECIMAL_POINT)

    value = to_decimal_or_zero(proposed)
    # Unparsable text collapses to zero, so this check doubles as the
    # validity check. It also stops a user from typing 0 once a nonzero
    # amount exists, which is likely unintended; reject_zero=False lifts it.
    if reject_zero and value == 0:
        return _rejected(proposed, RejectReason.ZERO_OR_UNPARSABLE)

    canonical = decimal_to_canonical(value)
    if bound.exceeds_length(canonical):
        return _rejected(proposed, RejectReason.TOO_LONG)
    if bound.exceeds_value(value):
        return _rejected(proposed, RejectReason.TOO_LARGE)

    return EditResult.accept(canonical)


def admit_initial_amount(amount: Decimal | int | str, bound: Bound = UNBOUNDED) -> str:
    """Canonical form of a starting amount, or ``"0"`` if it breaks ``bound``.

    Zero is a valid starting amount; the zero rejection applies to edits only.
    Strings are sanitized like edits. Numbers are taken as given, so a
    negative or non-finite (NaN, Infinity) amount has no canonical form and
    also starts at ``"0"``.
    """
    if isinstance(amount, str):
        value = to_decimal_or_zero(amount)
    else:
        value = Decimal(amount)
        if not value.is_finite() or value < 0:
            logger.debug("Initial amount %s is not a displayable amount, starting at 0", amount)
            return "0"
    canonical = decimal_to_canonical(value)
    if bound.exceeds_value(value) or bound.exceeds_length(canonical):
        logger.debug("Initial amount %s outside bound %s, starting at 0", canonical, bound)
        return "0"
    return canonical


def _rejected(proposed: str, reason: RejectReason) -> EditResult:
    logger.debug("Rejected edit %r: %s", proposed, reason)
    return EditResult.reject(reason)
