"""Rounding and claim-split helpers.

Rounding:
- Internal compute at full Decimal precision
- Money to 2 decimals (pence) as the final step, half away from zero
- Week counts to 2 decimals for display consistency
- Day counts stay whole numbers
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
OUTPUT_PRECISION = Decimal("0.01")


def round_to_pence(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places, half away from zero."""
    return amount.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def round_weeks(weeks: Decimal) -> Decimal:
    """Round a week count to 2 decimal places."""
    return weeks.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def clamp_non_negative(amount: Decimal) -> Decimal:
    """Negative intermediates never become claims."""
    return amount if amount > 0 else ZERO


def split_at_cap(total: Decimal, cap: Decimal) -> tuple[Decimal, Decimal]:
    """Split a claim into (preferential, unsecured) at a preferential cap."""
    total = clamp_non_negative(total)
    preferential = min(total, cap)
    unsecured = clamp_non_negative(total - preferential)
    return preferential, unsecured
