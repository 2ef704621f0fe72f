"""Statutory or contractual notice pay."""

from __future__ import annotations

import logging
from decimal import Decimal

from claims_engine.calculators.dates import (
    complete_years_between,
    parse_calendar_date,
    years_between,
)
from claims_engine.calculators.rounding import ZERO, clamp_non_negative
from claims_engine.calculators.types import ClaimType, EmployeeFacts, NoticePayResult
from claims_engine.config import DEFAULT_RULES, ClaimRules

logger = logging.getLogger(__name__)

ONE_MONTH = Decimal(1) / Decimal(12)


def statutory_notice_weeks(
    years_of_service: Decimal, full_years: int, rules: ClaimRules = DEFAULT_RULES
) -> int:
    """Statutory notice weeks for a length of service.

    One week after a month's service, then one week per full year from two
    years, up to the statutory maximum.
    """
    if years_of_service < ONE_MONTH:
        return 0
    if full_years >= 2:
        return min(rules.max_statutory_notice_weeks, full_years)
    return 1


def calculate_notice_pay(
    facts: EmployeeFacts, rules: ClaimRules = DEFAULT_RULES
) -> NoticePayResult:
    """Calculate notice pay. Notice pay is entirely unsecured."""
    start = parse_calendar_date(facts.start_date)
    end = parse_calendar_date(facts.end_date)
    if start is None or end is None:
        logger.debug("Notice pay skipped: start or end date missing")
        return NoticePayResult()

    notice_period = facts.contractual_notice_period_months
    if facts.claim_type == ClaimType.CONTRACTUAL and notice_period:
        # The stored period is used as a week count and converted to months
        # against the monthly wage.
        notice_weeks = clamp_non_negative(notice_period)
        monthly_wage = facts.salary / 12
        total = (notice_weeks / rules.weeks_per_month) * monthly_wage
    else:
        notice_weeks = Decimal(
            statutory_notice_weeks(
                years_between(start, end), complete_years_between(start, end), rules
            )
        )
        total = notice_weeks * facts.average_or_basic_weekly_wage

    total = clamp_non_negative(total)
    return NoticePayResult(
        preferential=ZERO,
        unsecured=total,
        total=total,
        notice_weeks=notice_weeks,
    )
