"""Unpaid employer pension contributions."""

from __future__ import annotations

import logging

from claims_engine.calculators.dates import days_between, parse_calendar_date
from claims_engine.calculators.rounding import ZERO
from claims_engine.calculators.types import EmployeeFacts, PensionContributionResult
from claims_engine.config import DEFAULT_RULES, ClaimRules

logger = logging.getLogger(__name__)


def calculate_pension_contributions(
    facts: EmployeeFacts, rules: ClaimRules = DEFAULT_RULES
) -> PensionContributionResult:
    """Calculate employer contributions owed since they were last paid.

    The employer percentage applies to the wages earned over the unpaid
    period. Contributions are entirely preferential.
    """
    if not facts.pension_opted_in:
        return PensionContributionResult()

    last_paid = parse_calendar_date(facts.date_contributions_last_paid)
    end = parse_calendar_date(facts.end_date)
    if last_paid is None or end is None or last_paid >= end:
        logger.debug("Pension contributions skipped: no unpaid period")
        return PensionContributionResult()

    if facts.salary == 0 or facts.work_days_per_week == 0:
        return PensionContributionResult()

    days_owed = max(0, days_between(last_paid, end))
    wages_due = days_owed * facts.daily_wage

    if facts.employer_pension_percent <= 0 or wages_due <= 0:
        return PensionContributionResult(days_owed=days_owed)

    total = wages_due * (facts.employer_pension_percent / 100)
    return PensionContributionResult(
        preferential=total,
        unsecured=ZERO,
        total=total,
        days_owed=days_owed,
    )
