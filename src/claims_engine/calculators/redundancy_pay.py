"""Statutory redundancy pay, tiered by age and length of service."""

from __future__ import annotations

import logging
from decimal import Decimal

from claims_engine.calculators.dates import complete_years_between, parse_calendar_date
from claims_engine.calculators.limit_table import LimitTableInput, lookup_weekly_cap
from claims_engine.calculators.rounding import ZERO, clamp_non_negative
from claims_engine.calculators.types import EmployeeFacts, RedundancyPayResult
from claims_engine.config import DEFAULT_RULES, ClaimRules

logger = logging.getLogger(__name__)

MINIMUM_AGE = 18
MINIMUM_FULL_YEARS = 2


def redundancy_multiplier(age: int) -> Decimal:
    """Weeks of pay earned by one full year of service at a given age.

    - 41 and over: 1.5 weeks
    - 22 to 40: 1 week
    - 18 to 21: 0.5 week
    """
    if age >= 41:
        return Decimal("1.5")
    if age >= 22:
        return Decimal("1")
    if age >= 18:
        return Decimal("0.5")
    return ZERO


def redundancy_weeks(
    age_at_dismissal: int, full_service_years: int, rules: ClaimRules = DEFAULT_RULES
) -> Decimal:
    """Weeks of redundancy pay for the completed years of service.

    Years are counted backwards from dismissal: the most recent year is at
    the employee's age at dismissal, the one before at a year younger, and
    so on.
    """
    weeks = ZERO
    for i in range(full_service_years):
        age_for_year = age_at_dismissal - (full_service_years - 1 - i)
        weeks += redundancy_multiplier(age_for_year)
    return min(rules.max_redundancy_weeks, weeks)


def calculate_redundancy_pay(
    facts: EmployeeFacts,
    limit_table: LimitTableInput,
    rules: ClaimRules = DEFAULT_RULES,
) -> RedundancyPayResult:
    """Calculate statutory redundancy pay. Redundancy pay is never preferential.

    Requires age 18 at dismissal and two full years of service. Service is
    capped at the statutory maximum years, and the weekly wage is capped at
    the limit in force on the end date.
    """
    start = parse_calendar_date(facts.start_date)
    end = parse_calendar_date(facts.end_date)
    birth = parse_calendar_date(facts.date_of_birth)
    if start is None or end is None or birth is None:
        logger.debug("Redundancy pay skipped: start, end or birth date missing")
        return RedundancyPayResult()

    age_at_dismissal = complete_years_between(birth, end)
    full_service_years = min(rules.max_service_years, complete_years_between(start, end))

    if age_at_dismissal < MINIMUM_AGE or full_service_years < MINIMUM_FULL_YEARS:
        logger.debug(
            "Not eligible for redundancy pay: age %s, full years %s",
            age_at_dismissal,
            full_service_years,
        )
        return RedundancyPayResult()

    weeks = redundancy_weeks(age_at_dismissal, full_service_years, rules)
    weekly_cap = lookup_weekly_cap(limit_table, end, fallback=rules.fallback_weekly_cap)
    weekly_wage = min(facts.average_or_basic_weekly_wage, weekly_cap)

    unsecured = clamp_non_negative(weeks * weekly_wage)
    return RedundancyPayResult(
        preferential=ZERO,
        unsecured=unsecured,
        total=unsecured,
        redundancy_weeks=weeks,
        weekly_cap=weekly_cap,
    )
