"""Accrued but untaken holiday pay at termination."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from claims_engine.calculators.dates import days_between, parse_calendar_date, with_year
from claims_engine.calculators.rounding import ZERO
from claims_engine.calculators.types import EmployeeFacts, HolidayPayResult
from claims_engine.config import DEFAULT_RULES, ClaimRules

logger = logging.getLogger(__name__)


def current_holiday_year_start(holiday_year_start: date, end: date) -> date:
    """Start of the holiday year in force on the end date."""
    aligned = with_year(holiday_year_start, end.year)
    if aligned > end:
        aligned = with_year(aligned, end.year - 1)
    return aligned


def calculate_holiday_pay(
    facts: EmployeeFacts, rules: ClaimRules = DEFAULT_RULES
) -> HolidayPayResult:
    """Calculate outstanding holiday pay.

    Entitlement accrues pro rata over the calendar days of the current
    holiday year up to the end date, plus days carried forward, less days
    taken. Holiday pay is entirely preferential.
    """
    holiday_year_start = parse_calendar_date(facts.holiday_year_start_date)
    end = parse_calendar_date(facts.end_date)
    if holiday_year_start is None or end is None:
        logger.debug("Holiday pay skipped: holiday year start or end date missing")
        return HolidayPayResult()

    year_start = current_holiday_year_start(holiday_year_start, end)
    days_elapsed = max(0, days_between(year_start, end))

    pro_rata = (
        Decimal(days_elapsed) / rules.holiday_year_days
    ) * facts.holiday_entitlement_days_per_year
    accrued = pro_rata + facts.holiday_days_carried_forward
    outstanding = accrued - facts.holiday_days_taken

    if outstanding <= 0:
        return HolidayPayResult()

    total = outstanding * facts.daily_wage
    if total <= 0:
        return HolidayPayResult(outstanding_days=outstanding)

    return HolidayPayResult(
        preferential=total,
        unsecured=ZERO,
        total=total,
        outstanding_days=outstanding,
    )
