"""Arrears of ordinary pay between the last pay date and termination."""

from __future__ import annotations

import logging

from claims_engine.calculators.dates import days_between, parse_calendar_date
from claims_engine.calculators.rounding import split_at_cap
from claims_engine.calculators.types import EmployeeFacts, WageArrearsResult
from claims_engine.config import DEFAULT_RULES, ClaimRules

logger = logging.getLogger(__name__)


def calculate_wage_arrears(
    facts: EmployeeFacts, rules: ClaimRules = DEFAULT_RULES
) -> WageArrearsResult:
    """Calculate wage arrears owed at the end date.

    Arrears run for every calendar day from date_last_paid to end_date at
    the daily rate (salary / 52 / working days). The preferential part is
    capped per employee; the excess is unsecured.
    """
    last_paid = parse_calendar_date(facts.date_last_paid)
    end = parse_calendar_date(facts.end_date)

    arrears_days = 0
    if last_paid is not None and end is not None and last_paid < end:
        arrears_days = max(0, days_between(last_paid, end))
    else:
        logger.debug("No wage arrears period (last paid %r, end %r)", last_paid, end)

    total = arrears_days * facts.daily_wage
    preferential, unsecured = split_at_cap(total, rules.preferential_wage_cap)

    return WageArrearsResult(
        preferential=preferential,
        unsecured=unsecured,
        total=preferential + unsecured,
        arrears_days=arrears_days,
    )
