"""Calendar date parsing and interval arithmetic.

All dates are naive calendar dates, so intervals never drift with the local
timezone. Malformed input parses to None and never raises.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Union

CalendarDateInput = Union[date, str, None]

_DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DAYS_PER_YEAR = Decimal("365.25")


def parse_calendar_date(value: object) -> date | None:
    """Parse a YYYY-MM-DD value into a date.

    Any trailing time-of-day component ("2024-01-15T09:30:00Z") is ignored.
    date instances pass through; datetimes are reduced to their date.
    Anything else, or an impossible date such as 2023-02-30, gives None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    date_only = value.strip().split("T")[0]
    if not _DATE_SHAPE.match(date_only):
        return None

    try:
        return date.fromisoformat(date_only)
    except ValueError:
        return None


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end."""
    return (end - start).days


def years_between(start: date, end: date) -> Decimal:
    """Elapsed years from start to end, using 365.25 days per year."""
    return Decimal(days_between(start, end)) / DAYS_PER_YEAR


def complete_years_between(start: date, end: date) -> int:
    """Anniversaries of start reached by end (age in years, full years served).

    A 29 February start reaches its anniversary on 1 March in common years.
    Negative when end precedes start.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def with_year(value: date, year: int) -> date:
    """Move a date to another year; 29 February becomes 1 March if needed."""
    try:
        return value.replace(year=year)
    except ValueError:
        return date(year, 3, 1)
