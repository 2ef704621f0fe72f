"""Pytest fixtures for claims engine tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Callable

import pytest

from claims_engine.calculators.limit_table import StatutoryLimitTable
from claims_engine.calculators.types import EmployeeFacts, StatutoryLimitEntry
from claims_engine.config import Settings


@pytest.fixture
def limit_entries() -> list[StatutoryLimitEntry]:
    """Two RPS weekly limits, one year apart."""
    return [
        StatutoryLimitEntry(effective_date=date(2024, 4, 6), weekly_cap=Decimal("700"), year=2024),
        StatutoryLimitEntry(effective_date=date(2025, 4, 6), weekly_cap=Decimal("750"), year=2025),
    ]


@pytest.fixture
def limit_table(limit_entries: list[StatutoryLimitEntry]) -> StatutoryLimitTable:
    return StatutoryLimitTable(limit_entries)


@pytest.fixture
def settings() -> Settings:
    return Settings(engine_version="1.0.0", max_workers=1)


@pytest.fixture
def base_facts() -> EmployeeFacts:
    """Employee on 26,000 a year, 5 days a week: 500 a week, 100 a day.

    Five full years of service ending 2024-01-15, aged 45 at dismissal,
    last paid 2024-01-01, 12-week average pay of 600.
    """
    return EmployeeFacts(
        yearly_salary=Decimal("26000"),
        work_days_per_week=5,
        start_date="2019-01-01",
        end_date="2024-01-15",
        date_of_birth="1979-01-01",
        date_last_paid="2024-01-01",
        average_weekly_pay_12_week=Decimal("600"),
        pension_opted_in=True,
        employer_pension_percent=Decimal("3"),
        date_contributions_last_paid="2024-01-01",
    )


@pytest.fixture
def make_facts(base_facts: EmployeeFacts) -> Callable[..., EmployeeFacts]:
    """Build facts from the base employee with field overrides."""

    def _make(**overrides: Any) -> EmployeeFacts:
        return replace(base_facts, **overrides)

    return _make
