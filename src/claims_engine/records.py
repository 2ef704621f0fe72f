"""Pydantic adapters from stored records to calculation inputs.

The employee and limit records arrive as loosely typed mappings: blank
strings for unset fields, numbers stored as text, "yes"/"no" flags. These
models coerce them into typed values and apply the record defaults, so the
calculators only ever see EmployeeFacts and StatutoryLimitEntry. Values that
cannot be read become None rather than raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, field_validator

from claims_engine.calculators.limit_table import StatutoryLimitTable
from claims_engine.calculators.types import (
    ClaimType,
    EmployeeFacts,
    PayType,
    StatutoryLimitEntry,
)
from claims_engine.config import DEFAULT_RULES, ClaimRules

DEFAULT_WORK_DAYS_PER_WEEK = 5
DEFAULT_HOLIDAY_ENTITLEMENT = Decimal("28")

_TRUE_FLAGS = {"yes", "y", "true", "1", "on"}


def _decimal_or_none(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    text = value.strip().replace(",", "").replace("£", "")
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _date_or_none(value: Any) -> Union[date, str, None]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return value.strip() or None
    return None


def _text_or_none(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class EmployeeRecord(BaseModel):
    """Employee record as stored by case management."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    yearly_salary: Decimal | None = None
    pay_type: str | None = None
    work_days_per_week: Decimal | None = None
    start_date: Union[date, str, None] = None
    end_date: Union[date, str, None] = None
    date_of_birth: Union[date, str, None] = None
    date_last_paid: Union[date, str, None] = None

    holiday_entitlement: Decimal | None = None
    days_taken: Decimal | None = None
    days_carried_forward: Decimal | None = None
    holiday_year_start_date: Union[date, str, None] = None

    claim_type: str | None = None
    contractual_notice_period: Decimal | None = None

    average_weekly_pay_12_weeks: Decimal | None = None
    average_weekly_pay_52_weeks: Decimal | None = None

    pension_opted_in: bool = False
    employer_pension_percent: Decimal | None = None
    date_contributions_last_paid: Union[date, str, None] = None

    @field_validator(
        "yearly_salary",
        "work_days_per_week",
        "holiday_entitlement",
        "days_taken",
        "days_carried_forward",
        "contractual_notice_period",
        "average_weekly_pay_12_weeks",
        "average_weekly_pay_52_weeks",
        "employer_pension_percent",
        mode="before",
    )
    @classmethod
    def _coerce_decimal(cls, value: Any) -> Decimal | None:
        return _decimal_or_none(value)

    @field_validator(
        "start_date",
        "end_date",
        "date_of_birth",
        "date_last_paid",
        "holiday_year_start_date",
        "date_contributions_last_paid",
        mode="before",
    )
    @classmethod
    def _coerce_date(cls, value: Any) -> Union[date, str, None]:
        return _date_or_none(value)

    @field_validator("pay_type", "claim_type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("pension_opted_in", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_FLAGS
        return False

    def to_facts(self) -> EmployeeFacts:
        """Typed, defaulted facts for the calculators."""
        return EmployeeFacts(
            yearly_salary=self.yearly_salary,
            pay_type=self._pay_type(),
            work_days_per_week=self._work_days_per_week(),
            start_date=self.start_date,
            end_date=self.end_date,
            date_of_birth=self.date_of_birth,
            date_last_paid=self.date_last_paid,
            holiday_entitlement_days_per_year=(
                self.holiday_entitlement or DEFAULT_HOLIDAY_ENTITLEMENT
            ),
            holiday_days_taken=self.days_taken or Decimal("0"),
            holiday_days_carried_forward=self.days_carried_forward or Decimal("0"),
            holiday_year_start_date=self.holiday_year_start_date,
            claim_type=self._claim_type(),
            contractual_notice_period_months=self.contractual_notice_period,
            average_weekly_pay_12_week=_positive_or_none(self.average_weekly_pay_12_weeks),
            average_weekly_pay_52_week=_positive_or_none(self.average_weekly_pay_52_weeks),
            pension_opted_in=self.pension_opted_in,
            employer_pension_percent=self.employer_pension_percent or Decimal("0"),
            date_contributions_last_paid=self.date_contributions_last_paid,
        )

    def _work_days_per_week(self) -> int:
        if self.work_days_per_week is None:
            return DEFAULT_WORK_DAYS_PER_WEEK
        days = int(self.work_days_per_week)
        if days < 1 or days > 7:
            return DEFAULT_WORK_DAYS_PER_WEEK
        return days

    def _pay_type(self) -> PayType:
        if self.pay_type and self.pay_type.lower().startswith("variable"):
            return PayType.VARIABLE
        return PayType.SALARIED

    def _claim_type(self) -> ClaimType:
        if self.claim_type and self.claim_type.lower() == ClaimType.CONTRACTUAL.value:
            return ClaimType.CONTRACTUAL
        return ClaimType.STATUTORY


def _positive_or_none(value: Decimal | None) -> Decimal | None:
    if value is None or value <= 0:
        return None
    return value


class LimitRecord(BaseModel):
    """RPS weekly limit as maintained in settings."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    year: int | None = None
    weekly_limit: Decimal | None = None
    effective_date: Union[date, str, None] = None

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> int | None:
        number = _decimal_or_none(value)
        return int(number) if number is not None else None

    @field_validator("weekly_limit", mode="before")
    @classmethod
    def _coerce_limit(cls, value: Any) -> Decimal | None:
        return _decimal_or_none(value)

    @field_validator("effective_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Union[date, str, None]:
        return _date_or_none(value)

    def to_entry(self, rules: ClaimRules = DEFAULT_RULES) -> StatutoryLimitEntry:
        """Limit entry; a blank or zero limit takes the fallback cap."""
        return StatutoryLimitEntry(
            effective_date=self.effective_date,
            weekly_cap=self.weekly_limit or rules.fallback_weekly_cap,
            year=self.year,
        )


def employee_facts(data: Mapping[str, Any] | EmployeeRecord) -> EmployeeFacts:
    """Adapt one stored employee record."""
    record = data if isinstance(data, EmployeeRecord) else EmployeeRecord.model_validate(data)
    return record.to_facts()


def load_limit_table(
    records: Iterable[Mapping[str, Any] | LimitRecord],
    rules: ClaimRules = DEFAULT_RULES,
) -> StatutoryLimitTable:
    """Build the limit table from stored limit records."""
    entries = []
    for data in records:
        record = data if isinstance(data, LimitRecord) else LimitRecord.model_validate(data)
        entries.append(record.to_entry(rules))
    return StatutoryLimitTable(entries)
