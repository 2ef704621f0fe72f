"""Type definitions for the claim calculation pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Union
from uuid import UUID

from claims_engine.calculators.dates import CalendarDateInput
from claims_engine.calculators.rounding import ZERO, round_to_pence, round_weeks

EmployeeKey = Union[str, UUID]


def _as_decimal(value: Any) -> Any:
    """Plain int/float amounts become Decimal; anything else is left alone."""
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float) and math.isfinite(value):
        return Decimal(str(value))
    return value


def _as_whole_days(value: Any) -> Any:
    """Day counts given as float or Decimal are truncated to int."""
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, Decimal) and value.is_finite():
        return int(value)
    return value


class PayType(str, Enum):
    """How the employee was paid."""

    SALARIED = "salaried"
    VARIABLE = "variable"


class ClaimType(str, Enum):
    """Basis of the notice pay claim."""

    STATUTORY = "statutory"
    CONTRACTUAL = "contractual"


@dataclass(frozen=True)
class EmployeeFacts:
    """Contractual and employment-history facts for one employee.

    Date fields hold a date or the raw YYYY-MM-DD string from the record
    source; calculators parse them, so a malformed string counts as absent.
    """

    yearly_salary: Decimal | None = None
    start_date: CalendarDateInput = None
    end_date: CalendarDateInput = None
    date_of_birth: CalendarDateInput = None
    pay_type: PayType = PayType.SALARIED
    work_days_per_week: int = 5

    date_last_paid: CalendarDateInput = None

    # Holiday
    holiday_entitlement_days_per_year: Decimal = Decimal("28")
    holiday_days_taken: Decimal = ZERO
    holiday_days_carried_forward: Decimal = ZERO
    holiday_year_start_date: CalendarDateInput = None

    # Notice
    claim_type: ClaimType = ClaimType.STATUTORY
    contractual_notice_period_months: Decimal | None = None

    # Averages from payroll (computed upstream)
    average_weekly_pay_12_week: Decimal | None = None
    average_weekly_pay_52_week: Decimal | None = None

    # Pension
    pension_opted_in: bool = False
    employer_pension_percent: Decimal = ZERO
    date_contributions_last_paid: CalendarDateInput = None

    def __post_init__(self) -> None:
        for name in (
            "yearly_salary",
            "holiday_entitlement_days_per_year",
            "holiday_days_taken",
            "holiday_days_carried_forward",
            "contractual_notice_period_months",
            "average_weekly_pay_12_week",
            "average_weekly_pay_52_week",
            "employer_pension_percent",
        ):
            object.__setattr__(self, name, _as_decimal(getattr(self, name)))
        object.__setattr__(self, "work_days_per_week", _as_whole_days(self.work_days_per_week))

    @property
    def salary(self) -> Decimal:
        """Yearly salary with absence read as zero."""
        return self.yearly_salary if self.yearly_salary is not None else ZERO

    @property
    def weekly_wage(self) -> Decimal:
        return self.salary / 52

    @property
    def daily_wage(self) -> Decimal:
        """Weekly wage spread over the working days; zero if there are none."""
        if self.work_days_per_week <= 0:
            return ZERO
        return self.weekly_wage / self.work_days_per_week

    @property
    def average_or_basic_weekly_wage(self) -> Decimal:
        """12-week average pay, falling back to salary / 52."""
        if self.average_weekly_pay_12_week is not None:
            return self.average_weekly_pay_12_week
        return self.weekly_wage

    def to_canonical_dict(self) -> dict[str, Any]:
        """Return canonical dict for hashing (deterministic ordering)."""

        def text(value: Any) -> str | None:
            if value is None:
                return None
            if isinstance(value, Enum):
                return value.value
            if hasattr(value, "isoformat"):
                return value.isoformat()
            return str(value)

        return {
            name: text(getattr(self, name))
            for name in sorted(self.__dataclass_fields__)
        }


@dataclass(frozen=True)
class StatutoryLimitEntry:
    """Redundancy weekly pay cap in force from an effective date."""

    effective_date: CalendarDateInput
    weekly_cap: Decimal
    year: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekly_cap", _as_decimal(self.weekly_cap))


# ============================================================================
# Category results
# ============================================================================


@dataclass(frozen=True)
class ClaimCategoryResult:
    """Preferential/unsecured split for one claim category."""

    preferential: Decimal = ZERO
    unsecured: Decimal = ZERO
    total: Decimal = ZERO

    @property
    def is_zero(self) -> bool:
        return self.preferential == 0 and self.unsecured == 0 and self.total == 0

    def rounded(self) -> ClaimCategoryResult:
        """Copy with monetary fields rounded to pence."""
        return replace(
            self,
            preferential=round_to_pence(self.preferential),
            unsecured=round_to_pence(self.unsecured),
            total=round_to_pence(self.total),
        )


@dataclass(frozen=True)
class WageArrearsResult(ClaimCategoryResult):
    arrears_days: int = 0


@dataclass(frozen=True)
class HolidayPayResult(ClaimCategoryResult):
    outstanding_days: Decimal = ZERO

    def rounded(self) -> HolidayPayResult:
        base = super().rounded()
        return replace(base, outstanding_days=round_weeks(self.outstanding_days))


@dataclass(frozen=True)
class NoticePayResult(ClaimCategoryResult):
    notice_weeks: Decimal = ZERO

    def rounded(self) -> NoticePayResult:
        base = super().rounded()
        return replace(base, notice_weeks=round_weeks(self.notice_weeks))


@dataclass(frozen=True)
class RedundancyPayResult(ClaimCategoryResult):
    redundancy_weeks: Decimal = ZERO
    weekly_cap: Decimal = ZERO

    def rounded(self) -> RedundancyPayResult:
        base = super().rounded()
        return replace(
            base,
            redundancy_weeks=round_weeks(self.redundancy_weeks),
            weekly_cap=round_to_pence(self.weekly_cap),
        )


@dataclass(frozen=True)
class PensionContributionResult(ClaimCategoryResult):
    days_owed: int = 0


# ============================================================================
# Aggregates
# ============================================================================


@dataclass(frozen=True)
class AggregatedClaim:
    """All five claim categories for one employee, with claim-class totals."""

    wage_arrears: WageArrearsResult = field(default_factory=WageArrearsResult)
    holiday_pay: HolidayPayResult = field(default_factory=HolidayPayResult)
    notice_pay: NoticePayResult = field(default_factory=NoticePayResult)
    redundancy_pay: RedundancyPayResult = field(default_factory=RedundancyPayResult)
    pension_contributions: PensionContributionResult = field(
        default_factory=PensionContributionResult
    )
    total_preferential_claim: Decimal = ZERO
    total_unsecured_claim: Decimal = ZERO

    @classmethod
    def zero(cls) -> AggregatedClaim:
        """Claim for an incomplete record: every category and total is 0."""
        return cls().rounded()

    @property
    def is_zero(self) -> bool:
        return self.total_preferential_claim == 0 and self.total_unsecured_claim == 0

    def categories(self) -> dict[str, ClaimCategoryResult]:
        return {
            "wage_arrears": self.wage_arrears,
            "holiday_pay": self.holiday_pay,
            "notice_pay": self.notice_pay,
            "redundancy_pay": self.redundancy_pay,
            "pension_contributions": self.pension_contributions,
        }

    def zero_categories(self) -> list[str]:
        """Categories with no claim; the consumer reviews these by hand."""
        return [name for name, result in self.categories().items() if result.is_zero]

    def rounded(self) -> AggregatedClaim:
        return replace(
            self,
            wage_arrears=self.wage_arrears.rounded(),
            holiday_pay=self.holiday_pay.rounded(),
            notice_pay=self.notice_pay.rounded(),
            redundancy_pay=self.redundancy_pay.rounded(),
            pension_contributions=self.pension_contributions.rounded(),
            total_preferential_claim=round_to_pence(self.total_preferential_claim),
            total_unsecured_claim=round_to_pence(self.total_unsecured_claim),
        )

    def as_dict(self) -> dict[str, Any]:
        """Flat record in the shape the employee ledger stores."""
        return {
            "wage_arrears_preferential": self.wage_arrears.preferential,
            "wage_arrears_unsecured": self.wage_arrears.unsecured,
            "total_wage_arrears": self.wage_arrears.total,
            "wage_arrears_days": self.wage_arrears.arrears_days,
            "holiday_pay_preferential": self.holiday_pay.preferential,
            "holiday_pay_unsecured": self.holiday_pay.unsecured,
            "total_holiday_pay": self.holiday_pay.total,
            "notice_pay_weeks": self.notice_pay.notice_weeks,
            "notice_pay_preferential": self.notice_pay.preferential,
            "notice_pay_unsecured": self.notice_pay.unsecured,
            "total_notice_pay": self.notice_pay.total,
            "redundancy_pay_weeks": self.redundancy_pay.redundancy_weeks,
            "redundancy_pay_unsecured": self.redundancy_pay.unsecured,
            "pension_contributions_preferential": self.pension_contributions.preferential,
            "pension_contributions_unsecured": self.pension_contributions.unsecured,
            "total_pension_contributions": self.pension_contributions.total,
            "total_preferential_claim": self.total_preferential_claim,
            "total_unsecured_claim": self.total_unsecured_claim,
        }


@dataclass
class ClaimCalculation:
    """Result of calculating the claim for one employee."""

    employee_id: EmployeeKey
    calculation_id: UUID
    claim: AggregatedClaim
    inputs_fingerprint: str
    rules_fingerprint: str
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def zero_categories(self) -> list[str]:
        return self.claim.zero_categories()


@dataclass
class CaseClaimResult:
    """Result of calculating claims for every employee on a case."""

    results: dict[EmployeeKey, ClaimCalculation]
    total_preferential_claim: Decimal = ZERO
    total_unsecured_claim: Decimal = ZERO
    error_count: int = 0

    @property
    def zero_claim_employee_ids(self) -> list[EmployeeKey]:
        """Employees whose whole claim came out as zero."""
        return [
            employee_id
            for employee_id, calculation in self.results.items()
            if calculation.claim.is_zero
        ]
