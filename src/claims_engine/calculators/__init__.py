"""Employee insolvency claim calculators."""

from claims_engine.calculators.engine import ClaimsEngine, aggregate
from claims_engine.calculators.limit_table import StatutoryLimitTable, lookup_weekly_cap
from claims_engine.calculators.types import (
    AggregatedClaim,
    ClaimCalculation,
    ClaimType,
    EmployeeFacts,
    PayType,
    StatutoryLimitEntry,
)

__all__ = [
    "AggregatedClaim",
    "ClaimCalculation",
    "ClaimType",
    "ClaimsEngine",
    "EmployeeFacts",
    "PayType",
    "StatutoryLimitEntry",
    "StatutoryLimitTable",
    "aggregate",
    "lookup_weekly_cap",
]
