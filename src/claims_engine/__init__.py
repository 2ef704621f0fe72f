"""Employee insolvency claims engine.

Calculates wage arrears, holiday pay, notice pay, redundancy pay and pension
contribution claims for employees of an insolvent employer, and splits each
into preferential and unsecured amounts.
"""

from claims_engine.calculators import (
    AggregatedClaim,
    ClaimCalculation,
    ClaimsEngine,
    ClaimType,
    EmployeeFacts,
    PayType,
    StatutoryLimitEntry,
    StatutoryLimitTable,
    aggregate,
    lookup_weekly_cap,
)
from claims_engine.config import DEFAULT_RULES, ClaimRules, Settings, get_settings
from claims_engine.records import EmployeeRecord, LimitRecord, employee_facts, load_limit_table

__version__ = "1.0.0"

__all__ = [
    "AggregatedClaim",
    "ClaimCalculation",
    "ClaimRules",
    "ClaimType",
    "ClaimsEngine",
    "DEFAULT_RULES",
    "EmployeeFacts",
    "EmployeeRecord",
    "LimitRecord",
    "PayType",
    "Settings",
    "StatutoryLimitEntry",
    "StatutoryLimitTable",
    "aggregate",
    "employee_facts",
    "get_settings",
    "load_limit_table",
    "lookup_weekly_cap",
]
