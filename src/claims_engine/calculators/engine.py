"""Claim calculation engine - main orchestrator."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from uuid import UUID

from claims_engine.calculators.holiday_pay import calculate_holiday_pay
from claims_engine.calculators.limit_table import (
    LimitTableInput,
    StatutoryLimitTable,
    as_limit_table,
)
from claims_engine.calculators.notice_pay import calculate_notice_pay
from claims_engine.calculators.pension import calculate_pension_contributions
from claims_engine.calculators.redundancy_pay import calculate_redundancy_pay
from claims_engine.calculators.rounding import ZERO, round_to_pence
from claims_engine.calculators.types import (
    AggregatedClaim,
    CaseClaimResult,
    ClaimCalculation,
    EmployeeFacts,
    EmployeeKey,
)
from claims_engine.calculators.wage_arrears import calculate_wage_arrears
from claims_engine.config import DEFAULT_RULES, ClaimRules, Settings, get_settings

logger = logging.getLogger(__name__)


def _is_absent(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def has_required_facts(facts: EmployeeFacts) -> bool:
    """A record needs a non-zero salary plus start and end dates."""
    if facts.yearly_salary is None or facts.yearly_salary == 0:
        return False
    return not (_is_absent(facts.start_date) or _is_absent(facts.end_date))


def aggregate(
    facts: EmployeeFacts,
    limit_table: LimitTableInput,
    rules: ClaimRules = DEFAULT_RULES,
) -> AggregatedClaim:
    """Calculate every claim category for one employee and total them.

    Incomplete records give an all-zero claim. Categories are independent;
    a category whose inputs are missing comes out as zero without affecting
    the others. Amounts are rounded to pence only after totalling.
    """
    if not has_required_facts(facts):
        logger.debug("Incomplete employee record, returning zero claim")
        return AggregatedClaim.zero()

    wage_arrears = calculate_wage_arrears(facts, rules)
    holiday_pay = calculate_holiday_pay(facts, rules)
    notice_pay = calculate_notice_pay(facts, rules)
    redundancy_pay = calculate_redundancy_pay(facts, limit_table, rules)
    pension_contributions = calculate_pension_contributions(facts, rules)

    # Redundancy pay is never preferential
    total_preferential = sum(
        [
            wage_arrears.preferential,
            holiday_pay.preferential,
            notice_pay.preferential,
            pension_contributions.preferential,
        ],
        ZERO,
    )
    total_unsecured = sum(
        [
            wage_arrears.unsecured,
            holiday_pay.unsecured,
            notice_pay.unsecured,
            redundancy_pay.unsecured,
            pension_contributions.unsecured,
        ],
        ZERO,
    )

    return AggregatedClaim(
        wage_arrears=wage_arrears,
        holiday_pay=holiday_pay,
        notice_pay=notice_pay,
        redundancy_pay=redundancy_pay,
        pension_contributions=pension_contributions,
        total_preferential_claim=total_preferential,
        total_unsecured_claim=total_unsecured,
    ).rounded()


class ClaimsEngine:
    """Employee insolvency claims engine.

    Calculation pipeline (per employee, categories independent):
    1) Check the record has salary, start date and end date
    2) Wage arrears (preferential up to the cap, excess unsecured)
    3) Holiday pay (preferential)
    4) Notice pay (unsecured)
    5) Redundancy pay (unsecured, weekly wage capped by the limit table)
    6) Pension contributions (preferential)
    7) Total by claim class and round to pence
    8) Fingerprint inputs and rules for a deterministic calculation ID
    """

    def __init__(
        self,
        rules: ClaimRules | None = None,
        settings: Settings | None = None,
    ):
        self.rules = rules or DEFAULT_RULES
        self.settings = settings or get_settings()

    def calculate_employee(
        self,
        employee_id: EmployeeKey,
        facts: EmployeeFacts,
        limit_table: LimitTableInput,
    ) -> ClaimCalculation:
        """Calculate the claim for a single employee."""
        table = as_limit_table(limit_table)
        claim = aggregate(facts, table, self.rules)

        inputs_fingerprint = self._compute_inputs_fingerprint(facts)
        rules_fingerprint = self._compute_rules_fingerprint(table)

        return ClaimCalculation(
            employee_id=employee_id,
            calculation_id=self._generate_calculation_id(
                employee_id, inputs_fingerprint, rules_fingerprint
            ),
            claim=claim,
            inputs_fingerprint=inputs_fingerprint,
            rules_fingerprint=rules_fingerprint,
        )

    def calculate_case(
        self,
        employees: Mapping[EmployeeKey, EmployeeFacts],
        limit_table: LimitTableInput,
    ) -> CaseClaimResult:
        """Calculate claims for every employee on a case.

        Employees are independent and may be spread over a thread pool.
        Results keep the input order. An unexpected failure for one
        employee is recorded against that employee and does not stop the
        rest of the case.
        """
        table = as_limit_table(limit_table)
        items = list(employees.items())

        if self.settings.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as pool:
                futures = [
                    pool.submit(self._calculate_isolated, employee_id, facts, table)
                    for employee_id, facts in items
                ]
                calculations = [future.result() for future in futures]
        else:
            calculations = [
                self._calculate_isolated(employee_id, facts, table)
                for employee_id, facts in items
            ]

        results: dict[EmployeeKey, ClaimCalculation] = {}
        total_preferential = ZERO
        total_unsecured = ZERO
        error_count = 0

        for calculation in calculations:
            results[calculation.employee_id] = calculation
            if calculation.success:
                total_preferential += calculation.claim.total_preferential_claim
                total_unsecured += calculation.claim.total_unsecured_claim
            else:
                error_count += 1

        return CaseClaimResult(
            results=results,
            total_preferential_claim=round_to_pence(total_preferential),
            total_unsecured_claim=round_to_pence(total_unsecured),
            error_count=error_count,
        )

    def _calculate_isolated(
        self,
        employee_id: EmployeeKey,
        facts: EmployeeFacts,
        table: StatutoryLimitTable,
    ) -> ClaimCalculation:
        try:
            return self.calculate_employee(employee_id, facts, table)
        except Exception as e:
            logger.exception("Claim calculation failed for employee %s", employee_id)
            return ClaimCalculation(
                employee_id=employee_id,
                calculation_id=self._generate_calculation_id(employee_id, "", ""),
                claim=AggregatedClaim.zero(),
                inputs_fingerprint="",
                rules_fingerprint="",
                errors=[f"Unexpected error: {e}"],
            )

    def _generate_calculation_id(
        self,
        employee_id: EmployeeKey,
        inputs_fingerprint: str,
        rules_fingerprint: str,
    ) -> UUID:
        """Generate deterministic calculation ID."""
        data = {
            "employee_id": str(employee_id),
            "inputs_fingerprint": inputs_fingerprint,
            "rules_fingerprint": rules_fingerprint,
            "engine_version": self.settings.engine_version,
        }
        json_str = json.dumps(data, sort_keys=True)
        hash_bytes = hashlib.sha256(json_str.encode()).digest()
        return UUID(bytes=hash_bytes[:16])

    def _compute_inputs_fingerprint(self, facts: EmployeeFacts) -> str:
        """Compute fingerprint of the employee facts used in calculation."""
        json_str = json.dumps(facts.to_canonical_dict(), sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]

    def _compute_rules_fingerprint(self, table: StatutoryLimitTable) -> str:
        """Compute fingerprint of the limit table and statutory rules."""
        data: dict[str, Any] = {
            "limits": [
                {
                    "effective_date": str(entry.effective_date),
                    "weekly_cap": str(entry.weekly_cap),
                    "year": entry.year,
                }
                for entry in table
            ],
            "rules": self.rules.to_canonical_dict(),
        }
        json_str = json.dumps(data, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]
