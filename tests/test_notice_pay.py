"""Tests for notice pay calculation."""

from decimal import Decimal

import pytest

from claims_engine.calculators.notice_pay import calculate_notice_pay, statutory_notice_weeks
from claims_engine.calculators.rounding import round_to_pence
from claims_engine.calculators.types import ClaimType


class TestStatutoryNoticeWeeks:
    """Test the statutory notice scale."""

    @pytest.mark.parametrize(
        "years, full_years, expected",
        [
            (Decimal("0.05"), 0, 0),
            (Decimal("0.09"), 0, 1),
            (Decimal("1.5"), 1, 1),
            (Decimal("2.0"), 2, 2),
            (Decimal("9.0"), 9, 9),
            (Decimal("12.0"), 12, 12),
            (Decimal("25.0"), 25, 12),
        ],
    )
    def test_scale(self, years, full_years, expected):
        assert statutory_notice_weeks(years, full_years) == expected


class TestNoticePay:
    """Test statutory and contractual notice pay."""

    def test_nine_years_statutory(self, make_facts):
        facts = make_facts(
            start_date="2015-01-01",
            end_date="2024-01-01",
            average_weekly_pay_12_week=Decimal("500"),
        )

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("9")
        assert round_to_pence(result.total) == Decimal("4500.00")
        assert round_to_pence(result.unsecured) == Decimal("4500.00")
        assert result.preferential == Decimal("0")

    def test_long_service_capped_at_twelve_weeks(self, make_facts):
        facts = make_facts(start_date="1990-01-01", end_date="2024-01-01")

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("12")
        assert round_to_pence(result.total) == Decimal("7200.00")

    def test_under_two_years_gets_one_week(self, make_facts):
        facts = make_facts(start_date="2023-06-01", end_date="2024-01-01")

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("1")
        assert round_to_pence(result.total) == Decimal("600.00")

    def test_under_one_month_gets_nothing(self, make_facts):
        facts = make_facts(start_date="2023-12-20", end_date="2024-01-01")

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("0")
        assert result.is_zero

    def test_falls_back_to_salary_without_average(self, make_facts):
        facts = make_facts(
            start_date="2020-01-01",
            end_date="2024-01-01",
            average_weekly_pay_12_week=None,
        )

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("4")
        assert round_to_pence(result.total) == Decimal("2000.00")

    def test_contractual_period(self, make_facts):
        """Stored period is used as weeks: 3 / 4.33 months of 26,000 / 12."""
        facts = make_facts(
            claim_type=ClaimType.CONTRACTUAL,
            contractual_notice_period_months=Decimal("3"),
        )

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("3")
        assert round_to_pence(result.total) == Decimal("1501.15")
        assert result.preferential == Decimal("0")

    def test_contractual_without_period_uses_statutory(self, make_facts):
        facts = make_facts(claim_type=ClaimType.CONTRACTUAL, contractual_notice_period_months=None)

        result = calculate_notice_pay(facts)

        # 2019-01-01 to 2024-01-15 is five full years at 600 a week
        assert result.notice_weeks == Decimal("5")
        assert round_to_pence(result.total) == Decimal("3000.00")

    @pytest.mark.parametrize("field", ["start_date", "end_date"])
    def test_missing_dates(self, make_facts, field):
        assert calculate_notice_pay(make_facts(**{field: None})).is_zero
        assert calculate_notice_pay(make_facts(**{field: "2024-99-99"})).is_zero

    def test_negative_contractual_period_reports_no_weeks(self, make_facts):
        facts = make_facts(
            claim_type=ClaimType.CONTRACTUAL,
            contractual_notice_period_months=Decimal("-2"),
        )

        result = calculate_notice_pay(facts)

        assert result.notice_weeks == Decimal("0")
        assert result.is_zero
