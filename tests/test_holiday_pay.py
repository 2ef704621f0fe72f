"""Tests for holiday pay calculation."""

from datetime import date
from decimal import Decimal

from claims_engine.calculators.holiday_pay import (
    calculate_holiday_pay,
    current_holiday_year_start,
)
from claims_engine.calculators.rounding import round_to_pence


class TestHolidayYearAlignment:
    """Test finding the holiday year in force at termination."""

    def test_start_earlier_in_end_year(self):
        assert current_holiday_year_start(date(2019, 1, 1), date(2024, 3, 14)) == date(2024, 1, 1)

    def test_start_later_in_end_year_goes_back_a_year(self):
        assert current_holiday_year_start(date(2019, 4, 6), date(2024, 3, 1)) == date(2023, 4, 6)

    def test_start_on_end_date(self):
        assert current_holiday_year_start(date(2020, 6, 1), date(2024, 6, 1)) == date(2024, 6, 1)

    def test_leap_day_start(self):
        assert current_holiday_year_start(date(2020, 2, 29), date(2023, 6, 1)) == date(2023, 3, 1)
        assert current_holiday_year_start(date(2020, 2, 29), date(2023, 2, 15)) == date(2022, 3, 1)


class TestHolidayPay:
    """Test outstanding holiday entitlement and pay."""

    def test_pro_rata_outstanding_days(self, make_facts):
        """73 of 365 days elapsed: 28 * 0.2 = 5.6 accrued, 1.6 taken, 4 owed."""
        facts = make_facts(
            holiday_year_start_date="2020-01-01",
            end_date="2024-03-14",
            holiday_entitlement_days_per_year=Decimal("28"),
            holiday_days_taken=Decimal("1.6"),
        )

        result = calculate_holiday_pay(facts)

        assert result.outstanding_days == Decimal("4")
        assert round_to_pence(result.total) == Decimal("400.00")
        assert round_to_pence(result.preferential) == Decimal("400.00")
        assert result.unsecured == Decimal("0")

    def test_carried_forward_days_added(self, make_facts):
        facts = make_facts(
            holiday_year_start_date="2024-01-01",
            end_date="2024-03-14",
            holiday_days_taken=Decimal("1.6"),
            holiday_days_carried_forward=Decimal("3"),
        )

        result = calculate_holiday_pay(facts)

        assert round_to_pence(result.total) == Decimal("700.00")

    def test_all_taken_gives_zero(self, make_facts):
        facts = make_facts(
            holiday_year_start_date="2024-01-01",
            end_date="2024-03-14",
            holiday_days_taken=Decimal("10"),
        )

        assert calculate_holiday_pay(facts).is_zero

    def test_end_on_holiday_year_start_uses_carried_forward_only(self, make_facts):
        facts = make_facts(
            holiday_year_start_date="2023-01-15",
            end_date="2024-01-15",
            holiday_days_carried_forward=Decimal("2"),
        )

        result = calculate_holiday_pay(facts)

        assert round_to_pence(result.total) == Decimal("200.00")

    def test_missing_holiday_year_start(self, make_facts):
        assert calculate_holiday_pay(make_facts(holiday_year_start_date=None)).is_zero

    def test_malformed_end_date(self, make_facts):
        facts = make_facts(holiday_year_start_date="2024-01-01", end_date="15 Jan 2024")
        assert calculate_holiday_pay(facts).is_zero
