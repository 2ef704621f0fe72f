"""Configuration management for the claims engine.

Two kinds of configuration live here:

    ClaimRules  - statutory constants used by the calculators. Explicit and
                  immutable; passed into each calculation, never read from
                  the environment.
    Settings    - process settings (engine version, worker pool size)
                  loaded from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class ClaimRules:
    """
    Statutory constants for employee insolvency claims.

    Attributes:
        preferential_wage_cap: Ceiling on the preferential part of a wage
            arrears claim, per employee. Default 800.
        fallback_weekly_cap: Weekly pay cap used for redundancy when the
            limit table has no usable entry. Default 700.
        max_statutory_notice_weeks: Upper bound on statutory notice.
            Default 12.
        max_service_years: Years of service counted for redundancy.
            Default 20.
        max_redundancy_weeks: Upper bound on redundancy weeks. Default 30.
        weeks_per_month: Conversion used by contractual notice pay.
            Default 4.33.
        holiday_year_days: Days in a holiday year for pro-rata accrual.
            Default 365.
    """

    preferential_wage_cap: Decimal = Decimal("800")
    fallback_weekly_cap: Decimal = Decimal("700")
    max_statutory_notice_weeks: int = 12
    max_service_years: int = 20
    max_redundancy_weeks: Decimal = Decimal("30")
    weeks_per_month: Decimal = Decimal("4.33")
    holiday_year_days: int = 365

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.preferential_wage_cap < 0:
            raise ValueError("preferential_wage_cap cannot be negative")
        if self.fallback_weekly_cap < 0:
            raise ValueError("fallback_weekly_cap cannot be negative")
        if self.max_statutory_notice_weeks < 1:
            raise ValueError("max_statutory_notice_weeks must be at least 1")
        if self.max_service_years < 1:
            raise ValueError("max_service_years must be at least 1")
        if self.max_redundancy_weeks < 0:
            raise ValueError("max_redundancy_weeks cannot be negative")
        if self.weeks_per_month <= 0:
            raise ValueError("weeks_per_month must be positive")
        if self.holiday_year_days < 1:
            raise ValueError("holiday_year_days must be at least 1")

    def to_canonical_dict(self) -> dict[str, str]:
        """Return canonical dict for hashing (deterministic ordering)."""
        return {
            "preferential_wage_cap": str(self.preferential_wage_cap),
            "fallback_weekly_cap": str(self.fallback_weekly_cap),
            "max_statutory_notice_weeks": str(self.max_statutory_notice_weeks),
            "max_service_years": str(self.max_service_years),
            "max_redundancy_weeks": str(self.max_redundancy_weeks),
            "weeks_per_month": str(self.weeks_per_month),
            "holiday_year_days": str(self.holiday_year_days),
        }


DEFAULT_RULES = ClaimRules()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    max_workers: int

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            max_workers=int(os.getenv("CLAIMS_MAX_WORKERS", "1")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
