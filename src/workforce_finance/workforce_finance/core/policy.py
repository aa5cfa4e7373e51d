from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..common.money import to_decimal
from .constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_CURRENCY,
    DEFAULT_EXPECTED_WORKING_DAYS,
    DEFAULT_GOSI_RATE,
    DEFAULT_OTHER_DEDUCTIONS_RATE,
    DEFAULT_OVERTIME_MULTIPLIER,
    DEFAULT_STANDARD_DAY_HOURS,
)


@dataclass(frozen=True)
class FinancePolicy:
    """Jurisdictional/policy inputs for pay and billing calculations."""

    overtime_multiplier: Decimal = DEFAULT_OVERTIME_MULTIPLIER
    gosi_rate: Decimal = DEFAULT_GOSI_RATE
    other_deductions_rate: Decimal = DEFAULT_OTHER_DEDUCTIONS_RATE
    expected_working_days: int = DEFAULT_EXPECTED_WORKING_DAYS
    standard_day_hours: int = DEFAULT_STANDARD_DAY_HOURS
    currency: str = DEFAULT_CURRENCY
    company_name: str = DEFAULT_COMPANY_NAME

    @classmethod
    def from_settings(cls, settings: Any) -> "FinancePolicy":
        """Build from a settings module (missing attributes keep defaults)."""

        return cls(
            overtime_multiplier=to_decimal(getattr(settings, "OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER)),
            gosi_rate=to_decimal(getattr(settings, "GOSI_RATE", DEFAULT_GOSI_RATE)),
            other_deductions_rate=to_decimal(getattr(settings, "OTHER_DEDUCTIONS_RATE", DEFAULT_OTHER_DEDUCTIONS_RATE)),
            expected_working_days=int(getattr(settings, "EXPECTED_WORKING_DAYS", DEFAULT_EXPECTED_WORKING_DAYS)),
            standard_day_hours=int(getattr(settings, "STANDARD_DAY_HOURS", DEFAULT_STANDARD_DAY_HOURS)),
            currency=str(getattr(settings, "CURRENCY", DEFAULT_CURRENCY)),
            company_name=str(getattr(settings, "COMPANY_NAME", DEFAULT_COMPANY_NAME)),
        )


DEFAULT_POLICY = FinancePolicy()
