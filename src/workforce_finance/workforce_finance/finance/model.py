from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FinancialCalculation:
    """Pay, billing and profit for one (hours, rates) tuple.

    Monetary fields are rounded to 2 places; ``total_hours`` is not rounded.
    """

    labor_cost: Decimal
    revenue: Decimal
    profit: Decimal
    profit_margin: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    total_hours: Decimal
    effective_rate: Decimal

    def to_dict(self) -> dict:
        return asdict(self)
