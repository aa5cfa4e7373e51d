"""Financial formula: cost, billing and profit of worked hours.

Input contract: hours and rates are non-negative and both rates are in the same
currency. Nothing here validates that; callers (services) do.
"""

from __future__ import annotations

from typing import Any, Iterable

from ..common.money import dsum, percentage, round_money, safe_ratio, to_decimal
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from .model import FinancialCalculation


def calculate_financials(
    regular_hours: Any,
    overtime_hours: Any,
    hourly_rate: Any,
    actual_rate: Any,
    *,
    overtime_multiplier: Any = DEFAULT_OVERTIME_MULTIPLIER,
) -> FinancialCalculation:
    """Apply the pay/billing formula to one unit of worked time.

    Overtime is paid and billed at ``overtime_multiplier`` times the base rate.
    Values are rounded once, on return; ``profit`` is taken from the rounded
    revenue and labor cost so ``profit == revenue - labor_cost`` exactly.
    """

    regular = to_decimal(regular_hours)
    overtime = to_decimal(overtime_hours)
    cost_rate = to_decimal(hourly_rate)
    bill_rate = to_decimal(actual_rate)
    multiplier = to_decimal(overtime_multiplier)

    regular_pay = regular * cost_rate
    overtime_pay = overtime * cost_rate * multiplier
    labor_cost = round_money(regular_pay + overtime_pay)

    revenue = round_money(regular * bill_rate + overtime * bill_rate * multiplier)

    profit = revenue - labor_cost
    total_hours = regular + overtime

    return FinancialCalculation(
        labor_cost=labor_cost,
        revenue=revenue,
        profit=profit,
        profit_margin=round_money(percentage(profit, revenue)),
        regular_pay=round_money(regular_pay),
        overtime_pay=round_money(overtime_pay),
        total_hours=total_hours,
        effective_rate=round_money(safe_ratio(revenue, total_hours)),
    )


def sum_financials(items: Iterable[FinancialCalculation]) -> FinancialCalculation:
    """Combine several calculations; ratios are recomputed from the totals."""

    items = list(items)
    labor_cost = dsum(i.labor_cost for i in items)
    revenue = dsum(i.revenue for i in items)
    total_hours = dsum(i.total_hours for i in items)
    profit = revenue - labor_cost
    return FinancialCalculation(
        labor_cost=labor_cost,
        revenue=revenue,
        profit=profit,
        profit_margin=round_money(percentage(profit, revenue)),
        regular_pay=dsum(i.regular_pay for i in items),
        overtime_pay=dsum(i.overtime_pay for i in items),
        total_hours=total_hours,
        effective_rate=round_money(safe_ratio(revenue, total_hours)),
    )
