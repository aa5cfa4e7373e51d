from decimal import Decimal

import pytest

from workforce_finance.finance.formulas import calculate_financials, sum_financials


def test_month_of_work_scenario():
    fin = calculate_financials(160, 10, 30, 50)

    assert fin.labor_cost == Decimal("5250.00")
    assert fin.revenue == Decimal("8750.00")
    assert fin.profit == Decimal("3500.00")
    assert fin.profit_margin == Decimal("40.00")
    assert fin.regular_pay == Decimal("4800.00")
    assert fin.overtime_pay == Decimal("450.00")
    assert fin.total_hours == Decimal("170")


def test_zero_everything_degrades_to_zero():
    fin = calculate_financials(0, 0, 0, 0)

    assert fin.revenue == 0
    assert fin.profit_margin == 0
    assert fin.effective_rate == 0


def test_zero_billing_rate_gives_zero_margin():
    fin = calculate_financials(8, 0, 30, 0)

    assert fin.revenue == 0
    assert fin.profit == Decimal("-240.00")
    assert fin.profit_margin == 0


@pytest.mark.parametrize(
    "regular,overtime,hourly,actual",
    [(7.5, 1.25, 33.33, 47.77), (1, 0, 0.01, 0.02), (0.333, 2.667, 19.99, 29.99)],
)
def test_profit_is_exactly_revenue_minus_cost(regular, overtime, hourly, actual):
    fin = calculate_financials(regular, overtime, hourly, actual)

    assert fin.profit == fin.revenue - fin.labor_cost


def test_overtime_paid_and_billed_at_one_and_a_half():
    only_ot = calculate_financials(0, 4, 20, 40)

    assert only_ot.labor_cost == Decimal("120.00")
    assert only_ot.revenue == Decimal("240.00")


def test_custom_overtime_multiplier():
    fin = calculate_financials(0, 2, 10, 20, overtime_multiplier="2")

    assert fin.labor_cost == Decimal("40.00")


def test_effective_rate_is_revenue_per_hour():
    fin = calculate_financials(8, 2, 30, 50)

    # revenue = 400 + 150
    assert fin.effective_rate == Decimal("55.00")


def test_sum_financials_recomputes_ratios():
    total = sum_financials([calculate_financials(8, 0, 30, 50), calculate_financials(8, 0, 40, 50)])

    assert total.revenue == Decimal("800.00")
    assert total.labor_cost == Decimal("560.00")
    assert total.profit_margin == Decimal("30.00")


def test_sum_of_nothing_is_zero():
    total = sum_financials([])

    assert total.revenue == 0
    assert total.profit_margin == 0
    assert total.effective_rate == 0


def test_very_large_amounts_are_still_rounded():
    fin = calculate_financials(1e20, 0, 1e10, 2e10)

    assert fin.labor_cost == Decimal("1E+30")
    assert fin.revenue == Decimal("2E+30")
    assert fin.profit == Decimal("1E+30")
    assert fin.profit_margin == Decimal("50.00")
