from datetime import timedelta
from decimal import Decimal

from factories import TODAY, daily_records, make_employee, make_record
from workforce_finance.core.policy import FinancePolicy
from workforce_finance.payroll.calculator.standard_calculator import StandardPayrollCalculator, employee_payroll


def test_month_payroll_scenario():
    employee = make_employee("emp_1", hourly="30", actual="50")
    attendance = daily_records("emp_1", days=20) + [make_record("emp_1", hours="0", overtime="10")]

    calc = employee_payroll(employee, attendance)

    assert calc.regular_hours == Decimal("160")
    assert calc.overtime_hours == Decimal("10")
    assert calc.gross_pay == Decimal("5250.00")
    assert calc.gosi_contribution == Decimal("577.50")
    assert calc.other_deductions == Decimal("105.00")
    assert calc.net_pay == Decimal("4567.50")
    assert calc.client_billing == Decimal("8750.00")
    assert calc.profit_generated == Decimal("3500.00")
    assert calc.attendance_days == 21


def test_only_the_employees_own_records_count():
    employee = make_employee("emp_1")
    attendance = [make_record("emp_1"), make_record("emp_2", hours="100")]

    calc = employee_payroll(employee, attendance)

    assert calc.regular_hours == Decimal("8")


def test_gross_is_net_plus_deductions_after_rounding():
    employee = make_employee("emp_1", hourly="33.33", actual="47.77")
    attendance = [make_record("emp_1", hours="7.5", overtime="1.25")]

    calc = employee_payroll(employee, attendance)

    assert calc.gross_pay == calc.net_pay + calc.gosi_contribution + calc.other_deductions
    assert calc.total_deductions == calc.gosi_contribution + calc.other_deductions


def test_no_attendance_means_zero_pay():
    calc = employee_payroll(make_employee(), [])

    assert calc.gross_pay == 0
    assert calc.net_pay == 0
    assert calc.profit_margin == 0
    assert calc.project_name == "Unassigned"


def test_policy_rates_are_configurable():
    calculator = StandardPayrollCalculator(FinancePolicy(gosi_rate=Decimal("0.10"), other_deductions_rate=Decimal("0")))
    employee = make_employee("emp_1", hourly="25")

    calc = calculator.calculate(employee, [make_record("emp_1", day=TODAY - timedelta(days=1))], project_name="Metro")

    assert calc.gross_pay == Decimal("200.00")
    assert calc.gosi_contribution == Decimal("20.00")
    assert calc.other_deductions == Decimal("0.00")
    assert calc.net_pay == Decimal("180.00")
    assert calc.project_name == "Metro"
