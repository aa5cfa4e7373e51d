from datetime import date
from decimal import Decimal

from factories import daily_records, make_employee, make_project, make_record
from workforce_finance.common.money import dsum
from workforce_finance.payroll.calculator.standard_calculator import employee_payroll
from workforce_finance.payroll.service import payroll_summary, project_payrolls

JAN_START = date(2025, 1, 1)
JAN_END = date(2025, 1, 31)


def _data():
    employees = [
        make_employee("emp_1", name="Zaid", hourly="30", actual="50", project_id="proj_1"),
        make_employee("emp_2", name="Ali", hourly="33.33", actual="47.77", project_id="proj_2"),
        make_employee("emp_3", name="Omar", hourly="25", actual="40", project_id=None),
        make_employee("emp_4", name="Idle", project_id="proj_1"),
    ]
    projects = [make_project("proj_1", name="Metro"), make_project("proj_2", name="Port")]
    attendance = (
        daily_records("emp_1", days=10, overtime="1")
        + daily_records("emp_2", days=7, hours="7.5", overtime="1.25")
        + daily_records("emp_3", days=3)
        + [make_record("emp_4", day=date(2024, 12, 31))]
    )
    return employees, projects, attendance


def test_summary_skips_employees_without_attendance_and_sorts_by_name():
    employees, projects, attendance = _data()

    summary = payroll_summary(employees, attendance, JAN_START, JAN_END, projects=projects)

    assert summary.employee_count == 3
    assert [c.employee_name for c in summary.employees] == ["Ali", "Omar", "Zaid"]
    assert summary.employees[0].project_name == "Port"
    assert summary.employees[1].project_name == "Unassigned"


def test_summary_totals_match_individual_payrolls():
    employees, projects, attendance = _data()
    window = [r for r in attendance if JAN_START <= r.date <= JAN_END]

    summary = payroll_summary(employees, attendance, JAN_START, JAN_END)
    individual = [employee_payroll(e, window) for e in employees[:3]]

    assert summary.total_gross_pay == dsum(c.gross_pay for c in individual)
    assert summary.total_net_pay == dsum(c.net_pay for c in individual)
    assert summary.total_gosi_contributions == dsum(c.gosi_contribution for c in individual)
    assert summary.total_other_deductions == dsum(c.other_deductions for c in individual)
    assert summary.total_hours == dsum(c.total_hours for c in individual)
    assert summary.total_client_billing == dsum(c.client_billing for c in individual)
    assert summary.total_gross_pay == (
        summary.total_net_pay + summary.total_gosi_contributions + summary.total_other_deductions
    )


def test_summary_ratios():
    employees = [make_employee("emp_1", hourly="30", actual="50")]
    attendance = daily_records("emp_1", days=2, overtime="2")

    summary = payroll_summary(employees, attendance)

    assert summary.profit_margin == Decimal("40.00")
    assert summary.overtime_percentage == Decimal("20.00")
    assert summary.average_hours_per_employee == Decimal("20.00")


def test_empty_period():
    summary = payroll_summary([make_employee()], [], JAN_START, JAN_END)

    assert summary.employee_count == 0
    assert summary.total_net_pay == 0
    assert summary.profit_margin == 0
    assert summary.average_net_pay == 0


def test_project_payrolls_grouped_and_ordered_by_profit():
    employees, projects, attendance = _data()

    groups = project_payrolls(employees, projects, attendance, JAN_START, JAN_END)

    assert [g.project_name for g in groups] == ["Metro", "Port", "Unassigned"]
    unassigned = groups[-1]
    assert unassigned.client == "No Client"
    assert unassigned.project_id is None
    assert groups[0].employee_count == 1
    assert groups[0].total_profit == groups[0].total_billing - groups[0].total_cost
    assert all(a.total_profit >= b.total_profit for a, b in zip(groups, groups[1:]))
