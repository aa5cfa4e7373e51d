from datetime import date, timedelta
from decimal import Decimal

from factories import TODAY, daily_records, make_employee, make_project, make_record
from workforce_finance.analytics.aggregation import (
    dashboard_metrics,
    employee_performance,
    profit_trends,
    project_financials,
    project_metrics,
    workforce_analytics,
)
from workforce_finance.core.enums import EmployeeStatus, ProjectStatus, TradeDemand
from workforce_finance.core.policy import FinancePolicy


def _workforce():
    employees = [
        make_employee("emp_1", hourly="30", actual="50", project_id="proj_1"),
        make_employee("emp_2", hourly="20", actual="40", project_id=None),
        make_employee("emp_3", project_id="proj_1", status=EmployeeStatus.INACTIVE),
    ]
    projects = [make_project("proj_1"), make_project("proj_2", status=ProjectStatus.HOLD)]
    attendance = [
        make_record("emp_1", hours="8", overtime="2"),
        make_record("emp_2", hours="8"),
        make_record("emp_gone", hours="8"),
    ]
    return employees, projects, attendance


def test_dashboard_metrics_joins_and_skips_missing_employees():
    employees, projects, attendance = _workforce()

    m = dashboard_metrics(employees, projects, attendance)

    assert m.total_workforce == 2
    assert m.active_projects == 1
    assert m.aggregate_hours == Decimal("26")
    assert m.cross_project_revenue == Decimal("870.00")
    assert m.real_time_profits == Decimal("380.00")
    assert m.productivity_index == Decimal("33.46")
    assert m.utilization_rate == Decimal("50.00")
    assert m.average_profit_margin == Decimal("43.68")


def test_dashboard_metrics_is_order_independent():
    employees, projects, attendance = _workforce()

    forward = dashboard_metrics(employees, projects, attendance)
    backward = dashboard_metrics(list(reversed(employees)), projects, list(reversed(attendance)))

    assert forward == backward


def test_dashboard_metrics_without_attendance():
    employees, projects, _ = _workforce()

    m = dashboard_metrics(employees, projects, [])

    assert m.total_workforce == 2
    assert m.aggregate_hours == 0
    assert m.cross_project_revenue == 0
    assert m.productivity_index == 0
    assert m.average_profit_margin == 0
    assert m.utilization_rate == Decimal("50.00")


def test_dashboard_metrics_with_nobody():
    m = dashboard_metrics([], [], [])

    assert m.total_workforce == 0
    assert m.utilization_rate == 0
    assert m.average_profit_margin == 0


def test_project_metrics_attendance_rate_against_expected_days():
    employees = [make_employee("emp_1", project_id="proj_1")]
    attendance = daily_records("emp_1", days=11)

    m = project_metrics("proj_1", employees, attendance)

    assert m.project_workforce == 1
    assert m.attendance_rate == Decimal("50.00")
    assert m.client_billing == Decimal("4400.00")
    assert m.labor_costs == Decimal("2640.00")
    assert m.real_time_profit == Decimal("1760.00")
    assert m.worker_efficiency == Decimal("1760.00")
    assert m.productivity == Decimal("50.00")


def test_project_metrics_overtime_share():
    employees = [make_employee("emp_1", project_id="proj_1")]
    attendance = daily_records("emp_1", days=2, hours="8", overtime="2")

    m = project_metrics("proj_1", employees, attendance)

    assert m.overtime_percentage == Decimal("20.00")


def test_project_metrics_ignores_other_projects():
    employees = [make_employee("emp_1", project_id="proj_1"), make_employee("emp_2", project_id="proj_2")]
    attendance = [make_record("emp_1"), make_record("emp_2"), make_record("emp_2")]

    m = project_metrics("proj_1", employees, attendance)

    assert m.client_billing == Decimal("400.00")


def test_project_metrics_for_empty_project_is_all_zero():
    m = project_metrics("proj_x", [make_employee(project_id="proj_1")], [make_record()])

    assert m.project_workforce == 0
    assert m.attendance_rate == 0
    assert m.worker_efficiency == 0
    assert m.productivity == 0
    assert m.overtime_percentage == 0


def test_expected_working_days_come_from_policy():
    employees = [make_employee("emp_1", project_id="proj_1")]
    attendance = daily_records("emp_1", days=10)

    m = project_metrics("proj_1", employees, attendance, policy=FinancePolicy(expected_working_days=20))

    assert m.attendance_rate == Decimal("50.00")


def test_profit_trends_buckets_end_today_oldest_first():
    employees = [make_employee("emp_1", project_id="proj_1")]
    attendance = [
        make_record("emp_1", day=TODAY),
        make_record("emp_1", day=TODAY - timedelta(days=7)),
        make_record("emp_missing", day=TODAY),
        make_record("emp_1", day=TODAY - timedelta(days=35)),
    ]

    points = profit_trends(employees, attendance, today=TODAY)

    assert [p.week for p in points] == ["Week 1", "Week 2", "Week 3", "Week 4", "Week 5"]
    assert points[-1].end == TODAY
    assert points[-1].start == date(2025, 1, 9)
    assert points[0].start == date(2024, 12, 12)
    assert points[-1].revenue == Decimal("400.00")
    assert points[-1].costs == Decimal("240.00")
    assert points[-1].profit == Decimal("160.00")
    assert points[-1].margin == Decimal("40.00")
    assert points[-1].projects == 1
    assert points[-1].employees == 2
    assert points[-2].revenue == Decimal("400.00")
    assert all(p.revenue == 0 and p.margin == 0 for p in points[:3])


def test_profit_trends_respects_week_count():
    assert len(profit_trends([], [], 3, today=TODAY)) == 3


def test_project_financials_windowed():
    employees = [make_employee("emp_1", project_id="proj_1")]
    attendance = daily_records("emp_1", days=10)

    fin = project_financials("proj_1", employees, attendance, start=TODAY - timedelta(days=1), end=TODAY)

    assert fin.revenue == Decimal("800.00")
    assert fin.total_hours == Decimal("16")


def test_employee_performance():
    employee = make_employee("emp_1")
    attendance = daily_records("emp_1", days=11, overtime="1") + [make_record("emp_2")]

    perf = employee_performance(employee, attendance)

    assert perf.attendance_rate == Decimal("50.0")
    assert perf.average_hours == Decimal("8.0")
    assert perf.overtime_rate == Decimal("12.5")
    assert perf.efficiency == Decimal("100.0")
    assert perf.profit_generated == Decimal("2090.00")


def test_employee_performance_without_records():
    perf = employee_performance(make_employee(), [])

    assert perf.attendance_rate == 0
    assert perf.average_hours == 0
    assert perf.efficiency == 0


def test_workforce_analytics_distributions():
    employees = [
        make_employee("emp_1", hourly="30", actual="50", nationality="Saudi", trade="Electrician"),
        make_employee("emp_2", hourly="34", actual="40", nationality="Indian", trade="Welder"),
        make_employee("emp_3", hourly="32", actual="40", nationality="Indian", trade="Plumber"),
        make_employee("emp_4", hourly="30", actual="50", nationality="Saudi", trade="Electrician"),
    ]
    attendance = [make_record("emp_2", hours="8", overtime="2"), make_record("emp_3")]

    wa = workforce_analytics(employees, attendance, today=TODAY)

    by_nationality = {n.nationality: n for n in wa.nationality_distribution}
    assert by_nationality["Saudi"].count == 2
    assert by_nationality["Saudi"].percentage == Decimal("50.00")
    assert by_nationality["Indian"].total_hours == Decimal("18")
    assert by_nationality["Indian"].average_rate == Decimal("40.00")

    demand = {t.trade: t.demand for t in wa.trade_distribution}
    assert demand == {
        "Electrician": TradeDemand.HIGH,
        "Welder": TradeDemand.LOW,
        "Plumber": TradeDemand.MEDIUM,
    }

    assert len(wa.attendance_patterns) == 30
    assert wa.attendance_patterns[-1].date == TODAY
    assert wa.attendance_patterns[-1].attendance == 2
    assert wa.attendance_patterns[-1].efficiency == Decimal("100.00")
    assert wa.attendance_patterns[0].date == TODAY - timedelta(days=29)
    assert len(wa.profit_trends) == 5
