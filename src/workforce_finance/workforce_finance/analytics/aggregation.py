"""Roll-ups of attendance, employee and project snapshots into metrics.

Every function here is pure: it reads the collections it is given and returns
new values. Records whose employee no longer exists are skipped.
"""

from __future__ import annotations

from collections import OrderedDict
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..common.money import ZERO, dsum, percentage, round_money, round_to, safe_ratio
from ..core.constants import (
    DEFAULT_PATTERN_DAYS,
    DEFAULT_TREND_WEEKS,
    TRADE_DEMAND_HIGH,
    TRADE_DEMAND_MEDIUM,
)
from ..core.enums import ProjectStatus, TradeDemand
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.model import Employee
from ..finance.formulas import sum_financials
from ..finance.model import FinancialCalculation
from ..projects.model import ManpowerProject
from .joins import index_employees, join_employee, joined_financials, record_financials
from .model import (
    AttendancePatternPoint,
    DashboardMetrics,
    EmployeePerformance,
    NationalityShare,
    ProfitTrendPoint,
    ProjectMetrics,
    TradeShare,
    WorkforceAnalytics,
)


def _hours(records: Iterable[AttendanceRecord]) -> Decimal:
    return dsum(r.total_hours for r in records)


def dashboard_metrics(
    employees: Sequence[Employee],
    projects: Sequence[ManpowerProject],
    attendance: Sequence[AttendanceRecord],
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> DashboardMetrics:
    by_id = index_employees(employees)

    total_workforce = sum(1 for e in employees if e.is_active)
    active_projects = sum(1 for p in projects if p.status == ProjectStatus.ACTIVE)
    aggregate_hours = _hours(attendance)

    joined = joined_financials(attendance, by_id, policy=policy)
    revenue = dsum(f.revenue for _, _, f in joined)
    profits = dsum(f.profit for _, _, f in joined)

    assigned = sum(1 for e in employees if e.is_active and e.project_id)

    return DashboardMetrics(
        total_workforce=total_workforce,
        active_projects=active_projects,
        aggregate_hours=aggregate_hours,
        cross_project_revenue=round_money(revenue),
        real_time_profits=round_money(profits),
        productivity_index=round_money(safe_ratio(revenue, aggregate_hours)),
        utilization_rate=round_money(percentage(Decimal(assigned), Decimal(total_workforce))),
        average_profit_margin=round_money(percentage(profits, revenue)),
    )


def _project_attendance(
    project_id: str,
    employees_by_id: dict[str, Employee],
    attendance: Iterable[AttendanceRecord],
) -> list[AttendanceRecord]:
    """Records of employees currently assigned to ``project_id``."""

    out = []
    for record in attendance:
        employee = join_employee(record, employees_by_id)
        if employee is not None and employee.project_id == project_id:
            out.append(record)
    return out


def project_metrics(
    project_id: str,
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> ProjectMetrics:
    by_id = index_employees(employees)
    workforce = sum(1 for e in employees if e.project_id == project_id and e.is_active)
    records = _project_attendance(project_id, by_id, attendance)

    totals = sum_financials(record_financials(r, by_id[r.employee_id], policy=policy) for r in records)
    total_hours = _hours(records)
    overtime_hours = dsum(r.overtime for r in records)
    expected = Decimal(workforce * policy.expected_working_days)

    return ProjectMetrics(
        project_id=project_id,
        project_workforce=workforce,
        client_billing=round_money(totals.revenue),
        labor_costs=round_money(totals.labor_cost),
        real_time_profit=round_money(totals.profit),
        productivity=round_money(safe_ratio(totals.revenue, total_hours)),
        worker_efficiency=round_money(safe_ratio(totals.profit, Decimal(workforce))),
        attendance_rate=round_money(percentage(Decimal(len(records)), expected)),
        overtime_percentage=round_money(percentage(overtime_hours, total_hours)),
    )


def profit_trends(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    weeks: int = DEFAULT_TREND_WEEKS,
    *,
    today: Optional[date] = None,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> list[ProfitTrendPoint]:
    """``weeks`` consecutive 7-day buckets, oldest first, the last ending today."""

    today = today or today_local()
    by_id = index_employees(employees)
    points: list[ProfitTrendPoint] = []

    for n in range(weeks):
        end = today - timedelta(days=7 * (weeks - 1 - n))
        start = end - timedelta(days=6)
        window = [r for r in attendance if start <= r.date <= end]

        joined = joined_financials(window, by_id, policy=policy)
        revenue = dsum(f.revenue for _, _, f in joined)
        costs = dsum(f.labor_cost for _, _, f in joined)
        profit = revenue - costs

        points.append(
            ProfitTrendPoint(
                week=f"Week {n + 1}",
                start=start,
                end=end,
                revenue=round_money(revenue),
                costs=round_money(costs),
                profit=round_money(profit),
                margin=round_money(percentage(profit, revenue)),
                projects=len({e.project_id for _, e, _ in joined if e.project_id}),
                employees=len({r.employee_id for r in window}),
            )
        )

    return points


def project_financials(
    project_id: str,
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> FinancialCalculation:
    by_id = index_employees(employees)
    records = [
        r
        for r in _project_attendance(project_id, by_id, attendance)
        if (start is None or r.date >= start) and (end is None or r.date <= end)
    ]
    return sum_financials(record_financials(r, by_id[r.employee_id], policy=policy) for r in records)


def employee_performance(
    employee: Employee,
    attendance: Sequence[AttendanceRecord],
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> EmployeePerformance:
    records = [r for r in attendance if r.employee_id == employee.id]
    days = Decimal(len(records))

    regular = dsum(r.hours_worked for r in records)
    overtime = dsum(r.overtime for r in records)
    profit = dsum(record_financials(r, employee, policy=policy).profit for r in records)

    return EmployeePerformance(
        employee_id=employee.id,
        attendance_rate=round_to(percentage(days, Decimal(policy.expected_working_days)), 1),
        average_hours=round_to(safe_ratio(regular, days), 1),
        overtime_rate=round_to(percentage(overtime, regular), 1),
        efficiency=round_to(percentage(regular, days * policy.standard_day_hours), 1),
        profit_generated=round_money(profit),
    )


def trade_demand(profit_margin: Decimal) -> TradeDemand:
    if profit_margin > TRADE_DEMAND_HIGH:
        return TradeDemand.HIGH
    if profit_margin > TRADE_DEMAND_MEDIUM:
        return TradeDemand.MEDIUM
    return TradeDemand.LOW


def _group(employees: Iterable[Employee], key) -> "OrderedDict[str, list[Employee]]":
    groups: "OrderedDict[str, list[Employee]]" = OrderedDict()
    for e in employees:
        groups.setdefault(key(e), []).append(e)
    return groups


def nationality_distribution(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
) -> list[NationalityShare]:
    by_id = index_employees(employees)
    hours_by_nationality: dict[str, Decimal] = {}
    for record in attendance:
        employee = join_employee(record, by_id)
        if employee is None:
            continue
        hours_by_nationality[employee.nationality] = (
            hours_by_nationality.get(employee.nationality, ZERO) + record.total_hours
        )

    total = Decimal(len(employees))
    out = []
    for nationality, members in _group(employees, lambda e: e.nationality).items():
        count = Decimal(len(members))
        out.append(
            NationalityShare(
                nationality=nationality,
                count=len(members),
                percentage=round_money(percentage(count, total)),
                average_rate=round_money(safe_ratio(dsum(e.actual_rate for e in members), count)),
                total_hours=hours_by_nationality.get(nationality, ZERO),
            )
        )
    return out


def trade_distribution(employees: Sequence[Employee]) -> list[TradeShare]:
    out = []
    for trade, members in _group(employees, lambda e: e.trade).items():
        count = Decimal(len(members))
        avg_hourly = safe_ratio(dsum(e.hourly_rate for e in members), count)
        avg_actual = safe_ratio(dsum(e.actual_rate for e in members), count)
        margin = percentage(avg_actual - avg_hourly, avg_actual)
        out.append(
            TradeShare(
                trade=trade,
                count=len(members),
                average_hourly_rate=round_money(avg_hourly),
                average_actual_rate=round_money(avg_actual),
                profit_margin=round_money(margin),
                demand=trade_demand(margin),
            )
        )
    return out


def attendance_patterns(
    attendance: Sequence[AttendanceRecord],
    *,
    days: int = DEFAULT_PATTERN_DAYS,
    today: Optional[date] = None,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> list[AttendancePatternPoint]:
    """Per-day totals for the last ``days`` days, oldest first."""

    today = today or today_local()
    by_date: dict[date, list[AttendanceRecord]] = {}
    for record in attendance:
        by_date.setdefault(record.date, []).append(record)

    out = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        records = by_date.get(day, [])
        regular = dsum(r.hours_worked for r in records)
        expected = Decimal(len(records) * policy.standard_day_hours)
        out.append(
            AttendancePatternPoint(
                date=day,
                total_hours=regular,
                overtime=dsum(r.overtime for r in records),
                attendance=len(records),
                efficiency=round_money(percentage(regular, expected)),
            )
        )
    return out


def workforce_analytics(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    *,
    today: Optional[date] = None,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> WorkforceAnalytics:
    today = today or today_local()
    return WorkforceAnalytics(
        nationality_distribution=nationality_distribution(employees, attendance),
        trade_distribution=trade_distribution(employees),
        attendance_patterns=attendance_patterns(attendance, today=today, policy=policy),
        profit_trends=profit_trends(employees, attendance, today=today, policy=policy),
    )
