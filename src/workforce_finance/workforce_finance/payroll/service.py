from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.money import dsum, percentage, round_money, safe_ratio
from ..core.exceptions import NotFoundError
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..projects.model import ManpowerProject
from ..projects.repository import ProjectRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import UNASSIGNED, StandardPayrollCalculator
from .model import PayrollCalculation, PayrollSummary, ProjectPayroll

logger = logging.getLogger(__name__)

NO_CLIENT = "No Client"


def _in_window(records: Iterable[AttendanceRecord], start: Optional[date], end: Optional[date]) -> list[AttendanceRecord]:
    return [r for r in records if (start is None or r.date >= start) and (end is None or r.date <= end)]


def employee_payrolls(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
    projects: Sequence[ManpowerProject] = (),
    calculator: Optional[PayrollCalculator] = None,
) -> list[PayrollCalculation]:
    """Per-employee payroll for the window, sorted by name.

    Employees without attendance in the window are left out.
    """

    calculator = calculator or StandardPayrollCalculator()
    names = {p.id: p.name for p in projects}

    by_employee: dict[str, list[AttendanceRecord]] = {}
    for record in _in_window(attendance, start, end):
        by_employee.setdefault(record.employee_id, []).append(record)

    out = []
    for employee in employees:
        records = by_employee.get(employee.id)
        if not records:
            continue
        out.append(calculator.calculate(employee, records, project_name=names.get(employee.project_id or "")))

    out.sort(key=lambda c: c.employee_name.lower())
    return out


def summarize(calculations: Sequence[PayrollCalculation]) -> PayrollSummary:
    """Totals are plain sums of the per-employee figures."""

    count = len(calculations)
    total_hours = dsum(c.total_hours for c in calculations)
    overtime_hours = dsum(c.overtime_hours for c in calculations)
    billing = dsum(c.client_billing for c in calculations)
    profit = dsum(c.profit_generated for c in calculations)
    net = dsum(c.net_pay for c in calculations)

    return PayrollSummary(
        employee_count=count,
        total_gross_pay=dsum(c.gross_pay for c in calculations),
        total_net_pay=net,
        total_gosi_contributions=dsum(c.gosi_contribution for c in calculations),
        total_other_deductions=dsum(c.other_deductions for c in calculations),
        total_hours=total_hours,
        total_overtime_hours=overtime_hours,
        total_client_billing=billing,
        total_profit_generated=profit,
        profit_margin=round_money(percentage(profit, billing)),
        average_net_pay=round_money(safe_ratio(net, Decimal(count))),
        average_hours_per_employee=round_money(safe_ratio(total_hours, Decimal(count))),
        overtime_percentage=round_money(percentage(overtime_hours, total_hours)),
        employees=list(calculations),
    )


def payroll_summary(
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    start: Optional[date] = None,
    end: Optional[date] = None,
    *,
    projects: Sequence[ManpowerProject] = (),
    policy: FinancePolicy = DEFAULT_POLICY,
) -> PayrollSummary:
    return summarize(
        employee_payrolls(
            employees,
            attendance,
            start=start,
            end=end,
            projects=projects,
            calculator=StandardPayrollCalculator(policy),
        )
    )


def group_by_project(
    calculations: Sequence[PayrollCalculation],
    projects: Sequence[ManpowerProject],
) -> list[ProjectPayroll]:
    """Group per-employee payroll by project, most profitable first."""

    by_id = {p.id: p for p in projects}
    groups: dict[Optional[str], list[PayrollCalculation]] = {}
    for calc in calculations:
        groups.setdefault(calc.project_id, []).append(calc)

    out = []
    for project_id, members in groups.items():
        project = by_id.get(project_id or "")
        billing = dsum(c.client_billing for c in members)
        profit = dsum(c.profit_generated for c in members)
        out.append(
            ProjectPayroll(
                project_id=project_id,
                project_name=project.name if project else UNASSIGNED,
                client=project.client if project else NO_CLIENT,
                employee_count=len(members),
                total_hours=dsum(c.total_hours for c in members),
                total_cost=dsum(c.gross_pay for c in members),
                total_billing=billing,
                total_profit=profit,
                profit_margin=round_money(percentage(profit, billing)),
                employees=members,
            )
        )

    out.sort(key=lambda g: g.total_profit, reverse=True)
    return out


def project_payrolls(
    employees: Sequence[Employee],
    projects: Sequence[ManpowerProject],
    attendance: Sequence[AttendanceRecord],
    start: Optional[date] = None,
    end: Optional[date] = None,
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> list[ProjectPayroll]:
    calculations = employee_payrolls(
        employees,
        attendance,
        start=start,
        end=end,
        projects=projects,
        calculator=StandardPayrollCalculator(policy),
    )
    return group_by_project(calculations, projects)


class PayrollReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        policy: FinancePolicy = DEFAULT_POLICY,
    ):
        self._employees = employees
        self._projects = projects
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator(policy)
        self._policy = policy

    @property
    def policy(self) -> FinancePolicy:
        return self._policy

    def employee_payroll(self, employee_id: str, *, start: date, end: date) -> PayrollCalculation:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        project = self._projects.get_by_id(employee.project_id) if employee.project_id else None
        records = self._attendance.list_in_range(start=start, end=end, employee_id=employee_id)
        return self._calculator.calculate(employee, records, project_name=project.name if project else None)

    def employee_payrolls(self, *, start: date, end: date, project_id: Optional[str] = None) -> list[PayrollCalculation]:
        calculations = employee_payrolls(
            self._employees.list_all(),
            self._attendance.list_in_range(start=start, end=end),
            projects=self._projects.list_all(),
            calculator=self._calculator,
        )
        if project_id:
            calculations = [c for c in calculations if c.project_id == project_id]
        return calculations

    def summary(self, *, start: date, end: date, project_id: Optional[str] = None) -> PayrollSummary:
        result = summarize(self.employee_payrolls(start=start, end=end, project_id=project_id))
        logger.info(
            "Payroll %s..%s: %d employees, net %s",
            start,
            end,
            result.employee_count,
            result.total_net_pay,
        )
        return result

    def by_project(self, *, start: date, end: date) -> list[ProjectPayroll]:
        return group_by_project(self.employee_payrolls(start=start, end=end), self._projects.list_all())
