from __future__ import annotations

from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...common.money import dsum, round_money
from ...core.policy import DEFAULT_POLICY, FinancePolicy
from ...employees.model import Employee
from ...finance.formulas import calculate_financials
from ..model import PayrollCalculation
from .base import PayrollCalculator

UNASSIGNED = "Unassigned"


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = labor cost of the period, then GOSI and other deductions.

    Only records of ``employee`` are counted. Deductions are quantized first and
    net pay is derived from them, so gross == net + deductions exactly.
    """

    def __init__(self, policy: FinancePolicy = DEFAULT_POLICY):
        self._policy = policy

    def calculate(
        self,
        employee: Employee,
        attendance: Sequence[AttendanceRecord],
        *,
        project_name: Optional[str] = None,
    ) -> PayrollCalculation:
        records = [r for r in attendance if r.employee_id == employee.id]
        regular = dsum(r.hours_worked for r in records)
        overtime = dsum(r.overtime for r in records)

        fin = calculate_financials(
            regular,
            overtime,
            employee.hourly_rate,
            employee.actual_rate,
            overtime_multiplier=self._policy.overtime_multiplier,
        )

        gross = fin.labor_cost
        gosi = round_money(gross * self._policy.gosi_rate)
        other = round_money(gross * self._policy.other_deductions_rate)
        deductions = gosi + other

        return PayrollCalculation(
            employee_id=employee.id,
            employee_code=employee.employee_code,
            employee_name=employee.name,
            trade=employee.trade,
            project_id=employee.project_id,
            project_name=project_name or UNASSIGNED,
            hourly_rate=employee.hourly_rate,
            attendance_days=len(records),
            regular_hours=regular,
            overtime_hours=overtime,
            total_hours=fin.total_hours,
            regular_pay=fin.regular_pay,
            overtime_pay=fin.overtime_pay,
            gross_pay=gross,
            gosi_contribution=gosi,
            other_deductions=other,
            total_deductions=deductions,
            net_pay=gross - deductions,
            client_billing=fin.revenue,
            profit_generated=fin.profit,
            profit_margin=fin.profit_margin,
        )


def employee_payroll(
    employee: Employee,
    attendance_in_range: Sequence[AttendanceRecord],
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
    project_name: Optional[str] = None,
) -> PayrollCalculation:
    return StandardPayrollCalculator(policy).calculate(employee, attendance_in_range, project_name=project_name)
