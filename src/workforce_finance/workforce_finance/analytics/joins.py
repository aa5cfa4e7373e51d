from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.model import Employee
from ..finance.formulas import calculate_financials
from ..finance.model import FinancialCalculation

logger = logging.getLogger(__name__)


def index_employees(employees: Iterable[Employee]) -> dict[str, Employee]:
    return {e.id: e for e in employees}


def join_employee(record: AttendanceRecord, employees_by_id: Mapping[str, Employee]) -> Optional[Employee]:
    """Resolve a record's employee; None means "skip this record".

    Historical records may point at deleted employees and must not break
    current reporting.
    """

    employee = employees_by_id.get(record.employee_id)
    if employee is None:
        logger.debug("Skipping attendance %s: employee %s not found", record.id, record.employee_id)
    return employee


def record_financials(
    record: AttendanceRecord,
    employee: Employee,
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> FinancialCalculation:
    return calculate_financials(
        record.hours_worked,
        record.overtime,
        employee.hourly_rate,
        employee.actual_rate,
        overtime_multiplier=policy.overtime_multiplier,
    )


def joined_financials(
    attendance: Sequence[AttendanceRecord],
    employees_by_id: Mapping[str, Employee],
    *,
    policy: FinancePolicy = DEFAULT_POLICY,
) -> list[tuple[AttendanceRecord, Employee, FinancialCalculation]]:
    """Per-record financials for every record whose employee still exists."""

    out = []
    for record in attendance:
        employee = join_employee(record, employees_by_id)
        if employee is None:
            continue
        out.append((record, employee, record_financials(record, employee, policy=policy)))
    return out
