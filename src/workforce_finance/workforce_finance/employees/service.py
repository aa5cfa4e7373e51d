from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..analytics.aggregation import employee_performance
from ..analytics.model import EmployeePerformance
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.money import to_decimal
from ..common.validators import SAUDI_PHONE_RE, is_blank, is_positive_number, raise_if_errors
from ..core.exceptions import NotFoundError, ValidationError
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..storage.collection import new_id
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_REQUIRED = (
    ("name", "Employee name is required"),
    ("employee_code", "Employee ID is required"),
    ("trade", "Trade is required"),
    ("nationality", "Nationality is required"),
    ("phone_number", "Phone number is required"),
)


def validate_employee(data: Mapping[str, Any]) -> list[str]:
    """Return the list of problems with an employee payload (empty when valid)."""

    errors = [message for field, message in _REQUIRED if is_blank(data.get(field))]

    hourly_ok = is_positive_number(data.get("hourly_rate"))
    actual_ok = is_positive_number(data.get("actual_rate"))
    if not hourly_ok:
        errors.append("Valid hourly rate is required")
    if not actual_ok:
        errors.append("Valid actual rate is required")
    if hourly_ok and actual_ok and to_decimal(data["actual_rate"]) <= to_decimal(data["hourly_rate"]):
        errors.append("Actual rate must be higher than hourly rate for profitability")

    phone = data.get("phone_number")
    if not is_blank(phone) and not SAUDI_PHONE_RE.match(str(phone)):
        errors.append("Phone number must be in format +966XXXXXXXXX")

    return errors


def filter_employees(
    employees: Sequence[Employee],
    search_term: str = "",
    *,
    nationality: Optional[str] = None,
    trade: Optional[str] = None,
    project_id: Optional[str] = None,
    status: Optional[str] = None,
) -> list[Employee]:
    """Text search on name/code/trade (case-insensitive) and phone, plus exact filters."""

    term = (search_term or "").strip()
    needle = term.lower()

    def matches(e: Employee) -> bool:
        if term and not (
            needle in e.name.lower()
            or needle in e.employee_code.lower()
            or needle in e.trade.lower()
            or term in e.phone_number
        ):
            return False
        if nationality and e.nationality != nationality:
            return False
        if trade and e.trade != trade:
            return False
        if project_id and e.project_id != project_id:
            return False
        if status and e.status.value != status:
            return False
        return True

    return [e for e in employees if matches(e)]


class EmployeeService:
    """Use case: manage workers and their rates."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        policy: FinancePolicy = DEFAULT_POLICY,
    ):
        self._employees = employees
        self._attendance = attendance
        self._policy = policy

    def list_employees(self, search_term: str = "", **filters: Optional[str]) -> list[Employee]:
        return filter_employees(self._employees.list_all(), search_term, **filters)

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create(self, data: Mapping[str, Any]) -> Employee:
        errors = validate_employee(data)
        if errors:
            logger.warning("Rejected employee payload: %s", errors)
        raise_if_errors(errors, "employee")

        stamp = now_local()
        payload = dict(data)
        payload["id"] = new_id("emp")
        payload["created_at"] = stamp
        payload["updated_at"] = stamp
        try:
            employee = Employee.from_dict(payload)
        except ValueError as exc:
            raise ValidationError(f"Invalid employee: {exc}") from exc

        self._employees.add(employee)
        logger.info("Added employee %s (%s)", employee.id, employee.employee_code)
        return employee

    def update(self, employee_id: str, changes: Mapping[str, Any]) -> Employee:
        current = self.get(employee_id)
        merged = {**current.to_dict(), **changes, "id": current.id, "created_at": current.created_at}
        errors = validate_employee(merged)
        if errors:
            logger.warning("Rejected update of employee %s: %s", employee_id, errors)
        raise_if_errors(errors, "employee")

        merged["updated_at"] = now_local()
        try:
            updated = Employee.from_dict(merged)
        except ValueError as exc:
            raise ValidationError(f"Invalid employee: {exc}") from exc

        if not self._employees.update(updated):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Updated employee %s", employee_id)
        return updated

    def delete(self, employee_id: str) -> int:
        """Remove the employee and all of their attendance; returns records removed."""

        if not self._employees.delete(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        removed = self._attendance.delete_by_employee(employee_id)
        logger.info("Deleted employee %s and %d attendance records", employee_id, removed)
        return removed

    def performance(self, employee_id: str) -> EmployeePerformance:
        employee = self.get(employee_id)
        records = self._attendance.list_in_range(employee_id=employee_id)
        return employee_performance(employee, records, policy=self._policy)
