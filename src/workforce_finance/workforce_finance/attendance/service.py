from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date, now_local
from ..common.money import to_decimal
from ..common.validators import is_blank, raise_if_errors
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..storage.collection import new_id
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def validate_attendance(data: Mapping[str, Any], *, employee_exists: bool) -> list[str]:
    errors: list[str] = []

    if is_blank(data.get("employee_id")):
        errors.append("Employee is required")
    elif not employee_exists:
        errors.append(f"Employee {data.get('employee_id')} does not exist")

    if is_blank(data.get("date")):
        errors.append("Date is required")
    else:
        try:
            coerce_date(data.get("date"))
        except ValueError:
            errors.append("Date must be in YYYY-MM-DD format")

    overtime = data.get("overtime", data.get("overtime_hours"))
    for label, value in (("Hours worked", data.get("hours_worked")), ("Overtime", overtime)):
        try:
            if to_decimal(value) < 0:
                errors.append(f"{label} cannot be negative")
        except ValueError:
            errors.append(f"{label} must be a number")

    return errors


class AttendanceService:
    """Use case: record worked time (manual entry or bulk import)."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def _employee_exists(self, employee_id: Any) -> bool:
        return bool(employee_id) and self._employees.get_by_id(str(employee_id)) is not None

    def _build(self, data: Mapping[str, Any]) -> AttendanceRecord:
        errors = validate_attendance(data, employee_exists=self._employee_exists(data.get("employee_id")))
        if errors:
            logger.warning("Rejected attendance payload: %s", errors)
        raise_if_errors(errors, "attendance record")

        stamp = now_local()
        payload = {"created_at": stamp, **data, "updated_at": stamp}
        payload.setdefault("id", new_id("att"))
        return AttendanceRecord.from_dict(payload)

    def record(self, data: Mapping[str, Any]) -> AttendanceRecord:
        record = self._build(data)
        self._attendance.add(record)
        logger.info("Recorded attendance %s for %s on %s", record.id, record.employee_id, record.date)
        return record

    def bulk_record(self, rows: Sequence[Mapping[str, Any]]) -> list[AttendanceRecord]:
        """All-or-nothing import: one invalid row rejects the batch."""

        records: list[AttendanceRecord] = []
        errors: list[str] = []
        for n, row in enumerate(rows, start=1):
            try:
                records.append(self._build(row))
            except ValidationError as exc:
                errors.extend(f"row {n}: {e}" for e in exc.errors)
        raise_if_errors(errors, "attendance import")

        added = self._attendance.add_many(records)
        logger.info("Imported %d attendance records", added)
        return records

    def update(self, record_id: str, changes: Mapping[str, Any]) -> AttendanceRecord:
        current = self._attendance.get_by_id(record_id)
        if not current:
            raise NotFoundError(f"Attendance record {record_id} not found")

        if "overtime_hours" in changes and "overtime" not in changes:
            changes = {**changes, "overtime": changes["overtime_hours"]}
        updated = self._build({**current.to_dict(), **changes, "id": current.id, "created_at": current.created_at})
        if not self._attendance.update(updated):
            raise NotFoundError(f"Attendance record {record_id} not found")
        logger.info("Updated attendance %s", record_id)
        return updated

    def delete(self, record_id: str) -> None:
        if not self._attendance.delete(record_id):
            raise NotFoundError(f"Attendance record {record_id} not found")
        logger.info("Deleted attendance %s", record_id)

    def list_records(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        return self._attendance.list_in_range(start=start, end=end, employee_id=employee_id)
