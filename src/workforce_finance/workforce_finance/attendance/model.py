from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date, coerce_datetime, isoformat_or_none
from ..common.money import ZERO, to_decimal


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's worked time on one day.

    ``employee_id`` is a reference, not ownership; the employee may no longer
    exist when historical records are reported on.
    """

    id: str
    employee_id: str
    date: date
    hours_worked: Decimal
    overtime: Decimal = ZERO
    break_time: int = 0
    late_arrival: int = 0
    early_departure: int = 0
    project_id: Optional[str] = None
    location: Optional[str] = None
    approved_by: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def total_hours(self) -> Decimal:
        return self.hours_worked + self.overtime

    def with_changes(self, **changes: Any) -> "AttendanceRecord":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        overtime = data.get("overtime")
        if overtime is None:
            overtime = data.get("overtime_hours")
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employee_id"]),
            date=coerce_date(data["date"]),
            hours_worked=to_decimal(data.get("hours_worked")),
            overtime=to_decimal(overtime),
            break_time=int(data.get("break_time") or 0),
            late_arrival=int(data.get("late_arrival") or 0),
            early_departure=int(data.get("early_departure") or 0),
            project_id=data.get("project_id") or None,
            location=data.get("location"),
            approved_by=data.get("approved_by"),
            notes=data.get("notes"),
            created_at=coerce_datetime(data.get("created_at")),
            updated_at=coerce_datetime(data.get("updated_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "date": isoformat_or_none(self.date),
            "hours_worked": self.hours_worked,
            "overtime": self.overtime,
            "break_time": self.break_time,
            "late_arrival": self.late_arrival,
            "early_departure": self.early_departure,
            "project_id": self.project_id,
            "location": self.location,
            "approved_by": self.approved_by,
            "notes": self.notes,
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
        }
