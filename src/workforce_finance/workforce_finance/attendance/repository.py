from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def add_many(self, records: Sequence[AttendanceRecord]) -> int:
        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError

    def delete_by_employee(self, employee_id: str) -> int:
        raise NotImplementedError

    def list_in_range(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records with ``start <= date <= end``; open bounds when None."""

        raise NotImplementedError
