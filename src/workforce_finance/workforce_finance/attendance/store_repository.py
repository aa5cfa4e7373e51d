from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..storage.collection import StoreCollection
from ..storage.store import ATTENDANCE_KEY, KeyValueStore
from .model import AttendanceRecord


class StoreAttendanceRepository:
    def __init__(self, store: KeyValueStore):
        self._items = StoreCollection(
            store,
            ATTENDANCE_KEY,
            load=AttendanceRecord.from_dict,
            dump=lambda r: r.to_dict(),
            get_id=lambda r: r.id,
        )

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._items.all()

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._items.find(record_id)

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self._items.append(record)
        return record

    def add_many(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0
        self._items.append(*records)
        return len(records)

    def update(self, record: AttendanceRecord) -> bool:
        return self._items.replace(record)

    def delete(self, record_id: str) -> bool:
        return self._items.remove_where(lambda r: r.id == record_id) > 0

    def delete_by_employee(self, employee_id: str) -> int:
        return self._items.remove_where(lambda r: r.employee_id == employee_id)

    def list_in_range(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        out = []
        for r in self._items.all():
            if start is not None and r.date < start:
                continue
            if end is not None and r.date > end:
                continue
            if employee_id is not None and r.employee_id != employee_id:
                continue
            out.append(r)
        return out
