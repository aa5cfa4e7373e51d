from __future__ import annotations

from typing import Optional, Sequence

from ..storage.collection import StoreCollection
from ..storage.store import EMPLOYEES_KEY, KeyValueStore
from .model import Employee


class StoreEmployeeRepository:
    """Employees kept as one JSON list under ``workforce_employees``."""

    def __init__(self, store: KeyValueStore):
        self._items = StoreCollection(
            store,
            EMPLOYEES_KEY,
            load=Employee.from_dict,
            dump=lambda e: e.to_dict(),
            get_id=lambda e: e.id,
        )

    def list_all(self) -> Sequence[Employee]:
        return self._items.all()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._items.find(employee_id)

    def add(self, employee: Employee) -> Employee:
        self._items.append(employee)
        return employee

    def update(self, employee: Employee) -> bool:
        return self._items.replace(employee)

    def delete(self, employee_id: str) -> bool:
        return self._items.remove_where(lambda e: e.id == employee_id) > 0
