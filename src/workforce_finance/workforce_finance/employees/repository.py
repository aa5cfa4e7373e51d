from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        """Replace the stored employee with the same id. False when unknown."""

        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError
