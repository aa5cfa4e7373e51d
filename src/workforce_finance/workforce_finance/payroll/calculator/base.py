from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ..model import PayrollCalculation


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        attendance: Sequence[AttendanceRecord],
        *,
        project_name: Optional[str] = None,
    ) -> PayrollCalculation:
        raise NotImplementedError
