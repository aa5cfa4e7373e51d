from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayrollCalculation:
    """One employee's pay for one period. Money fields are quantized to 2 dp."""

    employee_id: str
    employee_code: str
    employee_name: str
    trade: str
    project_id: Optional[str]
    project_name: str
    hourly_rate: Decimal
    attendance_days: int
    regular_hours: Decimal
    overtime_hours: Decimal
    total_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    gosi_contribution: Decimal
    other_deductions: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    client_billing: Decimal
    profit_generated: Decimal
    profit_margin: Decimal

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PayrollSummary:
    employee_count: int
    total_gross_pay: Decimal
    total_net_pay: Decimal
    total_gosi_contributions: Decimal
    total_other_deductions: Decimal
    total_hours: Decimal
    total_overtime_hours: Decimal
    total_client_billing: Decimal
    total_profit_generated: Decimal
    profit_margin: Decimal
    average_net_pay: Decimal
    average_hours_per_employee: Decimal
    overtime_percentage: Decimal
    employees: list[PayrollCalculation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProjectPayroll:
    project_id: Optional[str]
    project_name: str
    client: str
    employee_count: int
    total_hours: Decimal
    total_cost: Decimal
    total_billing: Decimal
    total_profit: Decimal
    profit_margin: Decimal
    employees: list[PayrollCalculation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)
