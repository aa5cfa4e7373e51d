from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from decimal import Decimal

from ..core.enums import TradeDemand


@dataclass(frozen=True)
class DashboardMetrics:
    total_workforce: int
    active_projects: int
    aggregate_hours: Decimal
    cross_project_revenue: Decimal
    real_time_profits: Decimal
    productivity_index: Decimal
    utilization_rate: Decimal
    average_profit_margin: Decimal

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProjectMetrics:
    project_id: str
    project_workforce: int
    client_billing: Decimal
    labor_costs: Decimal
    real_time_profit: Decimal
    productivity: Decimal
    worker_efficiency: Decimal
    attendance_rate: Decimal
    overtime_percentage: Decimal

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProfitTrendPoint:
    week: str
    start: date
    end: date
    revenue: Decimal
    costs: Decimal
    profit: Decimal
    margin: Decimal
    projects: int
    employees: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class EmployeePerformance:
    employee_id: str
    attendance_rate: Decimal
    average_hours: Decimal
    overtime_rate: Decimal
    efficiency: Decimal
    profit_generated: Decimal

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class NationalityShare:
    nationality: str
    count: int
    percentage: Decimal
    average_rate: Decimal
    total_hours: Decimal


@dataclass(frozen=True)
class TradeShare:
    trade: str
    count: int
    average_hourly_rate: Decimal
    average_actual_rate: Decimal
    profit_margin: Decimal
    demand: TradeDemand


@dataclass(frozen=True)
class AttendancePatternPoint:
    date: date
    total_hours: Decimal
    overtime: Decimal
    attendance: int
    efficiency: Decimal


@dataclass(frozen=True)
class WorkforceAnalytics:
    nationality_distribution: list[NationalityShare] = field(default_factory=list)
    trade_distribution: list[TradeShare] = field(default_factory=list)
    attendance_patterns: list[AttendancePatternPoint] = field(default_factory=list)
    profit_trends: list[ProfitTrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)
