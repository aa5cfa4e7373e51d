from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_TREND_WEEKS
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.repository import EmployeeRepository
from ..projects.repository import ProjectRepository
from .aggregation import dashboard_metrics, profit_trends, workforce_analytics
from .model import DashboardMetrics, ProfitTrendPoint, WorkforceAnalytics


class AnalyticsService:
    """Reads current snapshots from the repositories and aggregates them.

    Note: full recompute on every call, nothing is cached.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        attendance: AttendanceRepository,
        *,
        policy: FinancePolicy = DEFAULT_POLICY,
    ):
        self._employees = employees
        self._projects = projects
        self._attendance = attendance
        self._policy = policy

    def dashboard(self) -> DashboardMetrics:
        return dashboard_metrics(
            self._employees.list_all(),
            self._projects.list_all(),
            self._attendance.list_all(),
            policy=self._policy,
        )

    def trends(self, weeks: int = DEFAULT_TREND_WEEKS, *, today: Optional[date] = None) -> list[ProfitTrendPoint]:
        return profit_trends(
            self._employees.list_all(),
            self._attendance.list_all(),
            weeks,
            today=today,
            policy=self._policy,
        )

    def workforce(self, *, today: Optional[date] = None) -> WorkforceAnalytics:
        return workforce_analytics(
            self._employees.list_all(),
            self._attendance.list_all(),
            today=today,
            policy=self._policy,
        )
