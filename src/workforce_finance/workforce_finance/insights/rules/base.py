from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from ...analytics.aggregation import project_metrics
from ...analytics.model import DashboardMetrics, ProjectMetrics
from ...attendance.model import AttendanceRecord
from ...core.policy import DEFAULT_POLICY, FinancePolicy
from ...employees.model import Employee
from ...projects.model import ManpowerProject
from ..model import ActionableInsight


@dataclass
class InsightContext:
    """Snapshots plus the dashboard metrics every rule is evaluated against."""

    employees: Sequence[Employee]
    projects: Sequence[ManpowerProject]
    attendance: Sequence[AttendanceRecord]
    metrics: DashboardMetrics
    today: date
    policy: FinancePolicy = DEFAULT_POLICY
    _project_metrics: dict[str, ProjectMetrics] = field(default_factory=dict, repr=False)

    def project_metrics(self, project_id: str) -> ProjectMetrics:
        if project_id not in self._project_metrics:
            self._project_metrics[project_id] = project_metrics(
                project_id, self.employees, self.attendance, policy=self.policy
            )
        return self._project_metrics[project_id]

    def open_projects(self) -> list[ManpowerProject]:
        return [p for p in self.projects if p.is_open]


class InsightRule(ABC):
    """Strategy Pattern: one independent check that may emit insights."""

    @abstractmethod
    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        raise NotImplementedError
