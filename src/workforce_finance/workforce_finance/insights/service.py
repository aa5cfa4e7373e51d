from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..core.enums import InsightStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.repository import EmployeeRepository
from ..projects.repository import ProjectRepository
from .factory import InsightRuleFactory
from .generator import generate_insights
from .model import ActionableInsight
from .repository import InsightRepository

logger = logging.getLogger(__name__)

# Allowed review workflow moves; completed and dismissed are final.
_TRANSITIONS = {
    InsightStatus.NEW: {InsightStatus.ACKNOWLEDGED, InsightStatus.IN_PROGRESS, InsightStatus.COMPLETED, InsightStatus.DISMISSED},
    InsightStatus.ACKNOWLEDGED: {InsightStatus.IN_PROGRESS, InsightStatus.COMPLETED, InsightStatus.DISMISSED},
    InsightStatus.IN_PROGRESS: {InsightStatus.COMPLETED, InsightStatus.DISMISSED},
    InsightStatus.COMPLETED: set(),
    InsightStatus.DISMISSED: set(),
}


class InsightService:
    def __init__(
        self,
        insights: InsightRepository,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        attendance: AttendanceRepository,
        *,
        policy: FinancePolicy = DEFAULT_POLICY,
        rule_factory: Optional[InsightRuleFactory] = None,
    ):
        self._insights = insights
        self._employees = employees
        self._projects = projects
        self._attendance = attendance
        self._policy = policy
        self._factory = rule_factory or InsightRuleFactory()

    def generate(self, *, today: Optional[date] = None) -> list[ActionableInsight]:
        return generate_insights(
            self._employees.list_all(),
            self._projects.list_all(),
            self._attendance.list_all(),
            today=today,
            policy=self._policy,
            rules=self._factory.default_rules(),
        )

    def refresh(self, *, today: Optional[date] = None) -> list[ActionableInsight]:
        """Regenerate and store insights, keeping the review status of ones already stored."""

        known = {i.id: i.status for i in self._insights.list_all()}
        fresh = [
            i.with_status(known[i.id]) if i.id in known else i
            for i in self.generate(today=today)
        ]
        self._insights.save_all(fresh)
        logger.info("Stored %d insights", len(fresh))
        return fresh

    def list_stored(self, *, status: Optional[str] = None) -> Sequence[ActionableInsight]:
        insights = self._insights.list_all()
        if status:
            insights = [i for i in insights if i.status.value == status]
        return insights

    def set_status(self, insight_id: str, status: str) -> ActionableInsight:
        try:
            new_status = InsightStatus(status)
        except ValueError as exc:
            raise ValidationError(f"Unknown insight status: {status}") from exc

        current = self._insights.get_by_id(insight_id)
        if not current:
            raise NotFoundError(f"Insight {insight_id} not found")
        if new_status == current.status:
            return current
        if new_status not in _TRANSITIONS[current.status]:
            raise ValidationError(f"Cannot move insight from {current.status.value} to {new_status.value}")

        updated = current.with_status(new_status)
        self._insights.update(updated)
        logger.info("Insight %s: %s -> %s", insight_id, current.status.value, new_status.value)
        return updated
