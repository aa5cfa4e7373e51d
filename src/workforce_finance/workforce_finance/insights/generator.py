from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..analytics.aggregation import dashboard_metrics
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.model import Employee
from ..projects.model import ManpowerProject
from .factory import InsightRuleFactory
from .model import ActionableInsight
from .rules.base import InsightContext, InsightRule

logger = logging.getLogger(__name__)


def generate_insights(
    employees: Sequence[Employee],
    projects: Sequence[ManpowerProject],
    attendance: Sequence[AttendanceRecord],
    *,
    today: Optional[date] = None,
    policy: FinancePolicy = DEFAULT_POLICY,
    rules: Optional[Sequence[InsightRule]] = None,
) -> list[ActionableInsight]:
    """Run every rule (no short-circuit) and order the result by priority.

    The sort is stable, so insights of equal priority keep rule order.
    """

    ctx = InsightContext(
        employees=employees,
        projects=projects,
        attendance=attendance,
        metrics=dashboard_metrics(employees, projects, attendance, policy=policy),
        today=today or today_local(),
        policy=policy,
    )

    insights: list[ActionableInsight] = []
    for rule in rules if rules is not None else InsightRuleFactory().default_rules():
        emitted = rule.evaluate(ctx)
        logger.debug("%s emitted %d insight(s)", type(rule).__name__, len(emitted))
        insights.extend(emitted)

    return sorted(insights, key=lambda i: i.priority)
