from __future__ import annotations

from decimal import Decimal

from ...core.constants import PROJECT_ATTENDANCE_FLOOR
from ...core.enums import InsightCategory, InsightImpact
from ..model import ActionableInsight, AlertInsight
from .base import InsightContext, InsightRule


class ProjectAttendanceRule(InsightRule):
    def __init__(self, floor: Decimal = PROJECT_ATTENDANCE_FLOOR):
        self._floor = floor

    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        out: list[ActionableInsight] = []
        for project in ctx.open_projects():
            rate = ctx.project_metrics(project.id).attendance_rate
            if rate >= self._floor:
                continue
            out.append(
                AlertInsight(
                    id=f"insight_attend_{project.id}",
                    title=f"{project.name} - Low Attendance Rate",
                    description=(
                        f"Attendance rate is {rate:.1f}%. Investigate causes and implement "
                        "improvement measures."
                    ),
                    impact=InsightImpact.MEDIUM,
                    category=InsightCategory.OPERATIONAL,
                    action_required=True,
                    priority=2,
                )
            )
        return out
