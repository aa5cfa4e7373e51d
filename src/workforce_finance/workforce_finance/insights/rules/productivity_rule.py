from __future__ import annotations

from decimal import Decimal

from ...core.constants import PRODUCTIVITY_TARGET
from ...core.enums import InsightCategory, InsightImpact
from ..model import AchievementInsight, ActionableInsight
from .base import InsightContext, InsightRule


class ProductivityRule(InsightRule):
    def __init__(self, target: Decimal = PRODUCTIVITY_TARGET):
        self._target = target

    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        index = ctx.metrics.productivity_index
        if index <= self._target:
            return []
        return [
            AchievementInsight(
                id=f"insight_prod_{ctx.today:%Y%m%d}",
                title="Excellent Productivity Performance",
                description=(
                    f"Productivity index of {index:.1f} {ctx.policy.currency}/hour exceeds target. "
                    "Team performance is outstanding!"
                ),
                impact=InsightImpact.MEDIUM,
                category=InsightCategory.EFFICIENCY,
                action_required=False,
                priority=3,
            )
        ]
