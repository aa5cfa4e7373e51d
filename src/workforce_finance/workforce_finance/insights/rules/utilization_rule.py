from __future__ import annotations

from decimal import Decimal

from ...core.constants import UTILIZATION_TARGET
from ...core.enums import InsightCategory, InsightImpact
from ..model import ActionableInsight, OptimizationInsight
from .base import InsightContext, InsightRule

REASSIGNMENT_BENEFIT = Decimal("50000")
REASSIGNMENT_COST = Decimal("5000")


class UtilizationRule(InsightRule):
    """Too many active workers sitting without a project."""

    def __init__(self, target: Decimal = UTILIZATION_TARGET):
        self._target = target

    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        rate = ctx.metrics.utilization_rate
        if rate >= self._target:
            return []
        return [
            OptimizationInsight(
                id=f"insight_util_{ctx.today:%Y%m%d}",
                title="Workforce Utilization Below Target",
                description=(
                    f"Current utilization rate is {rate:.1f}%. Consider reassigning unassigned workers "
                    "to active projects to improve efficiency and revenue generation."
                ),
                impact=InsightImpact.HIGH,
                category=InsightCategory.OPERATIONAL,
                action_required=True,
                priority=1,
                estimated_benefit=REASSIGNMENT_BENEFIT,
                implementation_cost=REASSIGNMENT_COST,
            )
        ]
