from __future__ import annotations

from decimal import Decimal

from ...common.money import round_money
from ...core.constants import PROJECT_MARGIN_OPPORTUNITY
from ...core.enums import InsightCategory, InsightImpact
from ..model import ActionableInsight, RecommendationInsight
from .base import InsightContext, InsightRule

BENEFIT_SHARE = Decimal("0.2")


class ProjectOpportunityRule(InsightRule):
    """Open projects whose declared margin makes them worth more staff."""

    def __init__(self, threshold: Decimal = PROJECT_MARGIN_OPPORTUNITY):
        self._threshold = threshold

    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        out: list[ActionableInsight] = []
        for project in ctx.open_projects():
            if project.profit_margin <= self._threshold:
                continue
            profit = ctx.project_metrics(project.id).real_time_profit
            out.append(
                RecommendationInsight(
                    id=f"insight_proj_{project.id}",
                    title=f"{project.name} - High Profit Opportunity",
                    description=(
                        f"This project shows {project.profit_margin:.1f}% profit margin. "
                        "Consider allocating more resources to maximize returns."
                    ),
                    impact=InsightImpact.HIGH,
                    category=InsightCategory.FINANCIAL,
                    action_required=False,
                    priority=3,
                    estimated_benefit=round_money(max(profit, Decimal(0)) * BENEFIT_SHARE),
                )
            )
        return out
