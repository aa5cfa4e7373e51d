from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from ...core.constants import MARGIN_ALERT_DEADLINE_DAYS, PROFIT_MARGIN_FLOOR
from ...core.enums import InsightCategory, InsightImpact
from ..model import ActionableInsight, AlertInsight
from .base import InsightContext, InsightRule


class ProfitMarginRule(InsightRule):
    def __init__(self, floor: Decimal = PROFIT_MARGIN_FLOOR, deadline_days: int = MARGIN_ALERT_DEADLINE_DAYS):
        self._floor = floor
        self._deadline_days = deadline_days

    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        margin = ctx.metrics.average_profit_margin
        if margin >= self._floor:
            return []
        return [
            AlertInsight(
                id=f"insight_margin_{ctx.today:%Y%m%d}",
                title="Low Profit Margin Alert",
                description=(
                    f"Average profit margin is {margin:.1f}%. Review actual rates and optimize cost "
                    "structure to improve profitability."
                ),
                impact=InsightImpact.HIGH,
                category=InsightCategory.FINANCIAL,
                action_required=True,
                priority=2,
                deadline=ctx.today + timedelta(days=self._deadline_days),
            )
        ]
