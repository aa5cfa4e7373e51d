from __future__ import annotations

from ...core.constants import DOCUMENT_URGENT_DAYS, DOCUMENT_WARNING_DAYS
from ...core.enums import InsightCategory, InsightImpact
from ..model import ActionableInsight, AlertInsight
from .base import InsightContext, InsightRule


class DocumentExpiryRule(InsightRule):
    """One alert per document expiring within the warning window (already expired ones excluded)."""

    def __init__(self, warning_days: int = DOCUMENT_WARNING_DAYS, urgent_days: int = DOCUMENT_URGENT_DAYS):
        self._warning_days = warning_days
        self._urgent_days = urgent_days

    def evaluate(self, ctx: InsightContext) -> list[ActionableInsight]:
        out: list[ActionableInsight] = []
        for employee in ctx.employees:
            for doc in employee.documents:
                remaining = doc.remaining_days(ctx.today)
                if remaining is None or not 0 < remaining <= self._warning_days:
                    continue
                out.append(
                    AlertInsight(
                        id=f"insight_doc_{employee.id}_{doc.id}",
                        title="Document Expiry Warning",
                        description=(
                            f"{employee.name}'s {doc.name} expires in {remaining} days. "
                            "Renewal required to maintain compliance."
                        ),
                        impact=InsightImpact.HIGH,
                        category=InsightCategory.OPERATIONAL,
                        action_required=True,
                        priority=1 if remaining <= self._urgent_days else 4,
                        deadline=doc.expiry_date,
                    )
                )
        return out
