from __future__ import annotations

from dataclasses import dataclass

from .rules.base import InsightRule
from .rules.document_expiry_rule import DocumentExpiryRule
from .rules.margin_rule import ProfitMarginRule
from .rules.productivity_rule import ProductivityRule
from .rules.project_attendance_rule import ProjectAttendanceRule
from .rules.project_opportunity_rule import ProjectOpportunityRule
from .rules.utilization_rule import UtilizationRule


@dataclass
class InsightRuleFactory:
    """Factory Pattern: assemble the rule set the generator runs."""

    def default_rules(self) -> list[InsightRule]:
        return [
            UtilizationRule(),
            ProfitMarginRule(),
            ProductivityRule(),
            DocumentExpiryRule(),
            ProjectOpportunityRule(),
            ProjectAttendanceRule(),
        ]
