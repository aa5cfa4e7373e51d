"""Actionable insights: one dataclass per insight type.

Every variant shares the common header (id, title, impact, priority, ...);
only alerts carry a deadline and only optimizations/recommendations carry
benefit and cost estimates.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional, Union

from ..common.datetime_utils import coerce_date, isoformat_or_none
from ..common.money import to_decimal
from ..core.enums import InsightCategory, InsightImpact, InsightStatus, InsightType


@dataclass(frozen=True)
class _Insight:
    type: ClassVar[InsightType]

    id: str
    title: str
    description: str
    impact: InsightImpact
    category: InsightCategory
    action_required: bool
    priority: int
    status: InsightStatus = InsightStatus.NEW

    def with_status(self, status: InsightStatus) -> "ActionableInsight":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"type": self.type.value}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, date):
                value = isoformat_or_none(value)
            out[f.name] = value
        return out

    @classmethod
    def _common(cls, data: Mapping[str, Any]) -> dict:
        return {
            "id": str(data["id"]),
            "title": str(data.get("title") or ""),
            "description": str(data.get("description") or ""),
            "impact": InsightImpact(data.get("impact") or InsightImpact.LOW.value),
            "category": InsightCategory(data.get("category") or InsightCategory.OPERATIONAL.value),
            "action_required": bool(data.get("action_required")),
            "priority": int(data.get("priority") or 0),
            "status": InsightStatus(data.get("status") or InsightStatus.NEW.value),
        }


def _optional_decimal(value: Any) -> Optional[Decimal]:
    return None if value is None else to_decimal(value)


@dataclass(frozen=True)
class OptimizationInsight(_Insight):
    type: ClassVar[InsightType] = InsightType.OPTIMIZATION

    estimated_benefit: Optional[Decimal] = None
    implementation_cost: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OptimizationInsight":
        return cls(
            **cls._common(data),
            estimated_benefit=_optional_decimal(data.get("estimated_benefit")),
            implementation_cost=_optional_decimal(data.get("implementation_cost")),
        )


@dataclass(frozen=True)
class AlertInsight(_Insight):
    type: ClassVar[InsightType] = InsightType.ALERT

    deadline: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AlertInsight":
        return cls(**cls._common(data), deadline=coerce_date(data.get("deadline")))


@dataclass(frozen=True)
class AchievementInsight(_Insight):
    type: ClassVar[InsightType] = InsightType.ACHIEVEMENT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AchievementInsight":
        return cls(**cls._common(data))


@dataclass(frozen=True)
class RecommendationInsight(_Insight):
    type: ClassVar[InsightType] = InsightType.RECOMMENDATION

    estimated_benefit: Optional[Decimal] = None
    implementation_cost: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RecommendationInsight":
        return cls(
            **cls._common(data),
            estimated_benefit=_optional_decimal(data.get("estimated_benefit")),
            implementation_cost=_optional_decimal(data.get("implementation_cost")),
        )


ActionableInsight = Union[OptimizationInsight, AlertInsight, AchievementInsight, RecommendationInsight]

_BY_TYPE = {
    InsightType.OPTIMIZATION: OptimizationInsight,
    InsightType.ALERT: AlertInsight,
    InsightType.ACHIEVEMENT: AchievementInsight,
    InsightType.RECOMMENDATION: RecommendationInsight,
}


def insight_from_dict(data: Mapping[str, Any]) -> ActionableInsight:
    return _BY_TYPE[InsightType(data["type"])].from_dict(data)
