from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status of a worker."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on-leave"


class ProjectStatus(str, Enum):
    """Lifecycle of a manpower project."""

    ACTIVE = "active"
    HOLD = "hold"
    COMPLETED = "completed"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DocumentType(str, Enum):
    PASSPORT = "passport"
    VISA = "visa"
    IQAMA = "iqama"
    CONTRACT = "contract"
    CERTIFICATE = "certificate"
    MEDICAL = "medical"
    OTHER = "other"


class InsightType(str, Enum):
    OPTIMIZATION = "optimization"
    ALERT = "alert"
    ACHIEVEMENT = "achievement"
    RECOMMENDATION = "recommendation"


class InsightImpact(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightCategory(str, Enum):
    FINANCIAL = "financial"
    OPERATIONAL = "operational"
    SAFETY = "safety"
    EFFICIENCY = "efficiency"


class InsightStatus(str, Enum):
    """Review workflow of a stored insight."""

    NEW = "new"
    ACKNOWLEDGED = "acknowledged"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    DISMISSED = "dismissed"


class TradeDemand(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
