from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date, coerce_datetime, isoformat_or_none
from ..common.money import to_decimal
from ..core.enums import ProjectStatus, RiskLevel


@dataclass(frozen=True)
class ProjectStatusEntry:
    """One line of a project's status-history log."""

    id: str
    status: ProjectStatus
    progress: int
    updated_at: datetime
    previous_status: Optional[ProjectStatus] = None
    updated_by: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectStatusEntry":
        previous = data.get("previous_status")
        return cls(
            id=str(data["id"]),
            status=ProjectStatus(data["status"]),
            progress=int(data.get("progress") or 0),
            updated_at=coerce_datetime(data.get("updated_at")) or datetime.min,
            previous_status=ProjectStatus(previous) if previous else None,
            updated_by=data.get("updated_by"),
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status.value,
            "progress": self.progress,
            "updated_at": isoformat_or_none(self.updated_at),
            "previous_status": self.previous_status.value if self.previous_status else None,
            "updated_by": self.updated_by,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class ManpowerProject:
    """Domain entity: a client engagement that employees are assigned to.

    ``profit_margin`` is the declared (contracted) margin, not a computed one.
    """

    id: str
    name: str
    client: str
    location: str
    start_date: date
    end_date: date
    budget: Decimal
    status: ProjectStatus = ProjectStatus.ACTIVE
    progress: int = 0
    risk_level: RiskLevel = RiskLevel.LOW
    profit_margin: Decimal = Decimal("0")
    description: Optional[str] = None
    status_history: tuple[ProjectStatusEntry, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        """Active or on hold: still staffed and still reported on."""

        return self.status in (ProjectStatus.ACTIVE, ProjectStatus.HOLD)

    def with_changes(self, **changes: Any) -> "ManpowerProject":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ManpowerProject":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            client=str(data.get("client") or ""),
            location=str(data.get("location") or ""),
            start_date=coerce_date(data.get("start_date")),
            end_date=coerce_date(data.get("end_date")),
            budget=to_decimal(data.get("budget")),
            status=ProjectStatus(data.get("status") or ProjectStatus.ACTIVE.value),
            progress=int(data.get("progress") or 0),
            risk_level=RiskLevel(data.get("risk_level") or RiskLevel.LOW.value),
            profit_margin=to_decimal(data.get("profit_margin")),
            description=data.get("description"),
            status_history=tuple(ProjectStatusEntry.from_dict(e) for e in data.get("status_history") or ()),
            created_at=coerce_datetime(data.get("created_at")),
            updated_at=coerce_datetime(data.get("updated_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "client": self.client,
            "location": self.location,
            "start_date": isoformat_or_none(self.start_date),
            "end_date": isoformat_or_none(self.end_date),
            "budget": self.budget,
            "status": self.status.value,
            "progress": self.progress,
            "risk_level": self.risk_level.value,
            "profit_margin": self.profit_margin,
            "description": self.description,
            "status_history": [e.to_dict() for e in self.status_history],
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
        }
