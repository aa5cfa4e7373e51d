from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date, coerce_datetime, days_until, isoformat_or_none
from ..common.money import to_decimal
from ..core.enums import DocumentType, EmployeeStatus


@dataclass(frozen=True)
class EmployeeDocument:
    """Identity/work document attached to an employee (iqama, visa, ...)."""

    id: str
    name: str
    type: DocumentType = DocumentType.OTHER
    expiry_date: Optional[date] = None
    days_until_expiry: Optional[int] = None
    notes: Optional[str] = None

    def remaining_days(self, today: date) -> Optional[int]:
        """Days left before expiry; the stored value is used when no date is known."""

        if self.expiry_date is not None:
            return days_until(self.expiry_date, today)
        return self.days_until_expiry

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmployeeDocument":
        days = data.get("days_until_expiry")
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            type=DocumentType(data.get("type") or DocumentType.OTHER.value),
            expiry_date=coerce_date(data.get("expiry_date")),
            days_until_expiry=int(days) if days is not None else None,
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "expiry_date": isoformat_or_none(self.expiry_date),
            "days_until_expiry": self.days_until_expiry,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class Employee:
    """Domain entity: a worker with a cost rate and a client billing rate.

    ``hourly_rate`` is what the company pays, ``actual_rate`` is what the client
    is charged. ``project_id`` is None for unassigned workers.
    """

    id: str
    employee_code: str
    name: str
    trade: str
    nationality: str
    hourly_rate: Decimal
    actual_rate: Decimal
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    project_id: Optional[str] = None
    phone_number: str = ""
    name_ar: Optional[str] = None
    performance_rating: Optional[int] = None
    skills: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    documents: tuple[EmployeeDocument, ...] = ()
    emergency_contact: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def with_changes(self, **changes: Any) -> "Employee":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        rating = data.get("performance_rating")
        return cls(
            id=str(data["id"]),
            employee_code=str(data.get("employee_code") or ""),
            name=str(data.get("name") or ""),
            trade=str(data.get("trade") or ""),
            nationality=str(data.get("nationality") or ""),
            hourly_rate=to_decimal(data.get("hourly_rate")),
            actual_rate=to_decimal(data.get("actual_rate")),
            status=EmployeeStatus(data.get("status") or EmployeeStatus.ACTIVE.value),
            project_id=data.get("project_id") or None,
            phone_number=str(data.get("phone_number") or ""),
            name_ar=data.get("name_ar"),
            performance_rating=int(rating) if rating is not None else None,
            skills=tuple(data.get("skills") or ()),
            certifications=tuple(data.get("certifications") or ()),
            documents=tuple(EmployeeDocument.from_dict(d) for d in data.get("documents") or ()),
            emergency_contact=data.get("emergency_contact"),
            created_at=coerce_datetime(data.get("created_at")),
            updated_at=coerce_datetime(data.get("updated_at")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_code": self.employee_code,
            "name": self.name,
            "name_ar": self.name_ar,
            "trade": self.trade,
            "nationality": self.nationality,
            "phone_number": self.phone_number,
            "hourly_rate": self.hourly_rate,
            "actual_rate": self.actual_rate,
            "status": self.status.value,
            "project_id": self.project_id,
            "performance_rating": self.performance_rating,
            "skills": list(self.skills),
            "certifications": list(self.certifications),
            "documents": [d.to_dict() for d in self.documents],
            "emergency_contact": self.emergency_contact,
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
        }
