from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..analytics.aggregation import project_financials, project_metrics
from ..analytics.model import ProjectMetrics
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import coerce_date, now_local
from ..common.validators import is_blank, is_positive_number, raise_if_errors
from ..core.enums import ProjectStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.policy import DEFAULT_POLICY, FinancePolicy
from ..employees.repository import EmployeeRepository
from ..finance.model import FinancialCalculation
from ..storage.collection import new_id
from .model import ManpowerProject, ProjectStatusEntry
from .repository import ProjectRepository

logger = logging.getLogger(__name__)

_REQUIRED = (
    ("name", "Project name is required"),
    ("client", "Client is required"),
    ("location", "Location is required"),
    ("start_date", "Start date is required"),
    ("end_date", "End date is required"),
)


def validate_project(data: Mapping[str, Any]) -> list[str]:
    errors = [message for field, message in _REQUIRED if is_blank(data.get(field))]

    if not is_positive_number(data.get("budget")):
        errors.append("Valid budget is required")

    try:
        start = coerce_date(data.get("start_date"))
        end = coerce_date(data.get("end_date"))
    except ValueError:
        errors.append("Dates must be in YYYY-MM-DD format")
    else:
        if start and end and start >= end:
            errors.append("End date must be after start date")

    progress = data.get("progress")
    if progress is not None:
        try:
            if not 0 <= float(progress) <= 100:
                errors.append("Progress must be between 0 and 100")
        except (TypeError, ValueError):
            errors.append("Progress must be between 0 and 100")

    return errors


class ProjectService:
    """Use case: manage manpower projects and report on them."""

    def __init__(
        self,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        policy: FinancePolicy = DEFAULT_POLICY,
    ):
        self._projects = projects
        self._employees = employees
        self._attendance = attendance
        self._policy = policy

    def list_projects(self, *, status: Optional[str] = None) -> Sequence[ManpowerProject]:
        projects = self._projects.list_all()
        if status:
            projects = [p for p in projects if p.status.value == status]
        return projects

    def get(self, project_id: str) -> ManpowerProject:
        project = self._projects.get_by_id(project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    @staticmethod
    def _build(payload: Mapping[str, Any]) -> ManpowerProject:
        try:
            return ManpowerProject.from_dict(payload)
        except ValueError as exc:
            raise ValidationError(f"Invalid project: {exc}") from exc

    def create(self, data: Mapping[str, Any]) -> ManpowerProject:
        errors = validate_project(data)
        if errors:
            logger.warning("Rejected project payload: %s", errors)
        raise_if_errors(errors, "project")

        stamp = now_local()
        project = self._build({**data, "id": new_id("proj"), "status_history": [], "created_at": stamp, "updated_at": stamp})
        self._projects.add(project)
        logger.info("Added project %s (%s)", project.id, project.name)
        return project

    def update(self, project_id: str, changes: Mapping[str, Any], *, updated_by: Optional[str] = None) -> ManpowerProject:
        """Partial update; a status or progress change is appended to the history."""

        current = self.get(project_id)
        merged = {**current.to_dict(), **changes}
        merged["id"] = current.id
        merged["created_at"] = current.created_at
        merged["status_history"] = [e.to_dict() for e in current.status_history]

        errors = validate_project(merged)
        if errors:
            logger.warning("Rejected update of project %s: %s", project_id, errors)
        raise_if_errors(errors, "project")

        stamp = now_local()
        merged["updated_at"] = stamp
        updated = self._build(merged)

        if updated.status != current.status or updated.progress != current.progress:
            entry = ProjectStatusEntry(
                id=new_id("status"),
                status=updated.status,
                progress=updated.progress,
                updated_at=stamp,
                previous_status=current.status,
                updated_by=updated_by,
                notes=changes.get("notes"),
            )
            updated = updated.with_changes(status_history=current.status_history + (entry,))

        if not self._projects.update(updated):
            raise NotFoundError(f"Project {project_id} not found")
        logger.info("Updated project %s", project_id)
        return updated

    def change_status(
        self,
        project_id: str,
        status: str,
        *,
        progress: Optional[int] = None,
        notes: Optional[str] = None,
        updated_by: Optional[str] = None,
    ) -> ManpowerProject:
        try:
            new_status = ProjectStatus(status)
        except ValueError as exc:
            raise ValidationError(f"Unknown project status: {status}") from exc

        changes: dict[str, Any] = {"status": new_status.value, "notes": notes}
        if progress is not None:
            changes["progress"] = progress
        return self.update(project_id, changes, updated_by=updated_by)

    def metrics(self, project_id: str) -> ProjectMetrics:
        self.get(project_id)
        return project_metrics(
            project_id,
            self._employees.list_all(),
            self._attendance.list_all(),
            policy=self._policy,
        )

    def financials(
        self,
        project_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> FinancialCalculation:
        self.get(project_id)
        return project_financials(
            project_id,
            self._employees.list_all(),
            self._attendance.list_in_range(start=start, end=end),
            policy=self._policy,
        )
