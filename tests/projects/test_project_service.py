from decimal import Decimal

import pytest

from factories import daily_records, make_employee, make_project
from workforce_finance.core.enums import ProjectStatus
from workforce_finance.core.exceptions import NotFoundError, ValidationError
from workforce_finance.projects.service import validate_project


def _payload(**overrides):
    data = {
        "name": "Metro Line 3",
        "client": "Riyadh Metro",
        "location": "Riyadh",
        "start_date": "2025-01-01",
        "end_date": "2025-12-31",
        "budget": "500000",
    }
    data.update(overrides)
    return data


def test_valid_payload_has_no_errors():
    assert validate_project(_payload()) == []


def test_date_order_and_progress_range():
    errors = validate_project(_payload(end_date="2024-12-31", progress=120))

    assert errors == ["End date must be after start date", "Progress must be between 0 and 100"]


def test_budget_and_required_fields():
    errors = validate_project(_payload(client="", budget="0"))

    assert errors == ["Client is required", "Valid budget is required"]


def test_create_starts_with_empty_history(container, fixed_now):
    project = container.project_service.create(_payload())

    assert project.id.startswith("proj_")
    assert project.status == ProjectStatus.ACTIVE
    assert project.status_history == ()
    assert project.created_at == fixed_now


def test_status_change_is_logged(container, fixed_now):
    container.projects_repo.add(make_project("proj_1"))

    updated = container.project_service.change_status("proj_1", "hold", progress=40, notes="Permit delay")

    assert updated.status == ProjectStatus.HOLD
    assert updated.updated_at == fixed_now
    (entry,) = updated.status_history
    assert entry.previous_status == ProjectStatus.ACTIVE
    assert entry.status == ProjectStatus.HOLD
    assert entry.progress == 40
    assert entry.notes == "Permit delay"
    assert container.projects_repo.get_by_id("proj_1").status_history == (entry,)


def test_update_without_status_change_keeps_history(container):
    container.projects_repo.add(make_project("proj_1"))

    updated = container.project_service.update("proj_1", {"location": "Jeddah"})

    assert updated.location == "Jeddah"
    assert updated.status_history == ()


def test_unknown_status_is_rejected(container):
    container.projects_repo.add(make_project("proj_1"))

    with pytest.raises(ValidationError):
        container.project_service.change_status("proj_1", "archived")


def test_list_by_status(container):
    container.projects_repo.add(make_project("proj_1"))
    container.projects_repo.add(make_project("proj_2", status=ProjectStatus.COMPLETED))

    assert [p.id for p in container.project_service.list_projects(status="completed")] == ["proj_2"]
    assert len(container.project_service.list_projects()) == 2


def test_financials_for_project_staff(container):
    container.projects_repo.add(make_project("proj_1"))
    container.employees_repo.add(make_employee("emp_1", project_id="proj_1"))
    container.employees_repo.add(make_employee("emp_2", project_id=None))
    container.attendance_repo.add_many(daily_records("emp_1", days=2) + daily_records("emp_2", days=2))

    fin = container.project_service.financials("proj_1")

    assert fin.labor_cost == Decimal("480.00")
    assert fin.revenue == Decimal("800.00")


def test_unknown_project(container):
    with pytest.raises(NotFoundError):
        container.project_service.get("proj_404")
    with pytest.raises(NotFoundError):
        container.project_service.update("proj_404", {"progress": 10})
