import pytest

from factories import TODAY, make_employee
from workforce_finance.core.enums import InsightStatus
from workforce_finance.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def seeded(container):
    container.employees_repo.add(make_employee("emp_1", project_id="proj_1"))
    container.employees_repo.add(make_employee("emp_2", project_id=None))
    return container


def test_refresh_stores_generated_insights(seeded):
    stored = seeded.insight_service.refresh(today=TODAY)

    assert [i.id for i in seeded.insight_service.list_stored()] == [i.id for i in stored]
    assert any(i.id == "insight_util_20250115" for i in stored)


def test_status_lifecycle(seeded):
    seeded.insight_service.refresh(today=TODAY)
    service = seeded.insight_service

    service.set_status("insight_util_20250115", "acknowledged")
    service.set_status("insight_util_20250115", "in-progress")
    done = service.set_status("insight_util_20250115", "completed")

    assert done.status == InsightStatus.COMPLETED
    assert [i.id for i in service.list_stored(status="completed")] == ["insight_util_20250115"]

    with pytest.raises(ValidationError):
        service.set_status("insight_util_20250115", "new")


def test_refresh_keeps_review_status(seeded):
    seeded.insight_service.refresh(today=TODAY)
    seeded.insight_service.set_status("insight_util_20250115", "dismissed")

    again = seeded.insight_service.refresh(today=TODAY)

    util = next(i for i in again if i.id == "insight_util_20250115")
    assert util.status == InsightStatus.DISMISSED


def test_unknown_status_and_unknown_insight(seeded):
    seeded.insight_service.refresh(today=TODAY)

    with pytest.raises(ValidationError):
        seeded.insight_service.set_status("insight_util_20250115", "archived")
    with pytest.raises(NotFoundError):
        seeded.insight_service.set_status("nope", "acknowledged")
