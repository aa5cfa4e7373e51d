from decimal import Decimal

import pytest

from factories import daily_records, make_employee
from workforce_finance.core.exceptions import NotFoundError, ValidationError
from workforce_finance.employees.service import filter_employees, validate_employee


def _payload(**overrides):
    data = {
        "name": "Ahmed Ali",
        "employee_code": "EMP001",
        "trade": "Electrician",
        "nationality": "Saudi",
        "phone_number": "+966501234567",
        "hourly_rate": "30",
        "actual_rate": "50",
    }
    data.update(overrides)
    return data


def test_valid_payload_has_no_errors():
    assert validate_employee(_payload()) == []


def test_missing_fields_are_reported_by_name():
    errors = validate_employee({})

    assert "Employee name is required" in errors
    assert "Employee ID is required" in errors
    assert "Phone number is required" in errors
    assert "Valid hourly rate is required" in errors
    assert "Valid actual rate is required" in errors
    assert "Phone number must be in format +966XXXXXXXXX" not in errors


def test_actual_rate_must_exceed_hourly_rate():
    errors = validate_employee(_payload(hourly_rate="50", actual_rate="50"))

    assert errors == ["Actual rate must be higher than hourly rate for profitability"]


@pytest.mark.parametrize("phone", ["0501234567", "+96650123456", "+9665012345678", "+966 50123456"])
def test_phone_number_format(phone):
    assert validate_employee(_payload(phone_number=phone)) == ["Phone number must be in format +966XXXXXXXXX"]


def test_filter_by_text_and_exact_fields():
    employees = [
        make_employee("emp_1", name="Ahmed", trade="Electrician", nationality="Saudi"),
        make_employee("emp_2", name="Rajesh", trade="Welder", nationality="Indian", project_id=None),
    ]

    assert [e.id for e in filter_employees(employees, "WELD")] == ["emp_2"]
    assert [e.id for e in filter_employees(employees, "emp_1")] == ["emp_1"]
    assert [e.id for e in filter_employees(employees, nationality="Saudi")] == ["emp_1"]
    assert [e.id for e in filter_employees(employees, project_id="proj_1")] == ["emp_1"]
    assert filter_employees(employees, "nobody") == []
    assert len(filter_employees(employees)) == 2


def test_create_assigns_id_and_timestamps(container, fixed_now):
    employee = container.employee_service.create(_payload())

    assert employee.id.startswith("emp_")
    assert employee.hourly_rate == Decimal("30")
    assert employee.created_at == fixed_now
    assert container.employees_repo.get_by_id(employee.id) == employee


def test_create_rejects_invalid_payload_without_saving(container):
    with pytest.raises(ValidationError) as exc_info:
        container.employee_service.create(_payload(name=" "))

    assert exc_info.value.errors == ["Employee name is required"]
    assert container.employees_repo.list_all() == []


def test_update_merges_and_revalidates(container, fixed_now):
    container.employees_repo.add(make_employee("emp_1"))

    updated = container.employee_service.update("emp_1", {"actual_rate": "55"})

    assert updated.actual_rate == Decimal("55")
    assert updated.updated_at == fixed_now
    with pytest.raises(ValidationError):
        container.employee_service.update("emp_1", {"actual_rate": "10"})
    assert container.employees_repo.get_by_id("emp_1").actual_rate == Decimal("55")


def test_delete_removes_only_that_employees_attendance(container):
    container.employees_repo.add(make_employee("emp_1"))
    container.employees_repo.add(make_employee("emp_2"))
    container.attendance_repo.add_many(daily_records("emp_1", days=3) + daily_records("emp_2", days=2))

    removed = container.employee_service.delete("emp_1")

    assert removed == 3
    assert container.employees_repo.get_by_id("emp_1") is None
    assert {r.employee_id for r in container.attendance_repo.list_all()} == {"emp_2"}


def test_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.employee_service.get("emp_404")
    with pytest.raises(NotFoundError):
        container.employee_service.delete("emp_404")
