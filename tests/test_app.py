import pytest

from factories import daily_records, make_employee, make_project
from workforce_finance.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    container.projects_repo.add(make_project("proj_1", name="Metro"))
    container.employees_repo.add(make_employee("emp_1", name="Ahmed"))
    container.attendance_repo.add_many(daily_records("emp_1", days=2, overtime="1"))
    app = create_app(container)
    return app.test_client()


def test_employee_list_serializes_decimals_as_strings(client):
    resp = client.get("/api/employees?q=ahmed")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"][0]["hourly_rate"] == "30"


def test_invalid_employee_returns_400_with_errors(client):
    resp = client.post("/api/employees", json={"name": "X"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert "Employee ID is required" in body["errors"]


def test_non_object_body_is_rejected(client):
    resp = client.post("/api/attendance", json=[1, 2])

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Request body must be a JSON object"]


def test_unknown_project_returns_404(client):
    resp = client.get("/api/projects/proj_404")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_payroll_summary_for_month(client):
    resp = client.get("/api/payroll?month=2025-01")

    data = resp.get_json()["data"]
    assert data["employee_count"] == 1
    assert data["total_gross_pay"] == "570.00"


def test_bad_month_is_a_validation_error(client):
    assert client.get("/api/payroll?month=January").status_code == 400


def test_payroll_csv_download(client):
    resp = client.get("/downloads/payroll/employees.csv?month=2025-01")

    assert resp.status_code == 200
    assert resp.headers["Content-Disposition"] == "attachment; filename=employee_payroll_2025-01.csv"
    assert resp.data.startswith("﻿".encode("utf-8"))
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0].startswith('"Employee ID","Employee Name"')
    assert '"Ahmed"' in text


def test_dataset_export(client, fixed_now):
    resp = client.get("/downloads/attendance.json")

    assert resp.headers["Content-Disposition"] == "attachment; filename=attendance_2025-01-15.json"
    assert resp.mimetype == "application/json"
    assert client.get("/downloads/invoices.csv").status_code == 400


def test_dashboard_and_insights_respond(client):
    assert client.get("/api/dashboard").get_json()["success"] is True
    assert client.get("/api/insights").status_code == 200


def test_project_financials_csv(client):
    resp = client.get("/downloads/projects/proj_1/financials.csv")

    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == '"Metric","Value"'
    assert '"Labor Cost","570.00"' in lines
    assert '"Revenue","950.00"' in lines
    assert client.get("/downloads/projects/proj_404/financials.csv").status_code == 404


def test_payroll_summary_csv_honours_project_filter(client):
    resp = client.get("/downloads/payroll/summary.csv?month=2025-01&project_id=proj_2")

    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == '"Metric","Value"'
    assert '"Total Employees","0"' in lines
    assert '"Total Employees","1"' in client.get("/downloads/payroll/summary.csv?month=2025-01").data.decode("utf-8-sig")


def test_empty_dataset_export_has_header(client, container):
    container.store.set("workforce_attendance", [])

    text = client.get("/downloads/attendance.csv").data.decode("utf-8-sig")

    assert text.startswith('"Date","Employee ID","Employee Name"')
    assert len(text.splitlines()) == 1


def test_rejected_request_is_logged(client, caplog):
    with caplog.at_level("WARNING", logger="workforce_finance.common.http"):
        client.post("/api/employees", json={"name": "X"})
        client.get("/api/projects/proj_404")

    messages = [r.getMessage() for r in caplog.records if r.name == "workforce_finance.common.http"]
    assert any("POST /api/employees rejected" in m for m in messages)
    assert any("GET /api/projects/proj_404" in m for m in messages)
