from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..analytics.joins import index_employees, join_employee
from ..common.datetime_utils import month_bounds, now_local
from ..common.http import download, ok
from ..core.exceptions import ValidationError
from ..container import Container
from .export.bank_file import render_bank_transfer
from .export.csv_export import to_csv, to_json
from .export.payslip import render_payslips
from .export.rows import (
    PAYROLL_COLUMNS,
    PROJECT_COLUMNS,
    PROJECT_PAYROLL_COLUMNS,
    SUMMARY_COLUMNS,
    attendance_columns,
    attendance_row,
    employee_columns,
    employee_row,
    payroll_rows,
    project_payroll_row,
    project_row,
    summary_rows,
)

_DATASETS = ("employees", "projects", "attendance")
_FORMATS = {"csv": "text/csv", "json": "application/json"}


def register(app: Flask, container: Container) -> None:
    service = container.payroll_report_service
    policy = container.policy

    def _month() -> tuple[str, date, date]:
        month = (request.args.get("month") or now_local().strftime("%Y-%m")).strip()
        try:
            start, end = month_bounds(month)
        except ValueError as exc:
            raise ValidationError("month must be in YYYY-MM format") from exc
        return month[:7], start, end

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_summary")
    def payroll_summary():
        _, start, end = _month()
        summary = service.summary(start=start, end=end, project_id=request.args.get("project_id") or None)
        return ok(summary.to_dict())

    @app.route("/api/payroll/projects", methods=["GET"], endpoint="project_payrolls")
    def project_payrolls():
        _, start, end = _month()
        return ok([g.to_dict() for g in service.by_project(start=start, end=end)])

    @app.route("/api/payroll/employees/<employee_id>", methods=["GET"], endpoint="employee_payroll")
    def employee_payroll(employee_id: str):
        _, start, end = _month()
        return ok(service.employee_payroll(employee_id, start=start, end=end).to_dict())

    @app.route("/downloads/payroll/employees.csv", methods=["GET"], endpoint="download_employee_payroll")
    def download_employee_payroll():
        month, start, end = _month()
        calcs = service.employee_payrolls(start=start, end=end, project_id=request.args.get("project_id") or None)
        return download(to_csv(payroll_rows(calcs), PAYROLL_COLUMNS), filename=f"employee_payroll_{month}.csv", mimetype="text/csv")

    @app.route("/downloads/payroll/projects.csv", methods=["GET"], endpoint="download_project_payroll")
    def download_project_payroll():
        month, start, end = _month()
        rows = [project_payroll_row(g) for g in service.by_project(start=start, end=end)]
        return download(to_csv(rows, PROJECT_PAYROLL_COLUMNS), filename=f"project_payroll_{month}.csv", mimetype="text/csv")

    @app.route("/downloads/payroll/summary.csv", methods=["GET"], endpoint="download_payroll_summary")
    def download_payroll_summary():
        month, start, end = _month()
        summary = service.summary(start=start, end=end, project_id=request.args.get("project_id") or None)
        rows = summary_rows(summary)
        return download(to_csv(rows, SUMMARY_COLUMNS), filename=f"payroll_summary_{month}.csv", mimetype="text/csv")

    @app.route("/downloads/payroll/payslips.txt", methods=["GET"], endpoint="download_payslips")
    def download_payslips():
        month, start, end = _month()
        text = render_payslips(
            service.employee_payrolls(start=start, end=end, project_id=request.args.get("project_id") or None),
            month=month,
            generated_at=now_local(),
            company=policy.company_name,
            currency=policy.currency,
            gosi_rate=policy.gosi_rate,
        )
        return download(text, filename=f"payslips_{month}.txt", mimetype="text/plain")

    @app.route("/downloads/payroll/bank-transfer.txt", methods=["GET"], endpoint="download_bank_transfer")
    def download_bank_transfer():
        month, start, end = _month()
        text = render_bank_transfer(
            service.employee_payrolls(start=start, end=end, project_id=request.args.get("project_id") or None),
            month=month,
            generated_at=now_local(),
            company=policy.company_name,
            currency=policy.currency,
        )
        return download(text, filename=f"bank_transfer_{month}.txt", mimetype="text/plain")

    @app.route("/downloads/<dataset>.<fmt>", methods=["GET"], endpoint="download_dataset")
    def download_dataset(dataset: str, fmt: str):
        if dataset not in _DATASETS or fmt not in _FORMATS:
            raise ValidationError(f"Unsupported export: {dataset}.{fmt}")

        projects = container.projects_repo.list_all()
        projects_by_id = {p.id: p for p in projects}
        employees = container.employees_repo.list_all()

        if dataset == "employees":
            columns = employee_columns(policy.currency)
            rows = [employee_row(e, projects_by_id.get(e.project_id or ""), currency=policy.currency) for e in employees]
        elif dataset == "projects":
            columns = PROJECT_COLUMNS
            rows = [project_row(p) for p in projects]
        else:
            columns = attendance_columns(policy.currency)
            by_id = index_employees(employees)
            rows = []
            for record in container.attendance_repo.list_all():
                employee = join_employee(record, by_id)
                if employee is None:
                    continue
                rows.append(attendance_row(record, employee, projects_by_id.get(employee.project_id or ""), policy=policy))

        content = to_csv(rows, columns) if fmt == "csv" else to_json(rows)
        stamp = now_local().strftime("%Y-%m-%d")
        return download(content, filename=f"{dataset}_{stamp}.{fmt}", mimetype=_FORMATS[fmt])
