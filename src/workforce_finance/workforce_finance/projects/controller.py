from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, download, json_body, ok
from ..container import Container
from ..payroll.export.csv_export import to_csv
from ..payroll.export.rows import SUMMARY_COLUMNS, financial_summary_rows


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    def list_projects():
        projects = service.list_projects(status=request.args.get("status"))
        return ok([p.to_dict() for p in projects])

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    def create_project():
        project = service.create(json_body())
        return ok(project.to_dict(), status=201, message="Project added")

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="get_project")
    def get_project(project_id: str):
        return ok(service.get(project_id).to_dict())

    @app.route("/api/projects/<project_id>", methods=["PATCH", "PUT"], endpoint="update_project")
    def update_project(project_id: str):
        data = json_body()
        updated_by = data.pop("updated_by", None)
        project = service.update(project_id, data, updated_by=updated_by)
        return ok(project.to_dict(), message="Project updated")

    @app.route("/api/projects/<project_id>/status", methods=["POST"], endpoint="change_project_status")
    def change_project_status(project_id: str):
        data = json_body()
        project = service.change_status(
            project_id,
            str(data.get("status") or ""),
            progress=data.get("progress"),
            notes=data.get("notes"),
            updated_by=data.get("updated_by"),
        )
        return ok(project.to_dict(), message="Project status updated")

    @app.route("/api/projects/<project_id>/metrics", methods=["GET"], endpoint="project_metrics")
    def project_metrics(project_id: str):
        return ok(service.metrics(project_id).to_dict())

    @app.route("/api/projects/<project_id>/financials", methods=["GET"], endpoint="project_financials")
    def project_financials(project_id: str):
        fin = service.financials(project_id, start=date_arg("start"), end=date_arg("end"))
        return ok(fin.to_dict())

    @app.route("/downloads/projects/<project_id>/financials.csv", methods=["GET"], endpoint="download_project_financials")
    def download_project_financials(project_id: str):
        start, end = date_arg("start"), date_arg("end")
        fin = service.financials(project_id, start=start, end=end)
        return download(
            to_csv(financial_summary_rows(fin), SUMMARY_COLUMNS),
            filename=f"project_{project_id}_financials.csv",
            mimetype="text/csv",
        )
