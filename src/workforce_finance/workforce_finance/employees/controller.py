from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = service.list_employees(
            request.args.get("q", ""),
            nationality=request.args.get("nationality"),
            trade=request.args.get("trade"),
            project_id=request.args.get("project_id"),
            status=request.args.get("status"),
        )
        return ok([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        employee = service.create(json_body())
        return ok(employee.to_dict(), status=201, message="Employee added")

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return ok(service.get(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PATCH", "PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        employee = service.update(employee_id, json_body())
        return ok(employee.to_dict(), message="Employee updated")

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        removed = service.delete(employee_id)
        return ok({"attendance_removed": removed}, message="Employee deleted")

    @app.route("/api/employees/<employee_id>/performance", methods=["GET"], endpoint="employee_performance")
    def employee_performance(employee_id: str):
        return ok(service.performance(employee_id).to_dict())
