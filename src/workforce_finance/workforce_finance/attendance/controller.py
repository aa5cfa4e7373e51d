from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, json_body, ok
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        records = service.list_records(
            start=date_arg("start"),
            end=date_arg("end"),
            employee_id=request.args.get("employee_id") or None,
        )
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        record = service.record(json_body())
        return ok(record.to_dict(), status=201, message="Attendance recorded")

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="bulk_attendance")
    def bulk_attendance():
        rows = request.get_json(silent=True)
        if not isinstance(rows, list):
            raise ValidationError("Request body must be a JSON array")
        records = service.bulk_record(rows)
        return ok([r.to_dict() for r in records], status=201, message=f"Imported {len(records)} records")

    @app.route("/api/attendance/<record_id>", methods=["PATCH", "PUT"], endpoint="update_attendance")
    def update_attendance(record_id: str):
        record = service.update(record_id, json_body())
        return ok(record.to_dict(), message="Attendance updated")

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: str):
        service.delete(record_id)
        return ok(message="Attendance deleted")
