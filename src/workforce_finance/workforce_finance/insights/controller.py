from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.insight_service

    @app.route("/api/insights", methods=["GET"], endpoint="generate_insights")
    def generate_insights():
        insights = service.generate(today=date_arg("today"))
        return ok([i.to_dict() for i in insights])

    @app.route("/api/insights/refresh", methods=["POST"], endpoint="refresh_insights")
    def refresh_insights():
        insights = service.refresh(today=date_arg("today"))
        return ok([i.to_dict() for i in insights], message=f"Stored {len(insights)} insights")

    @app.route("/api/insights/stored", methods=["GET"], endpoint="stored_insights")
    def stored_insights():
        insights = service.list_stored(status=request.args.get("status"))
        return ok([i.to_dict() for i in insights])

    @app.route("/api/insights/<insight_id>/status", methods=["POST"], endpoint="set_insight_status")
    def set_insight_status(insight_id: str):
        insight = service.set_status(insight_id, str(json_body().get("status") or ""))
        return ok(insight.to_dict(), message="Insight updated")
