from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, ok
from ..core.constants import DEFAULT_TREND_WEEKS
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.analytics_service

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return ok(service.dashboard().to_dict())

    @app.route("/api/analytics/trends", methods=["GET"], endpoint="profit_trends")
    def profit_trends():
        try:
            weeks = int(request.args.get("weeks", DEFAULT_TREND_WEEKS))
        except ValueError as exc:
            raise ValidationError("weeks must be an integer") from exc
        if weeks < 1:
            raise ValidationError("weeks must be at least 1")
        points = service.trends(weeks, today=date_arg("today"))
        return ok([p.to_dict() for p in points])

    @app.route("/api/analytics/workforce", methods=["GET"], endpoint="workforce_analytics")
    def workforce_analytics():
        return ok(service.workforce(today=date_arg("today")).to_dict())
