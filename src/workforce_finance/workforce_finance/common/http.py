"""Helpers shared by the Flask controllers."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from flask import Flask, current_app, jsonify, request
from flask.json.provider import DefaultJSONProvider

from ..core.exceptions import NotFoundError, ValidationError
from ..storage.store import json_default
from .datetime_utils import coerce_date

logger = logging.getLogger(__name__)


class WorkforceJSONProvider(DefaultJSONProvider):
    """Decimals as strings (no float rounding), dates as ISO strings."""

    @staticmethod
    def default(o: Any) -> Any:
        return json_default(o)


def ok(data: Any = None, *, status: int = 200, message: Optional[str] = None):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def date_arg(name: str, default: Optional[date] = None) -> Optional[date]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return default
    try:
        return coerce_date(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be in YYYY-MM-DD format") from exc


def download(content: str, *, filename: str, mimetype: str):
    return current_app.response_class(
        content.encode("utf-8-sig"),
        mimetype=mimetype,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        logger.warning("%s %s rejected: %s", request.method, request.path, e.errors)
        return jsonify({"success": False, "message": str(e), "errors": e.errors}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        logger.warning("%s %s: %s", request.method, request.path, e)
        return jsonify({"success": False, "message": str(e)}), 404
