from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .common.datetime_utils import today_local
from .common.http import WorkforceJSONProvider, register_error_handlers
from .common.logging_setup import configure_logging
from .container import Container, build_container_from_settings
from .database.bootstrap import apply_schema, list_tables, seed_store
from .database.connection import DBConfig, DatabaseConnection
from .employees.controller import register as register_employees
from .insights.controller import register as register_insights
from .payroll.controller import register as register_payroll
from .projects.controller import register as register_projects

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Pass a ready ``container`` to skip settings-driven wiring (tests)."""

    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = WorkforceJSONProvider(app)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting with settings=%s", settings_module)

    if container is None:
        backend = str(getattr(settings, "STORE_BACKEND", "mysql")).lower()
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
            apply_schema(conn, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(conn)))

        container = build_container_from_settings(settings)

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_store(container.store, today=today_local())

    app.extensions["workforce_container"] = container
    register_error_handlers(app)

    register_employees(app, container)
    register_projects(app, container)
    register_attendance(app, container)
    register_analytics(app, container)
    register_insights(app, container)
    register_payroll(app, container)

    return app
