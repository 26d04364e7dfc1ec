from __future__ import annotations

import importlib
import logging
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.app_logger import get_logger, setup_logging
from .container import Container, build_container
from .core.constants import LATE_CUTOFF_HOUR
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .projection.controller import register as register_projection
from .students.controller import register as register_students

log = get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", None))
    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            late_cutoff_hour=int(getattr(settings, "LATE_CUTOFF_HOUR", LATE_CUTOFF_HOUR)),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            try:
                apply_schema(DBConfig(**db_config))
            except mysql.connector.Error as exc:
                # Start anyway; requests are served from the local mirror until /api/health recovers.
                container.storage_mode.enter_degraded(str(exc))

    app.extensions["attendance_tracker"] = container

    register_students(app, container)
    register_attendance(app, container)
    register_projection(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        mode = container.storage_mode
        mode.try_recover()
        return jsonify(
            {
                "status": "ok",
                "message": "Server is running",
                "degraded": mode.degraded,
                "reason": mode.reason,
            }
        )

    return app
