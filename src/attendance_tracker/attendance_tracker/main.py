from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import apply_schema, ensure_sample_records, list_tables
from .reports.controller import register as register_reports

logger = logging.getLogger("attendance_tracker")

_SETTING_KEYS = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "DB_ENGINE",
    "SQLITE_PATH",
    "DB_CONFIG",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


def load_settings(overrides: Optional[dict[str, Any]] = None) -> tuple[str, dict[str, Any]]:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {key: getattr(settings, key, None) for key in _SETTING_KEYS}
    values.update(overrides or {})
    return settings_module, values


def configure_logging(level: Optional[str]) -> None:
    logging.basicConfig(
        level=(level or "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    app = Flask(__name__, template_folder="../../../templates")

    settings_module, settings = load_settings(overrides)
    configure_logging(settings["LOG_LEVEL"])

    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings["DEBUG"])
    app.config["TESTING"] = bool(settings["TESTING"])
    app.config["DB_ENGINE"] = settings["DB_ENGINE"]

    container = build_container(
        db_engine=settings["DB_ENGINE"],
        db_config=settings["DB_CONFIG"],
        sqlite_path=settings["SQLITE_PATH"],
    )
    app.extensions["attendance_container"] = container

    logger.info("settings=%s db=%s", settings_module, container.conn.describe())

    if settings["AUTO_INIT_DB"]:
        apply_schema(container.conn)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
    if settings["AUTO_SEED_DB"]:
        ensure_sample_records(container.conn)

    register_attendance(app, container)
    register_reports(app, container)

    return app


def run() -> None:
    _, settings = load_settings()
    app = create_app()
    app.run(host=settings["HOST"] or "0.0.0.0", port=int(settings["PORT"] or 5000), debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
