from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_tracker.attendance_tracker import create_app
from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema
from src.attendance_tracker.attendance_tracker.database.connection import SQLiteConnection


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 1, 31)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 9, 30, 0)


@pytest.fixture
def sqlite_conn(tmp_path) -> SQLiteConnection:
    conn = SQLiteConnection(tmp_path / "attendance.db")
    apply_schema(conn)
    return conn


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "DB_ENGINE": "sqlite",
            "SQLITE_PATH": str(tmp_path / "app.db"),
            "AUTO_INIT_DB": True,
            "AUTO_SEED_DB": False,
            "TESTING": True,
            "SECRET_KEY": "test-secret",
        }
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["attendance_container"]
