from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_tracker.attendance_tracker.database.connection import DatabaseConnection, build_connection
from src.attendance_tracker.attendance_tracker.main import load_settings


def connection_from_settings() -> DatabaseConnection:
    _, settings = load_settings()
    return build_connection(
        settings["DB_ENGINE"],
        db_config=settings["DB_CONFIG"],
        sqlite_path=settings["SQLITE_PATH"],
    )
