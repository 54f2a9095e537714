from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .attendance.service import AttendanceService
from .attendance.sql_attendance_repository import SQLAttendanceRepository
from .database.connection import DatabaseConnection, build_connection
from .reports.factory import ExporterFactory
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    attendance_repo: SQLAttendanceRepository

    attendance_service: AttendanceService
    report_service: ReportService
    exporters: ExporterFactory


def build_container(
    *,
    db_engine: str,
    db_config: Optional[dict[str, Any]] = None,
    sqlite_path: Optional[str | Path] = None,
) -> Container:
    conn = build_connection(db_engine, db_config=db_config, sqlite_path=sqlite_path)

    attendance_repo = SQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=AttendanceService(attendance_repo),
        report_service=ReportService(attendance_repo),
        exporters=ExporterFactory(),
    )
