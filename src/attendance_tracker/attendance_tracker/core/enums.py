from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"


class DBEngine(str, Enum):
    SQLITE = "sqlite"
    MYSQL = "mysql"


class SortKey(str, Enum):
    """Columns the dashboard may sort on."""

    DATE = "date"
    NAME = "name"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ExportFormat(str, Enum):
    PDF = "pdf"
    WORD = "word"
    CSV = "csv"
    JSON = "json"
    XLSX = "xlsx"
