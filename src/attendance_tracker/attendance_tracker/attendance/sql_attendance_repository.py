from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus, SortDirection, SortKey
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, fetchall, fetchone, normalize_sql_date, normalize_sql_datetime
from .model import AttendanceFilter, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, employee_name, employee_id, work_date, status, created_at"

_SORT_COLUMNS = {
    SortKey.DATE: "work_date",
    SortKey.NAME: "LOWER(employee_name)",
    SortKey.STATUS: "status",
}


def _to_record(r: dict[str, Any]) -> AttendanceRecord:
    try:
        status = AttendanceStatus(r["status"])
    except ValueError:
        raise StorageError(f"Unknown attendance status {r['status']!r} in record {r['id']}") from None

    return AttendanceRecord(
        record_id=int(r["id"]),
        employee_name=r["employee_name"],
        employee_id=r["employee_id"],
        work_date=normalize_sql_date(r["work_date"]),
        status=status,
        created_at=normalize_sql_datetime(r.get("created_at")),
    )


class SQLAttendanceRepository(AttendanceRepository):
    """Attendance table access; the same SQL runs on SQLite and MySQL."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_name: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records (employee_name, employee_id, work_date, status)
                VALUES (%s, %s, %s, %s)
                """,
                (employee_name, employee_id, work_date.isoformat(), status.value),
            )
            return int(cur.lastrowid)

    def create_many(self, rows: Iterable[tuple[str, str, date, AttendanceStatus]]) -> int:
        params = [(name, emp_id, d.isoformat(), AttendanceStatus(st).value) for name, emp_id, d, st in rows]
        if not params:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_records (employee_name, employee_id, work_date, status)
                VALUES (%s, %s, %s, %s)
                """,
                params,
            )
        return len(params)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def find(self, criteria: Optional[AttendanceFilter] = None) -> Sequence[AttendanceRecord]:
        criteria = criteria or AttendanceFilter()
        clauses: list[str] = []
        params: list[object] = []

        if criteria.search:
            term = f"%{criteria.search}%"
            clauses.append("(employee_name LIKE %s OR employee_id LIKE %s)")
            params.extend([term, term])
        if criteria.work_date is not None:
            clauses.append("work_date=%s")
            params.append(criteria.work_date.isoformat())
        if criteria.status is not None:
            clauses.append("status=%s")
            params.append(criteria.status.value)
        if criteria.start_date is not None:
            clauses.append("work_date >= %s")
            params.append(criteria.start_date.isoformat())
        if criteria.end_date is not None:
            clauses.append("work_date <= %s")
            params.append(criteria.end_date.isoformat())

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        order_col = _SORT_COLUMNS[SortKey(criteria.sort)]
        direction = "ASC" if SortDirection(criteria.direction) is SortDirection.ASC else "DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                {where}
                ORDER BY {order_col} {direction}, id DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM attendance_records")
            r = fetchone(cur)
            return int(r["total"]) if r else 0
