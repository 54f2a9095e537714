from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import StorageError, ValidationError
from src.attendance_tracker.attendance_tracker.database.connection import MySQLConnection, DBConfig
from src.attendance_tracker.attendance_tracker.database.sql_base import (
    db_cursor,
    fetchall,
    fetchone,
    normalize_sql_date,
    normalize_sql_datetime,
)


def test_sqlite_placeholders_are_rewritten(sqlite_conn):
    assert sqlite_conn.prepare("SELECT * FROM t WHERE a=%s AND b=%s") == "SELECT * FROM t WHERE a=? AND b=?"


def test_mysql_placeholders_are_kept():
    conn = MySQLConnection(DBConfig(host="h", port=3306, user="u", password="p", database="d"))
    assert conn.prepare("SELECT %s") == "SELECT %s"


def test_rows_come_back_as_dicts(sqlite_conn):
    with db_cursor(sqlite_conn) as (_, cur):
        cur.execute(
            "INSERT INTO attendance_records (employee_name, employee_id, work_date, status) VALUES (%s, %s, %s, %s)",
            ("Ann Lee", "EMP010", "2024-02-01", "Present"),
        )

    with db_cursor(sqlite_conn) as (_, cur):
        cur.execute("SELECT employee_name, status FROM attendance_records WHERE employee_id=%s", ("EMP010",))
        assert fetchone(cur) == {"employee_name": "Ann Lee", "status": "Present"}

        cur.execute("SELECT employee_id FROM attendance_records WHERE employee_id=%s", ("missing",))
        assert fetchall(cur) == []


def test_driver_error_becomes_storage_error(sqlite_conn):
    with pytest.raises(StorageError) as exc:
        with db_cursor(sqlite_conn) as (_, cur):
            cur.execute("SELECT * FROM no_such_table")

    assert "no_such_table" in str(exc.value)


def test_failed_block_is_rolled_back(sqlite_conn):
    with pytest.raises(ValidationError):
        with db_cursor(sqlite_conn) as (_, cur):
            cur.execute(
                "INSERT INTO attendance_records (employee_name, employee_id, work_date, status) VALUES (%s, %s, %s, %s)",
                ("Ann Lee", "EMP010", "2024-02-01", "Present"),
            )
            raise ValidationError("stop")

    with db_cursor(sqlite_conn) as (_, cur):
        cur.execute("SELECT COUNT(*) AS total FROM attendance_records")
        assert fetchone(cur)["total"] == 0


def test_normalize_sql_date_accepts_driver_shapes():
    assert normalize_sql_date("2024-01-15") == date(2024, 1, 15)
    assert normalize_sql_date(b"2024-01-15") == date(2024, 1, 15)
    assert normalize_sql_date(date(2024, 1, 15)) == date(2024, 1, 15)
    assert normalize_sql_date(datetime(2024, 1, 15, 8, 0)) == date(2024, 1, 15)
    assert normalize_sql_date(None) is None

    with pytest.raises(TypeError):
        normalize_sql_date(20240115)


def test_normalize_sql_datetime_accepts_sqlite_text():
    assert normalize_sql_datetime("2024-01-15 08:30:00") == datetime(2024, 1, 15, 8, 30)
    assert normalize_sql_datetime(datetime(2024, 1, 15, 8, 30)) == datetime(2024, 1, 15, 8, 30)
    assert normalize_sql_datetime(None) is None
