from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

DRIVER_ERRORS = (mysql.connector.Error, sqlite3.Error)


class Cursor:
    """Cursor wrapper that adapts placeholders and row shapes to the active driver."""

    def __init__(self, conn_factory: DatabaseConnection, raw):
        self._factory = conn_factory
        self._raw = raw

    def execute(self, sql: str, params: tuple | list = ()) -> None:
        self._raw.execute(self._factory.prepare(sql), tuple(params))

    def executemany(self, sql: str, seq_of_params) -> None:
        self._raw.executemany(self._factory.prepare(sql), [tuple(p) for p in seq_of_params])

    def fetchone(self):
        return self._raw.fetchone()

    def fetchall(self):
        return self._raw.fetchall()

    @property
    def lastrowid(self) -> Optional[int]:
        return self._raw.lastrowid

    @property
    def rowcount(self) -> int:
        return self._raw.rowcount

    def close(self) -> None:
        self._raw.close()


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    try:
        conn = conn_factory.connect()
    except DRIVER_ERRORS as e:
        logger.error("Cannot connect to %s: %s", conn_factory.describe(), e)
        raise StorageError(str(e)) from e

    try:
        cur = Cursor(conn_factory, conn_factory.cursor(conn))
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except DRIVER_ERRORS as e:
        conn.rollback()
        logger.exception("Query failed on %s", conn_factory.dialect)
        raise StorageError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _as_dict(row) -> Dict[str, Any]:
    if isinstance(row, sqlite3.Row):
        return dict(zip(row.keys(), row))
    return dict(row)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return _as_dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [_as_dict(r) for r in rows or []]


def normalize_sql_date(value: Any) -> Optional[date]:
    """Normalize DATE values across drivers.

    MySQL returns datetime.date; SQLite stores the text 'YYYY-MM-DD'.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    raise TypeError(f"Unsupported SQL DATE value type: {type(value)!r}")


def normalize_sql_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise TypeError(f"Unsupported SQL DATETIME value type: {type(value)!r}")
