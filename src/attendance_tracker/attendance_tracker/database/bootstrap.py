from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..core.constants import SAMPLE_RECORDS
from ..core.enums import DBEngine
from .connection import DatabaseConnection, MySQLConnection
from .sql_base import db_cursor, fetchall, fetchone

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parents[4] / "database"


def schema_path_for(conn_factory: DatabaseConnection, schema_dir: str | Path = SCHEMA_DIR) -> Path:
    return Path(schema_dir) / f"schema.{conn_factory.dialect}.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema files compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a schema/seed file into statements (handles ';' inside quotes)."""
    buf: list[str] = []
    quote: str | None = None
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\" and quote:
            buf.append(ch)
            escape = True
            continue

        if ch in ("'", '"'):
            if quote is None:
                quote = ch
            elif quote == ch:
                quote = None
            buf.append(ch)
            continue

        if ch == ";" and quote is None:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: MySQLConnection) -> None:
    name = conn_factory.config.database
    conn = conn_factory.connect_server()
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path | None = None) -> None:
    if isinstance(conn_factory, MySQLConnection):
        ensure_database_exists(conn_factory)

    schema_path = Path(schema_path) if schema_path else schema_path_for(conn_factory)
    sql = _strip_create_db_and_use(schema_path.read_text(encoding="utf-8"))

    with db_cursor(conn_factory) as (_, cur):
        for stmt in iter_sql_statements(_strip_line_comments(sql)):
            cur.execute(stmt)
    logger.info("Schema %s applied to %s", schema_path.name, conn_factory.describe())


def ensure_sample_records(conn_factory: DatabaseConnection) -> int:
    """Insert the demo rows when the table is empty. Returns the number inserted."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT COUNT(*) AS total FROM attendance_records")
        row = fetchone(cur)
        if row and int(row["total"]) > 0:
            return 0

        cur.executemany(
            """
            INSERT INTO attendance_records (employee_name, employee_id, work_date, status)
            VALUES (%s, %s, %s, %s)
            """,
            SAMPLE_RECORDS,
        )
    logger.info("Inserted %d sample attendance records", len(SAMPLE_RECORDS))
    return len(SAMPLE_RECORDS)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    if conn_factory.dialect == DBEngine.SQLITE.value:
        sql = "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
    else:
        sql = "SHOW TABLES"

    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql)
        return [str(next(iter(r.values()))) for r in fetchall(cur)]
