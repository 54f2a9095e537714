from __future__ import annotations

from src.attendance_tracker.attendance_tracker.database.bootstrap import (
    apply_schema,
    ensure_sample_records,
    iter_sql_statements,
    list_tables,
    schema_path_for,
)
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig, MySQLConnection


def test_statement_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_schema_file_matches_dialect(sqlite_conn):
    mysql = MySQLConnection(DBConfig(host="h", port=3306, user="u", password="p", database="d"))

    assert schema_path_for(sqlite_conn).name == "schema.sqlite.sql"
    assert schema_path_for(mysql).name == "schema.mysql.sql"
    assert schema_path_for(sqlite_conn).exists()
    assert schema_path_for(mysql).exists()


def test_apply_schema_is_idempotent(sqlite_conn):
    apply_schema(sqlite_conn)
    apply_schema(sqlite_conn)

    assert list_tables(sqlite_conn) == ["attendance_records"]


def test_sample_records_only_seed_an_empty_table(sqlite_conn):
    assert ensure_sample_records(sqlite_conn) == 3
    assert ensure_sample_records(sqlite_conn) == 0
