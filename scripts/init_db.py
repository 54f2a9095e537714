from __future__ import annotations

from _common import connection_from_settings

from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, list_tables


def main() -> None:
    conn = connection_from_settings()
    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Applied schema -> {conn.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
