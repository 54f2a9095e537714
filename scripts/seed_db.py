from __future__ import annotations

from _common import connection_from_settings

from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, ensure_sample_records


def main() -> None:
    conn = connection_from_settings()
    apply_schema(conn)
    inserted = ensure_sample_records(conn)
    if inserted:
        print(f"OK: Seeded {inserted} sample records -> {conn.describe()}")
    else:
        print(f"SKIP: {conn.describe()} already has attendance records")


if __name__ == "__main__":
    main()
