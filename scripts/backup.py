"""Backup database.

MySQL: uses `mysqldump` (must be installed with the MySQL client tools).
SQLite: uses the sqlite3 online backup API, no external tool needed.
"""

from __future__ import annotations

import sqlite3
import subprocess
from datetime import datetime
from pathlib import Path

from _common import REPO_ROOT, connection_from_settings

from src.attendance_tracker.attendance_tracker.database.connection import MySQLConnection, SQLiteConnection


def backup_sqlite(conn: SQLiteConnection, out_file: Path) -> None:
    src = sqlite3.connect(str(conn.path))
    dst = sqlite3.connect(str(out_file))
    try:
        src.backup(dst)
    finally:
        dst.close()
        src.close()


def backup_mysql(conn: MySQLConnection, out_file: Path) -> None:
    db = conn.config
    cmd = ["mysqldump", f"-h{db.host}", f"-P{db.port}", f"-u{db.user}"]
    if db.password:
        cmd.append(f"-p{db.password}")
    cmd.append(db.database)
    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools or back up with MySQL Workbench.")


def main() -> None:
    conn = connection_from_settings()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    if isinstance(conn, SQLiteConnection):
        out_file = out_dir / f"attendance_{ts}.db"
        backup_sqlite(conn, out_file)
    else:
        out_file = out_dir / f"attendance_{ts}.sql"
        backup_mysql(conn, out_file)

    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
