from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import mysql.connector

from ..core.enums import DBEngine


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabaseConnection:
    """DB connection factory shared by every repository.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    Repositories write SQL once with ``%s`` placeholders; ``prepare`` adapts it to the driver.
    """

    dialect: str = ""
    label: str = ""

    def connect(self):
        raise NotImplementedError

    def cursor(self, conn):
        raise NotImplementedError

    def prepare(self, sql: str) -> str:
        return sql

    def describe(self) -> str:
        raise NotImplementedError


class MySQLConnection(DatabaseConnection):
    dialect = DBEngine.MYSQL.value
    label = "MySQL"

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def connect_server(self):
        """Connect without selecting a database (used to create it)."""
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            use_pure=True,
        )

    def cursor(self, conn):
        return conn.cursor(dictionary=True)

    def describe(self) -> str:
        c = self._config
        return f"mysql://{c.user}@{c.host}:{c.port}/{c.database}"


class SQLiteConnection(DatabaseConnection):
    dialect = DBEngine.SQLITE.value
    label = "SQLite"

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def connect(self):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self._path))
        conn.row_factory = sqlite3.Row
        return conn

    def prepare(self, sql: str) -> str:
        return sql.replace("%s", "?")

    def cursor(self, conn):
        return conn.cursor()

    def describe(self) -> str:
        return f"sqlite:///{self._path}"


def build_connection(
    engine: str,
    *,
    db_config: Optional[dict[str, Any]] = None,
    sqlite_path: Optional[str | Path] = None,
) -> DatabaseConnection:
    try:
        kind = DBEngine(str(engine).strip().lower())
    except ValueError:
        raise ValueError(f"Unsupported DB_ENGINE: {engine!r} (expected 'sqlite' or 'mysql')") from None

    if kind is DBEngine.SQLITE:
        if not sqlite_path:
            raise ValueError("SQLITE_PATH is required when DB_ENGINE=sqlite")
        return SQLiteConnection(sqlite_path)

    db_config = db_config or {}
    return MySQLConnection(
        DBConfig(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_db")),
        )
    )
