import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

DB_ENGINE = os.getenv("DB_ENGINE", "sqlite")
SQLITE_PATH = os.getenv("SQLITE_PATH", str(Path(tempfile.gettempdir()) / "attendance_test.db"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

HOST = "127.0.0.1"
PORT = 5000

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
