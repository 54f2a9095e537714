import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# 'sqlite' (default for local work) or 'mysql'
DB_ENGINE = os.getenv("DB_ENGINE", "sqlite")
SQLITE_PATH = os.getenv("SQLITE_PATH", str(Path(__file__).resolve().parents[1] / "attendance.db"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

# If enabled, app will apply the schema on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: insert the three sample rows when the table is empty
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
