"""Employee Attendance Tracker package.

This package is organized by feature modules (attendance, reports) with a thin
Flask controller layer over service/repository layers. The repository runs the
same SQL on SQLite or MySQL, chosen by the DB_ENGINE setting.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
