from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_pattern(value: str, pattern: str, message: str) -> str:
    if not re.fullmatch(pattern, value):
        raise ValidationError(message)
    return value


def require_iso_date(value: str, field_name: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a valid date (YYYY-MM-DD)") from None


def require_not_future(value: date, today: date) -> date:
    if value > today:
        raise ValidationError("Cannot select future date")
    return value


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[date]:
    if value is None or not value.strip():
        return None
    return require_iso_date(value.strip(), field_name)
