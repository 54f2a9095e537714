from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import (
    require_iso_date,
    require_max_length,
    require_min_length,
    require_not_future,
    require_pattern,
)
from ..core.constants import EMPLOYEE_ID_PATTERN, MAX_EMPLOYEE_ID_LENGTH, MAX_NAME_LENGTH, MIN_NAME_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceFilter, AttendanceRecord, AttendanceStats
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: Optional[str]) -> AttendanceStatus:
    try:
        return AttendanceStatus(str(value).strip())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Status must be one of: {allowed}") from None


def compute_stats(records: Sequence[AttendanceRecord]) -> AttendanceStats:
    total = len(records)
    present = sum(1 for r in records if r.status is AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status is AttendanceStatus.ABSENT)
    rate = round(present / total * 100, 1) if total else 0.0
    return AttendanceStats(total=total, present=present, absent=absent, attendance_rate=rate)


class AttendanceService:
    """Use cases behind the form, the dashboard and the REST API."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record(
        self,
        employee_name: Optional[str],
        employee_id: Optional[str],
        work_date: Optional[str],
        status: Optional[str],
        *,
        today: Optional[date] = None,
    ) -> int:
        """Validate one form submission and store it. Returns the new record id."""

        values = [employee_name, employee_id, work_date, status]
        if any(v is None or not str(v).strip() for v in values):
            raise ValidationError("All fields are required")

        name = require_min_length(str(employee_name).strip(), "Employee name", MIN_NAME_LENGTH)
        require_max_length(name, "Employee name", MAX_NAME_LENGTH)
        emp_id = require_pattern(
            str(employee_id).strip(),
            EMPLOYEE_ID_PATTERN,
            "Employee ID can only contain letters, numbers, and hyphens",
        )
        require_max_length(emp_id, "Employee ID", MAX_EMPLOYEE_ID_LENGTH)
        day = require_iso_date(str(work_date).strip(), "Date")
        require_not_future(day, today or today_local())
        st = parse_status(status)

        record_id = self._attendance.create(employee_name=name, employee_id=emp_id, work_date=day, status=st)
        logger.info("Recorded attendance id=%s employee=%s date=%s status=%s", record_id, emp_id, day, st.value)
        return record_id

    def list_records(self, criteria: Optional[AttendanceFilter] = None) -> Sequence[AttendanceRecord]:
        return self._attendance.find(criteria)

    def search_records(self, query: Optional[str]) -> Sequence[AttendanceRecord]:
        if query is None or not query.strip():
            raise ValidationError("Search query required")
        return self._attendance.find(AttendanceFilter(search=query.strip()))

    def get_record(self, record_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(record_id)
        if not record:
            raise NotFoundError("Record not found")
        return record

    def delete_record(self, record_id: int) -> None:
        if not self._attendance.delete(record_id):
            raise NotFoundError("Record not found")
        logger.info("Deleted attendance id=%s", record_id)

    def stats(self, records: Sequence[AttendanceRecord]) -> AttendanceStats:
        return compute_stats(records)
