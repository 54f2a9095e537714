from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceFilter, AttendanceRecord
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import NotFoundError, ValidationError


class InMemoryAttendance:
    def __init__(self):
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.last_criteria: Optional[AttendanceFilter] = None

    def create(self, *, employee_name: str, employee_id: str, work_date: date, status: AttendanceStatus) -> int:
        self._id += 1
        self._rows[self._id] = AttendanceRecord(
            record_id=self._id,
            employee_name=employee_name,
            employee_id=employee_id,
            work_date=work_date,
            status=status,
        )
        return self._id

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._rows.get(record_id)

    def find(self, criteria: Optional[AttendanceFilter] = None):
        self.last_criteria = criteria
        items = list(self._rows.values())
        if criteria and criteria.search:
            q = criteria.search.lower()
            items = [r for r in items if q in r.employee_name.lower() or q in r.employee_id.lower()]
        items.sort(key=lambda r: (r.work_date, r.record_id), reverse=True)
        return items

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def count(self) -> int:
        return len(self._rows)


@pytest.fixture
def repo():
    return InMemoryAttendance()


@pytest.fixture
def svc(repo):
    return AttendanceService(repo)


def test_record_stores_trimmed_values(svc, repo, fixed_today):
    record_id = svc.record("  John Smith ", " EMP-001 ", "2026-01-30", "Present", today=fixed_today)

    rec = repo.get_by_id(record_id)
    assert rec.employee_name == "John Smith"
    assert rec.employee_id == "EMP-001"
    assert rec.work_date == date(2026, 1, 30)
    assert rec.status is AttendanceStatus.PRESENT


def test_record_accepts_today(svc, fixed_today):
    assert svc.record("Sarah Johnson", "EMP002", "2026-01-31", "Absent", today=fixed_today) == 1


@pytest.mark.parametrize(
    "name, emp_id, work_date, status",
    [
        ("", "EMP001", "2026-01-01", "Present"),
        ("John", None, "2026-01-01", "Present"),
        ("John", "EMP001", "   ", "Present"),
        ("John", "EMP001", "2026-01-01", None),
    ],
)
def test_record_requires_all_fields(svc, fixed_today, name, emp_id, work_date, status):
    with pytest.raises(ValidationError, match="All fields are required"):
        svc.record(name, emp_id, work_date, status, today=fixed_today)


def test_record_rejects_short_name(svc, fixed_today):
    with pytest.raises(ValidationError, match="at least 2 characters"):
        svc.record("J", "EMP001", "2026-01-01", "Present", today=fixed_today)


def test_record_rejects_bad_employee_id(svc, fixed_today):
    with pytest.raises(ValidationError, match="letters, numbers, and hyphens"):
        svc.record("John Smith", "EMP 001", "2026-01-01", "Present", today=fixed_today)


def test_record_rejects_future_date(svc, fixed_today):
    with pytest.raises(ValidationError, match="Cannot select future date"):
        svc.record("John Smith", "EMP001", "2026-02-01", "Present", today=fixed_today)


def test_record_rejects_malformed_date(svc, fixed_today):
    with pytest.raises(ValidationError, match="valid date"):
        svc.record("John Smith", "EMP001", "2026-13-01", "Present", today=fixed_today)


def test_record_rejects_unknown_status(svc, repo, fixed_today):
    with pytest.raises(ValidationError, match="Status must be one of"):
        svc.record("John Smith", "EMP001", "2026-01-01", "Late", today=fixed_today)
    assert repo.count() == 0


def test_search_requires_query(svc):
    with pytest.raises(ValidationError, match="Search query required"):
        svc.search_records("   ")


def test_search_forwards_trimmed_term(svc, repo, fixed_today):
    svc.record("John Smith", "EMP001", "2026-01-01", "Present", today=fixed_today)
    svc.record("Mike Wilson", "EMP003", "2026-01-02", "Absent", today=fixed_today)

    found = svc.search_records(" john ")

    assert [r.employee_id for r in found] == ["EMP001"]
    assert repo.last_criteria.search == "john"


def test_delete_missing_record_raises(svc):
    with pytest.raises(NotFoundError, match="Record not found"):
        svc.delete_record(42)


def test_delete_removes_record(svc, repo, fixed_today):
    record_id = svc.record("John Smith", "EMP001", "2026-01-01", "Present", today=fixed_today)
    svc.delete_record(record_id)
    assert repo.count() == 0


def test_stats_rate_rounds_to_one_decimal(svc, fixed_today):
    svc.record("John Smith", "EMP001", "2026-01-01", "Present", today=fixed_today)
    svc.record("Sarah Johnson", "EMP002", "2026-01-01", "Present", today=fixed_today)
    svc.record("Mike Wilson", "EMP003", "2026-01-01", "Absent", today=fixed_today)

    stats = svc.stats(svc.list_records())

    assert (stats.total, stats.present, stats.absent) == (3, 2, 1)
    assert stats.attendance_rate == 66.7


def test_stats_on_empty_set(svc):
    stats = svc.stats([])
    assert stats.total == 0
    assert stats.attendance_rate == 0.0


def test_record_rejects_overlong_name(svc, repo, fixed_today):
    svc.record("A" * 255, "EMP001", "2026-01-01", "Present", today=fixed_today)

    with pytest.raises(ValidationError, match="at most 255 characters"):
        svc.record("A" * 256, "EMP002", "2026-01-01", "Present", today=fixed_today)
    assert repo.count() == 1


def test_record_rejects_overlong_employee_id(svc, repo, fixed_today):
    svc.record("John Smith", "E" * 100, "2026-01-01", "Present", today=fixed_today)

    with pytest.raises(ValidationError, match="at most 100 characters"):
        svc.record("John Smith", "E" * 101, "2026-01-01", "Present", today=fixed_today)
    assert repo.count() == 1
