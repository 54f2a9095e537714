from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..core.enums import AttendanceStatus, SortDirection, SortKey


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry for one employee on one day."""

    record_id: int
    employee_name: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None

    def to_json(self) -> dict[str, Any]:
        """Wire format shared by the REST API and the JSON export."""
        return {
            "id": self.record_id,
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(sep=" ") if self.created_at else None,
        }


@dataclass(frozen=True)
class AttendanceFilter:
    """Query options for the dashboard list and the exporter."""

    search: Optional[str] = None
    work_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    sort: SortKey = SortKey.DATE
    direction: SortDirection = SortDirection.DESC


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    present: int
    absent: int
    attendance_rate: float

    def to_json(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "attendanceRate": self.attendance_rate,
        }
