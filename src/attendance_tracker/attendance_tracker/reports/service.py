from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.model import AttendanceFilter, AttendanceRecord, AttendanceStats
from ..attendance.repository import AttendanceRepository
from ..attendance.service import compute_stats
from ..common.datetime_utils import now_local
from ..core.constants import REPORT_TITLE
from ..core.enums import SortDirection, SortKey
from ..core.exceptions import NotFoundError, ValidationError


@dataclass(frozen=True)
class Report:
    """Everything an exporter needs; exporters never touch the database."""

    title: str
    start: date
    end: date
    records: Sequence[AttendanceRecord]
    stats: AttendanceStats
    generated_at: datetime

    @property
    def date_range(self) -> str:
        return f"{self.start:%Y-%m-%d} to {self.end:%Y-%m-%d}"


class ReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build(
        self,
        start: Optional[date],
        end: Optional[date] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Report:
        now = now or now_local()
        if start is None:
            raise ValidationError("Please select a start date")
        end = end or now.date()
        if start > end:
            raise ValidationError("Start date must be on or before end date")

        records = self._attendance.find(
            AttendanceFilter(start_date=start, end_date=end, sort=SortKey.DATE, direction=SortDirection.DESC)
        )
        if not records:
            raise NotFoundError("No records found for the selected date range")

        return Report(
            title=REPORT_TITLE,
            start=start,
            end=end,
            records=list(records),
            stats=compute_stats(records),
            generated_at=now,
        )
