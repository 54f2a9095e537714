from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceFilter, AttendanceRecord


class AttendanceRepository(Protocol):
    def create(
        self,
        *,
        employee_name: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
    ) -> int:
        raise NotImplementedError

    def create_many(self, rows: Iterable[tuple[str, str, date, AttendanceStatus]]) -> int:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def find(self, criteria: Optional[AttendanceFilter] = None) -> Sequence[AttendanceRecord]:
        """Newest first unless the filter asks for another order."""

        raise NotImplementedError

    def delete(self, record_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
