from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.constants import MISSING_VALUE
from ..service import Report

TABLE_HEADERS = ("Employee Name", "Employee ID", "Date", "Status")


@dataclass(frozen=True)
class ExportedFile:
    content: bytes
    filename: str
    mimetype: str


def table_rows(report: Report) -> list[list[str]]:
    """Records as display strings in header order."""
    return [
        [
            r.employee_name or MISSING_VALUE,
            r.employee_id or MISSING_VALUE,
            r.work_date.strftime("%Y-%m-%d") if r.work_date else MISSING_VALUE,
            r.status.value if r.status else MISSING_VALUE,
        ]
        for r in report.records
    ]


class ReportExporter(ABC):
    """Strategy Pattern: one renderer per download format."""

    mimetype: str = "application/octet-stream"
    extension: str = ""
    filename_prefix: str = "attendance"

    def filename(self, report: Report) -> str:
        return f"{self.filename_prefix}_{report.start:%Y-%m-%d}_to_{report.end:%Y-%m-%d}.{self.extension}"

    def export(self, report: Report) -> ExportedFile:
        return ExportedFile(content=self.render(report), filename=self.filename(report), mimetype=self.mimetype)

    @abstractmethod
    def render(self, report: Report) -> bytes:
        raise NotImplementedError
