from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import ExportFormat
from ..core.exceptions import ValidationError
from .exporters.base import ReportExporter
from .exporters.csv_exporter import CsvReportExporter
from .exporters.json_exporter import JsonReportExporter
from .exporters.pdf_exporter import PdfReportExporter
from .exporters.word_exporter import WordReportExporter
from .exporters.xlsx_exporter import XlsxReportExporter


@dataclass
class ExporterFactory:
    """Factory Pattern: pick the exporter for a requested download format."""

    exporters: dict[ExportFormat, ReportExporter] = field(
        default_factory=lambda: {
            ExportFormat.PDF: PdfReportExporter(),
            ExportFormat.WORD: WordReportExporter(),
            ExportFormat.CSV: CsvReportExporter(),
            ExportFormat.JSON: JsonReportExporter(),
            ExportFormat.XLSX: XlsxReportExporter(),
        }
    )

    def for_format(self, fmt: Optional[str]) -> ReportExporter:
        try:
            key = ExportFormat(str(fmt or ExportFormat.PDF.value).strip().lower())
        except ValueError:
            allowed = ", ".join(f.value for f in ExportFormat)
            raise ValidationError(f"Unsupported format: {fmt} (choose one of: {allowed})") from None
        return self.exporters[key]
