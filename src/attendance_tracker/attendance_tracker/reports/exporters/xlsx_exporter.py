from __future__ import annotations

import io

import pandas as pd

from ..service import Report
from .base import TABLE_HEADERS, ReportExporter, table_rows


class XlsxReportExporter(ReportExporter):
    mimetype = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = "xlsx"

    def render(self, report: Report) -> bytes:
        records = pd.DataFrame(table_rows(report), columns=list(TABLE_HEADERS))

        stats = report.stats
        summary = pd.DataFrame(
            [
                ("Date Range", report.date_range),
                ("Total Records", stats.total),
                ("Present", stats.present),
                ("Absent", stats.absent),
                ("Attendance Rate (%)", stats.attendance_rate),
                ("Generated", report.generated_at.strftime("%Y-%m-%d %H:%M:%S")),
            ],
            columns=["Metric", "Value"],
        )

        # Build the workbook in memory (nothing written to disk).
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            records.to_excel(writer, index=False, sheet_name="Attendance")
            summary.to_excel(writer, index=False, sheet_name="Summary")
        return output.getvalue()
