from __future__ import annotations

import io

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from ...core.enums import AttendanceStatus
from ..service import Report
from .base import TABLE_HEADERS, ReportExporter, table_rows

_STATUS_COLORS = {
    AttendanceStatus.PRESENT.value: RGBColor(0x27, 0xAE, 0x60),
    AttendanceStatus.ABSENT.value: RGBColor(0xE7, 0x4C, 0x3C),
}


class WordReportExporter(ReportExporter):
    mimetype = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    extension = "docx"
    filename_prefix = "attendance_report"

    def render(self, report: Report) -> bytes:
        doc = Document()

        heading = doc.add_heading(report.title, level=0)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

        subtitle = doc.add_paragraph(f"Date Range: {report.date_range}")
        subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER

        stats = report.stats
        doc.add_heading("Summary", level=2)
        for label, value in (
            ("Total Records", stats.total),
            ("Present", stats.present),
            ("Absent", stats.absent),
            ("Attendance Rate", f"{stats.attendance_rate:.1f}%"),
        ):
            p = doc.add_paragraph()
            p.add_run(f"{label}: ").bold = True
            p.add_run(str(value))

        table = doc.add_table(rows=1, cols=len(TABLE_HEADERS))
        table.style = "Table Grid"
        for cell, header in zip(table.rows[0].cells, TABLE_HEADERS):
            cell.text = ""
            cell.paragraphs[0].add_run(header).bold = True

        for values in table_rows(report):
            cells = table.add_row().cells
            for cell, value in zip(cells[:-1], values[:-1]):
                cell.text = value
            status_run = cells[-1].paragraphs[0].add_run(values[-1])
            color = _STATUS_COLORS.get(values[-1])
            if color is not None:
                status_run.bold = True
                status_run.font.color.rgb = color

        footer = doc.add_paragraph(
            f"Generated on {report.generated_at:%Y-%m-%d} | Total Records: {stats.total}"
        )
        footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
        for run in footer.runs:
            run.font.size = Pt(9)

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()
