from __future__ import annotations

import io

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..service import Report
from .base import TABLE_HEADERS, ReportExporter, table_rows


class _NumberedCanvas(canvas.Canvas):
    """Defers page output so the footer can print "Page i of n"."""

    footer_text = ""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_pages: list[dict] = []

    def showPage(self):
        self._saved_pages.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._saved_pages)
        for state in self._saved_pages:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total: int) -> None:
        width = self._pagesize[0]
        self.setFont("Helvetica", 8)
        self.setFillColor(colors.Color(150 / 255, 150 / 255, 150 / 255))
        self.drawCentredString(width / 2, 0.45 * inch, f"Page {self._pageNumber} of {total}")
        self.drawCentredString(width / 2, 0.3 * inch, self.footer_text)


class PdfReportExporter(ReportExporter):
    mimetype = "application/pdf"
    extension = "pdf"
    filename_prefix = "attendance_report"

    def render(self, report: Report) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=0.75 * inch,
            leftMargin=0.75 * inch,
            topMargin=0.75 * inch,
            bottomMargin=0.75 * inch,
            title=report.title,
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "ReportTitle",
            parent=styles["Heading1"],
            fontSize=20,
            alignment=1,
            textColor=colors.Color(40 / 255, 40 / 255, 40 / 255),
        )
        subtitle_style = ParagraphStyle(
            "ReportRange",
            parent=styles["Normal"],
            fontSize=12,
            alignment=1,
            textColor=colors.Color(100 / 255, 100 / 255, 100 / 255),
            spaceAfter=12,
        )

        stats = report.stats
        elements = [
            Paragraph(report.title, title_style),
            Paragraph(f"Date Range: {report.date_range}", subtitle_style),
            Paragraph(f"Total Records: {stats.total}", styles["Normal"]),
            Paragraph(f"Present: {stats.present}", styles["Normal"]),
            Paragraph(f"Absent: {stats.absent}", styles["Normal"]),
            Paragraph(f"Attendance Rate: {stats.attendance_rate:.1f}%", styles["Normal"]),
            Spacer(1, 12),
        ]

        data = [list(TABLE_HEADERS)] + table_rows(report)
        table = Table(data, colWidths=[2.3 * inch, 1.5 * inch, 1.4 * inch, 1.2 * inch], repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.Color(41 / 255, 128 / 255, 185 / 255)),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
                    ("ALIGN", (0, 0), (-1, -1), "LEFT"),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.Color(245 / 255, 245 / 255, 245 / 255), colors.white]),
                ]
            )
        )
        elements.append(table)

        footer = f"Generated on {report.generated_at:%Y-%m-%d}"

        class _Canvas(_NumberedCanvas):
            footer_text = footer

        doc.build(elements, canvasmaker=_Canvas)
        return buffer.getvalue()
