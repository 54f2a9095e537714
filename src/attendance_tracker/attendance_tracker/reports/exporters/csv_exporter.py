from __future__ import annotations

import csv
import io

from ..service import Report
from .base import TABLE_HEADERS, ReportExporter, table_rows


class CsvReportExporter(ReportExporter):
    mimetype = "text/csv"
    extension = "csv"

    def render(self, report: Report) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
        # Header unquoted, data fields always quoted.
        out.write(",".join(TABLE_HEADERS) + "\n")
        writer.writerows(table_rows(report))
        return out.getvalue().encode("utf-8-sig")
