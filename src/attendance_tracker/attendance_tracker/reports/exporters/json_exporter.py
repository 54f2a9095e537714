from __future__ import annotations

import json

from ..service import Report
from .base import ReportExporter


class JsonReportExporter(ReportExporter):
    mimetype = "application/json"
    extension = "json"

    def render(self, report: Report) -> bytes:
        payload = {
            "reportInfo": {
                "title": report.title,
                "dateRange": report.date_range,
                "generated": report.generated_at.isoformat(),
                "totalRecords": report.stats.total,
            },
            "data": [r.to_json() for r in report.records],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
