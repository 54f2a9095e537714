from __future__ import annotations

import io
import logging
from typing import Mapping

from flask import Flask, flash, jsonify, render_template, request, send_file

from ..common.datetime_utils import format_iso_date, today_local
from ..common.validators import optional_iso_date
from ..container import Container
from ..core.enums import ExportFormat
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from .exporters.base import ExportedFile

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _export(params: Mapping[str, str]) -> ExportedFile:
        exporter = container.exporters.for_format(params.get("format"))
        report = container.report_service.build(
            optional_iso_date(params.get("start"), "Start date"),
            optional_iso_date(params.get("end"), "End date"),
        )
        exported = exporter.export(report)
        logger.info("Exported %d records as %s (%s)", report.stats.total, exporter.extension, report.date_range)
        return exported

    def _send(exported: ExportedFile):
        return send_file(
            io.BytesIO(exported.content),
            mimetype=exported.mimetype,
            as_attachment=True,
            download_name=exported.filename,
        )

    @app.route("/api/attendance/export", methods=["GET"], endpoint="api_export_attendance")
    def api_export_attendance():
        try:
            return _send(_export(request.args))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/download", methods=["GET", "POST"], endpoint="download")
    def download():
        form = {
            "start": "",
            "end": format_iso_date(today_local()),
            "format": ExportFormat.PDF.value,
        }

        if request.method == "POST":
            form.update({key: request.form.get(key, "") for key in form})
            try:
                return _send(_export(form))
            except (ValidationError, NotFoundError) as e:
                flash(str(e), "warning")
            except StorageError:
                flash("Error downloading attendance data. Please try again.", "danger")

        return render_template(
            "download.html",
            form=form,
            formats=[f.value for f in ExportFormat],
            active_page="download",
        )
