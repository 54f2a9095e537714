from __future__ import annotations

from datetime import datetime, timezone
from functools import wraps
from typing import Mapping, Optional

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import format_iso_date, today_local
from ..common.validators import optional_iso_date
from ..container import Container
from ..core.enums import AttendanceStatus, SortDirection, SortKey
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from .model import AttendanceFilter
from .service import parse_status


def filter_from_args(args: Mapping[str, str]) -> AttendanceFilter:
    """Build a list filter from query-string arguments.

    Accepted keys: search, date, status, start, end, sort (date|name|status), order (asc|desc).
    """

    status: Optional[AttendanceStatus] = None
    if (args.get("status") or "").strip():
        status = parse_status(args.get("status"))

    try:
        sort = SortKey((args.get("sort") or SortKey.DATE.value).strip().lower())
        direction = SortDirection((args.get("order") or SortDirection.DESC.value).strip().lower())
    except ValueError:
        raise ValidationError("Invalid sort options") from None

    return AttendanceFilter(
        search=(args.get("search") or "").strip() or None,
        work_date=optional_iso_date(args.get("date"), "Date"),
        status=status,
        start_date=optional_iso_date(args.get("start"), "Start date"),
        end_date=optional_iso_date(args.get("end"), "End date"),
        sort=sort,
        direction=direction,
    )


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def json_errors(view):
        """Translate domain errors into {"error": message} responses."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except StorageError as e:
                return jsonify({"error": str(e)}), 500

        return wrapper

    # ===== REST API =====

    @app.route("/api/attendance", methods=["POST"], endpoint="api_create_attendance")
    @json_errors
    def api_create_attendance():
        data = request.get_json(silent=True) or request.form
        if not isinstance(data, Mapping):
            raise ValidationError("All fields are required")
        record_id = service.record(
            data.get("employeeName"),
            data.get("employeeID"),
            data.get("date"),
            data.get("status"),
        )
        return jsonify({"message": "Attendance recorded successfully", "id": record_id})

    @app.route("/api/attendance", methods=["GET"], endpoint="api_list_attendance")
    @json_errors
    def api_list_attendance():
        records = service.list_records(filter_from_args(request.args))
        return jsonify([r.to_json() for r in records])

    @app.route("/api/attendance/search", methods=["GET"], endpoint="api_search_attendance")
    @json_errors
    def api_search_attendance():
        records = service.search_records(request.args.get("query"))
        return jsonify([r.to_json() for r in records])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="api_attendance_stats")
    @json_errors
    def api_attendance_stats():
        records = service.list_records(filter_from_args(request.args))
        return jsonify(service.stats(records).to_json())

    @app.route("/api/attendance/<int:record_id>", methods=["GET"], endpoint="api_get_attendance")
    @json_errors
    def api_get_attendance(record_id: int):
        return jsonify(service.get_record(record_id).to_json())

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="api_delete_attendance")
    @json_errors
    def api_delete_attendance(record_id: int):
        service.delete_record(record_id)
        return jsonify({"message": "Record deleted successfully"})

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        label = container.conn.label
        return jsonify(
            {
                "status": "OK",
                "message": f"Server is running with {label}",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "database": label,
            }
        )

    # ===== PAGES =====

    def _blank_form(work_date: Optional[str] = None) -> dict:
        return {
            "employeeName": "",
            "employeeID": "",
            "date": work_date or format_iso_date(today_local()),
            "status": AttendanceStatus.PRESENT.value,
        }

    @app.route("/", methods=["GET", "POST"], endpoint="mark_attendance")
    @app.route("/attendance", methods=["GET", "POST"], endpoint="mark_attendance")
    def mark_attendance():
        if request.method == "POST":
            form = {key: request.form.get(key, "") for key in _blank_form()}
            try:
                service.record(form["employeeName"], form["employeeID"], form["date"], form["status"])
                flash("Attendance recorded successfully!", "success")
                # Keep the selected date for the next entry.
                return redirect(url_for("mark_attendance", date=form["date"]))
            except ValidationError as e:
                flash(str(e), "warning")
            except StorageError:
                flash("Error recording attendance. Please try again.", "danger")
        else:
            form = _blank_form(request.args.get("date"))

        return render_template(
            "attendance_form.html",
            form=form,
            statuses=[s.value for s in AttendanceStatus],
            max_date=format_iso_date(today_local()),
            active_page="mark_attendance",
        )

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        try:
            criteria = filter_from_args(request.args)
        except ValidationError as e:
            flash(str(e), "warning")
            criteria = AttendanceFilter()

        try:
            records = service.list_records(criteria)
        except StorageError:
            flash("Error loading attendance records", "danger")
            records = []

        return render_template(
            "dashboard.html",
            records=records,
            stats=service.stats(records),
            criteria=criteria,
            args=request.args,
            statuses=[s.value for s in AttendanceStatus],
            active_page="dashboard",
        )

    @app.route("/dashboard/records/<int:record_id>/delete", methods=["POST"], endpoint="delete_record")
    def delete_record(record_id: int):
        try:
            service.delete_record(record_id)
            flash("Record deleted successfully!", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except StorageError:
            flash("Error deleting record", "danger")
        return redirect(url_for("dashboard"))
