from __future__ import annotations

from datetime import date

from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus


def _form(**overrides):
    data = {"employeeName": "John Smith", "employeeID": "EMP001", "date": "2024-01-15", "status": "Present"}
    data.update(overrides)
    return data


def test_form_defaults_to_today(client):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Mark Attendance" in html
    assert date.today().isoformat() in html


def test_attendance_alias_serves_the_form(client):
    assert client.get("/attendance").status_code == 200


def test_submit_keeps_selected_date(client, container):
    resp = client.post("/", data=_form())

    assert resp.status_code == 302
    assert "date=2024-01-15" in resp.headers["Location"]

    page = client.get(resp.headers["Location"]).get_data(as_text=True)
    assert "Attendance recorded successfully!" in page
    assert 'value="2024-01-15"' in page
    assert container.attendance_repo.count() == 1


def test_invalid_submit_shows_error_and_keeps_input(client, container):
    resp = client.post("/", data=_form(employeeID="EMP 001"))

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "letters, numbers, and hyphens" in html
    assert 'value="John Smith"' in html
    assert container.attendance_repo.count() == 0


def test_dashboard_lists_records_and_stats(client, container):
    container.attendance_repo.create_many(
        [
            ("John Smith", "EMP001", date(2024, 1, 15), AttendanceStatus.PRESENT),
            ("Mike Wilson", "EMP003", date(2024, 1, 15), AttendanceStatus.ABSENT),
        ]
    )

    html = client.get("/dashboard").get_data(as_text=True)

    assert "John Smith" in html
    assert "Mike Wilson" in html
    assert "2 records found" in html
    assert "50.0%" in html


def test_dashboard_search_filters_rows(client, container):
    container.attendance_repo.create_many(
        [
            ("John Smith", "EMP001", date(2024, 1, 15), AttendanceStatus.PRESENT),
            ("Mike Wilson", "EMP003", date(2024, 1, 15), AttendanceStatus.ABSENT),
        ]
    )

    html = client.get("/dashboard?search=wilson").get_data(as_text=True)

    assert "Mike Wilson" in html
    assert "John Smith" not in html
    assert "1 record found" in html


def test_dashboard_bad_filter_falls_back_to_all(client, container):
    container.attendance_repo.create_many([("John Smith", "EMP001", date(2024, 1, 15), AttendanceStatus.PRESENT)])

    html = client.get("/dashboard?date=yesterday").get_data(as_text=True)

    assert "must be a valid date" in html
    assert "John Smith" in html


def test_delete_from_dashboard(client, container):
    record_id = container.attendance_repo.create(
        employee_name="John Smith",
        employee_id="EMP001",
        work_date=date(2024, 1, 15),
        status=AttendanceStatus.PRESENT,
    )

    resp = client.post(f"/dashboard/records/{record_id}/delete", follow_redirects=True)

    assert "Record deleted successfully!" in resp.get_data(as_text=True)
    assert container.attendance_repo.count() == 0

    again = client.post(f"/dashboard/records/{record_id}/delete", follow_redirects=True)
    assert "Record not found" in again.get_data(as_text=True)
