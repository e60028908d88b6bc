from __future__ import annotations

from datetime import date

import pytest

from site_workforce.common.datetime_utils import today_local
from site_workforce.core.enums import AttendanceType, Role
from site_workforce.main import create_app
from site_workforce.profiles.scope import AccessScope


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, *, user_id=1, role=Role.ADMIN, site=None):
    with client.session_transaction() as s:
        s["user_id"] = user_id
        s["name"] = "Tester"
        s["role"] = role.value
        s["site_location"] = site
        s["scope"] = AccessScope.for_role(role, site).to_session()


def test_pages_require_login(client):
    resp = client.get("/dashboard")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_login_and_dashboard(client, profiles, employees):
    profiles.add(name="John Admin", email="admin@company.com", password="admin123", role=Role.ADMIN)
    employees.add("E1", "Ravi", 500, "Downtown")

    resp = client.post("/", data={"email": "admin@company.com", "password": "admin123"}, follow_redirects=True)

    assert resp.status_code == 200
    assert b"Welcome back, John Admin!" in resp.data
    assert b"Total employees" in resp.data


def test_login_failure_stays_on_form(client):
    resp = client.post("/", data={"email": "x@x.com", "password": "nope"})
    assert resp.status_code == 200
    assert b"Invalid email or password." in resp.data


def test_mark_attendance_and_duplicate_warning(client, employees, attendance):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    _login(client, role=Role.SUPERVISOR, site="Downtown")
    form = {"employee_id": emp.employee_id, "attendance_type": "half", "work_date": "2025-01-05"}

    client.post("/attendance", data=form)
    resp = client.post("/attendance", data=form, follow_redirects=True)

    assert b"Attendance already marked for this employee on this date." in resp.data
    assert len(attendance.list_for_date(date(2025, 1, 5))) == 1


def test_supervisor_cannot_delete_attendance(client, employees, attendance):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    attendance_id = attendance.add(emp.employee_id, today_local(), AttendanceType.FULL)
    _login(client, role=Role.SUPERVISOR, site="Downtown")

    resp = client.delete(f"/api/attendance/{attendance_id}")

    assert resp.status_code == 403
    assert attendance.list_all()


def test_admin_deletes_attendance(client, employees, attendance):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    attendance_id = attendance.add(emp.employee_id, today_local(), AttendanceType.FULL)
    _login(client)

    resp = client.delete(f"/api/attendance/{attendance_id}")

    assert resp.status_code == 200
    assert resp.get_json()["success"] is True
    assert attendance.list_all() == []


def test_wage_sheet_page(client, employees, attendance, advances):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    attendance.add(emp.employee_id, date(2025, 1, 5), AttendanceType.FULL)
    attendance.add(emp.employee_id, date(2025, 1, 6), AttendanceType.HALF)
    advances.add(emp.employee_id, 300, date(2025, 1, 7))
    _login(client)

    resp = client.get("/wages?start=2025-01-01&end=2025-01-31")

    assert resp.status_code == 200
    assert b"750.00" in resp.data
    assert b"450.00" in resp.data
    assert b"Pending" in resp.data


def test_export_without_data_redirects(client):
    _login(client)

    resp = client.get("/reports/export.csv")

    assert resp.status_code == 302
    assert "/reports" in resp.headers["Location"]


def test_export_csv(client, employees, attendance):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    attendance.add(emp.employee_id, date(2025, 1, 5), AttendanceType.ONE_AND_HALF)
    _login(client)

    resp = client.get("/reports/export.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert f"attendance_report_{today_local().isoformat()}.csv" in resp.headers["Content-Disposition"]
    body = resp.data.decode("utf-8-sig")
    assert body.startswith("Employee Name,Employee ID")
    assert "Ravi,E1,Mason,Downtown,2025-01-05,1.5 Day,500.00,750.00" in body


def test_employee_delete_is_admin_only(client, employees):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    _login(client, role=Role.SUPERVISOR, site="Downtown")

    resp = client.post(f"/employees/delete/{emp.employee_id}")

    assert resp.status_code == 403
    assert employees.get_by_id(emp.employee_id) is not None


def _store_down(*args, **kwargs):
    raise RuntimeError("store down")


def test_report_page_survives_store_failure(client, attendance, monkeypatch):
    monkeypatch.setattr(attendance, "list_all", _store_down)
    _login(client)

    resp = client.get("/reports")

    assert resp.status_code == 200
    assert b"System error while loading the report" in resp.data


def test_export_store_failure_redirects(client, attendance, monkeypatch):
    monkeypatch.setattr(attendance, "list_all", _store_down)
    _login(client)

    resp = client.get("/reports/export.csv")

    assert resp.status_code == 302
    assert "/reports" in resp.headers["Location"]


@pytest.mark.parametrize(
    "path, message",
    [
        ("/dashboard", b"System error while loading the dashboard"),
        ("/employees", b"System error while loading employees"),
        ("/attendance", b"System error while loading attendance"),
        ("/wages", b"System error while loading wages"),
    ],
)
def test_read_pages_survive_store_failure(client, employees, monkeypatch, path, message):
    monkeypatch.setattr(employees, "list_all", _store_down)
    _login(client)

    resp = client.get(path)

    assert resp.status_code == 200
    assert message in resp.data


def test_session_lifetime_comes_from_settings(app):
    assert app.permanent_session_lifetime.days == app.config["SESSION_DAYS"] == 1


def test_wages_page_shows_advance_history(client, employees, advances):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    advances.add(emp.employee_id, "125.5", date(2025, 1, 3))
    _login(client)

    resp = client.get(f"/wages?start=2025-01-01&end=2025-01-31&employee_id={emp.employee_id}")

    assert resp.status_code == 200
    assert b"Advance history" in resp.data
    assert b"2025-01-03" in resp.data
    assert b"125.50" in resp.data
    assert b"all advances to date" in resp.data


def test_wages_history_of_other_site_is_forbidden(client, employees):
    emp = employees.add("E2", "Anil", 800, "Uptown")
    _login(client, role=Role.SUPERVISOR, site="Downtown")

    resp = client.get(f"/wages?employee_id={emp.employee_id}")

    assert resp.status_code == 200
    assert b"Employee belongs to another site" in resp.data
