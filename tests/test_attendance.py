"""
Tests for attendance check-in / check-out.
"""
from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi import HTTPException

from emplyo.db.models.attendance import Attendance
from emplyo.services import attendance_service


def test_check_in_then_out(client, db, employee_headers, employee_user):
    response = client.post("/attendance/check-in", headers=employee_headers)
    assert response.status_code == 200
    record = response.json()
    assert record["user_id"] == employee_user.id
    assert record["date"] == attendance_service.utc_today().isoformat()
    assert record["status"] == "present"
    assert record["check_out"] is None

    response = client.post("/attendance/check-out", headers=employee_headers)
    assert response.status_code == 200
    assert response.json()["check_out"] is not None


def test_second_check_in_same_day_conflicts(client, db, employee_headers, employee_user):
    assert client.post("/attendance/check-in", headers=employee_headers).status_code == 200

    response = client.post("/attendance/check-in", headers=employee_headers)

    assert response.status_code == 409
    assert response.json()["detail"] == "Already checked in today"
    assert db.query(Attendance).filter(Attendance.user_id == employee_user.id).count() == 1


def test_check_out_without_check_in(client, employee_headers):
    response = client.post("/attendance/check-out", headers=employee_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "No check-in found for today"


def test_double_check_out_conflicts(client, employee_headers):
    client.post("/attendance/check-in", headers=employee_headers)
    client.post("/attendance/check-out", headers=employee_headers)

    response = client.post("/attendance/check-out", headers=employee_headers)
    assert response.status_code == 409


def test_today_is_null_before_check_in(client, employee_headers):
    response = client.get("/attendance/today", headers=employee_headers)
    assert response.status_code == 200
    assert response.json() is None


def test_new_day_allows_new_check_in(db, employee_user):
    yesterday = datetime(2026, 3, 1, 17, 30, tzinfo=timezone.utc)
    today = yesterday + timedelta(days=1)

    attendance_service.check_in(db, employee_user.id, now=yesterday)
    record = attendance_service.check_in(db, employee_user.id, now=today)

    assert record.date == date(2026, 3, 2)
    with pytest.raises(HTTPException) as exc_info:
        attendance_service.check_out(db, employee_user.id, now=today + timedelta(days=1))
    assert exc_info.value.status_code == 404


def test_history_newest_first(client, db, employee_headers, employee_user):
    start = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    for offset in range(3):
        attendance_service.check_in(db, employee_user.id, now=start + timedelta(days=offset))

    response = client.get("/attendance/history?limit=2", headers=employee_headers)

    assert response.status_code == 200
    assert [r["date"] for r in response.json()] == ["2026-03-03", "2026-03-02"]


def test_overview_is_admin_only(client, employee_headers):
    assert client.get("/attendance/overview", headers=employee_headers).status_code == 403


def test_overview_lists_day_with_names(client, db, admin_headers, admin_user, employee_user):
    day = datetime(2026, 3, 4, 8, 0, tzinfo=timezone.utc)
    attendance_service.check_in(db, employee_user.id, now=day)
    attendance_service.check_in(db, admin_user.id, now=day + timedelta(hours=1))
    attendance_service.check_in(db, employee_user.id, now=day + timedelta(days=1))

    response = client.get("/attendance/overview?day=2026-03-04", headers=admin_headers)

    assert response.status_code == 200
    assert [r["full_name"] for r in response.json()] == ["Ada Admin", "Eve Employee"]
