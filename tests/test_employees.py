"""
Tests for admin employee management and the own-profile endpoint.
"""
from emplyo.core.roles import user_is_admin
from emplyo.db.models.attendance import Attendance
from emplyo.db.models.profile import Profile
from emplyo.db.models.user_role import UserRole
from emplyo.services import attendance_service


def test_admin_creates_employee(client, db, admin_headers):
    response = client.post(
        "/employees",
        headers=admin_headers,
        json={
            "email": "new.hire@example.com",
            "password": "testpass123",
            "full_name": "New Hire",
            "department": "Sales",
            "salary": 55000,
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["full_name"] == "New Hire"
    assert body["department"] == "Sales"
    assert body["salary"] == 55000
    assert not user_is_admin(db, body["id"])


def test_create_employee_duplicate_email(client, admin_headers, employee_user):
    response = client.post(
        "/employees",
        headers=admin_headers,
        json={"email": "EMPLOYEE@example.com", "password": "testpass123", "full_name": "Dup"},
    )
    assert response.status_code == 409


def test_create_employee_rejects_unknown_department(client, admin_headers):
    response = client.post(
        "/employees",
        headers=admin_headers,
        json={"email": "x@example.com", "password": "testpass123", "full_name": "X", "department": "Legal"},
    )
    assert response.status_code == 422


def test_employee_cannot_manage_employees(client, employee_headers, employee_user):
    assert client.get("/employees", headers=employee_headers).status_code == 403
    response = client.post(
        "/employees",
        headers=employee_headers,
        json={"email": "x@example.com", "password": "testpass123", "full_name": "X"},
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Admin access required"
    assert client.delete(f"/employees/{employee_user.id}", headers=employee_headers).status_code == 403


def test_list_employees_newest_first(client, admin_headers, admin_user, employee_user):
    response = client.get("/employees", headers=admin_headers)

    assert response.status_code == 200
    emails = [p["email"] for p in response.json()]
    assert emails == ["employee@example.com", "admin@example.com"]


def test_update_employee(client, admin_headers, employee_user):
    response = client.put(
        f"/employees/{employee_user.id}",
        headers=admin_headers,
        json={"department": "Finance", "salary": 72000.5},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["department"] == "Finance"
    assert body["salary"] == 72000.5
    assert body["full_name"] == "Eve Employee"


def test_update_unknown_employee(client, admin_headers):
    response = client.put("/employees/missing", headers=admin_headers, json={"full_name": "Nobody"})
    assert response.status_code == 404


def test_delete_employee_removes_dependent_rows(client, db, admin_headers, employee_user):
    user_id = employee_user.id
    attendance_service.check_in(db, user_id)

    response = client.delete(f"/employees/{user_id}", headers=admin_headers)

    assert response.status_code == 204
    assert db.query(Profile).filter(Profile.id == user_id).first() is None
    assert db.query(UserRole).filter(UserRole.user_id == user_id).count() == 0
    assert db.query(Attendance).filter(Attendance.user_id == user_id).count() == 0


def test_my_profile(client, employee_headers):
    response = client.get("/profiles/me", headers=employee_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "employee@example.com"
    assert response.json()["department"] == "Engineering"
