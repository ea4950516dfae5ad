import pytest

from staffsphere.models.employee import Employee
from staffsphere.models.user import User


@pytest.fixture
def linked_employee(db_session, employee_user):
    employee = Employee(name="John Doe", email="john@company.com", user_ref=employee_user.id, salary=30000)
    db_session.add(employee)
    db_session.commit()
    return employee


# --- /api/employee/profile ---
def test_get_employee_profile(client, employee_user, employee_headers):
    response = client.get("/api/employee/profile", headers=employee_headers)

    assert response.status_code == 200
    assert response.get_json()["email"] == "john@company.com"
    assert "passwordHash" not in response.get_json()


def test_update_employee_profile(client, employee_headers):
    response = client.put(
        "/api/employee/profile", json={"phone": "555-0100", "department": "Support"}, headers=employee_headers
    )

    user = response.get_json()["user"]
    assert user["phone"] == "555-0100"
    assert user["department"] == "Support"
    assert user["name"] == "John Doe"


def test_update_employee_profile_email_taken(client, hr_user, employee_headers):
    response = client.put("/api/employee/profile", json={"email": "HR@company.com"}, headers=employee_headers)

    assert response.status_code == 400


def test_employee_profile_requires_auth(client):
    assert client.get("/api/employee/profile").status_code == 401


# --- /api/profile ---
def test_update_profile_preferences(client, employee_headers):
    response = client.put(
        "/api/profile",
        json={"language": "fr", "theme": "dark", "dob": "1990-04-01", "profileImage": "https://cdn.example.com/j.png"},
        headers=employee_headers,
    )

    user = response.get_json()["user"]
    assert user["language"] == "fr"
    assert user["theme"] == "dark"
    assert user["dob"] == "1990-04-01"
    assert user["profileImage"] == "https://cdn.example.com/j.png"

    assert client.get("/api/profile", headers=employee_headers).get_json()["theme"] == "dark"


def test_change_password(client, employee_user, employee_headers):
    response = client.put(
        "/api/profile/change-password",
        json={"currentPassword": "123456", "newPassword": "s3cret!"},
        headers=employee_headers,
    )

    assert response.status_code == 200
    assert User.get_by_email("john@company.com").check_password("s3cret!")


def test_change_password_wrong_current(client, employee_headers):
    response = client.put(
        "/api/profile/change-password",
        json={"currentPassword": "nope", "newPassword": "s3cret!"},
        headers=employee_headers,
    )

    assert response.status_code == 400
    assert User.get_by_email("john@company.com").check_password("123456")


def test_change_password_missing_fields(client, employee_headers):
    response = client.put("/api/profile/change-password", json={"newPassword": "x"}, headers=employee_headers)

    assert response.status_code == 400


# --- /api/ess/me ---
def test_ess_me(client, employee_headers, linked_employee):
    response = client.get("/api/ess/me", headers=employee_headers)

    assert response.status_code == 200
    assert response.get_json()["id"] == linked_employee.id


def test_ess_me_without_linked_record(client, employee_headers):
    assert client.get("/api/ess/me", headers=employee_headers).status_code == 404


def test_ess_update_only_touches_allowed_fields(client, employee_headers, linked_employee):
    response = client.put(
        "/api/ess/me",
        json={
            "phone": "555-0199",
            "gender": "Male",
            "emergencyContact": {"name": "Mary", "relation": "Mother", "phone": "555-0142"},
            "profileSummary": "Backend developer",
            "salary": 999999,
            "jobTitle": "CEO",
        },
        headers=employee_headers,
    )

    assert response.status_code == 200
    employee = response.get_json()["employee"]
    assert employee["phone"] == "555-0199"
    assert employee["gender"] == "Male"
    assert employee["emergencyContact"]["relation"] == "Mother"
    assert employee["profileSummary"] == "Backend developer"
    assert employee["salary"] == 30000
    assert employee["jobTitle"] == "Employee"
