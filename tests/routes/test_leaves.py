import pytest

from staffsphere.models.leave import Leave


@pytest.fixture
def leave(client, employee_headers, employee):
    response = client.post(
        "/api/leaves",
        json={"employee": employee.id, "type": "SICK", "from": "2025-02-10", "to": "2025-02-12", "reason": "Flu"},
        headers=employee_headers,
    )
    return response.get_json()["leave"]


def test_create_leave(client, employee_user, employee_headers, employee):
    response = client.post(
        "/api/leaves",
        json={"employee": employee.id, "from": "2025-02-10T00:00:00", "to": "2025-02-11T00:00:00"},
        headers=employee_headers,
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Leave request created."
    assert body["leave"]["type"] == "CASUAL"
    assert body["leave"]["status"] == "PENDING"
    assert body["leave"]["from"] == "2025-02-10T00:00:00"
    assert body["leave"]["to"] == "2025-02-11T00:00:00"
    assert body["leave"]["createdBy"] == employee_user.id


def test_create_leave_missing_fields(client, employee_headers, employee):
    response = client.post("/api/leaves", json={"employee": employee.id, "from": "2025-02-10"}, headers=employee_headers)

    assert response.status_code == 400


def test_create_leave_with_end_before_start(client, employee_headers, employee):
    response = client.post(
        "/api/leaves",
        json={"employee": employee.id, "from": "2025-02-12", "to": "2025-02-10"},
        headers=employee_headers,
    )

    assert response.status_code == 400
    assert Leave.query.count() == 0


def test_create_leave_for_unknown_employee(client, employee_headers):
    response = client.post(
        "/api/leaves", json={"employee": 9999, "from": "2025-02-10", "to": "2025-02-11"}, headers=employee_headers
    )

    assert response.status_code == 404


def test_list_leaves_embeds_employee(client, employee_headers, employee, leave):
    response = client.get("/api/leaves", headers=employee_headers)

    leaves = response.get_json()
    assert len(leaves) == 1
    assert leaves[0]["employee"]["name"] == "Jane Smith"


def test_get_leave(client, employee_headers, leave):
    response = client.get(f"/api/leaves/{leave['id']}", headers=employee_headers)

    assert response.status_code == 200
    assert response.get_json()["reason"] == "Flu"


def test_get_missing_leave(client, employee_headers):
    assert client.get("/api/leaves/9999", headers=employee_headers).status_code == 404


def test_approve_leave(client, hr_headers, leave):
    response = client.put(f"/api/leaves/{leave['id']}", json={"status": "APPROVED"}, headers=hr_headers)

    assert response.status_code == 200
    assert response.get_json()["message"] == "Leave updated"
    assert response.get_json()["leave"]["status"] == "APPROVED"
    assert response.get_json()["leave"]["type"] == "SICK"


def test_update_leave_invalid_status(client, hr_headers, leave):
    response = client.put(f"/api/leaves/{leave['id']}", json={"status": "MAYBE"}, headers=hr_headers)

    assert response.status_code == 400


def test_update_leave_to_invalid_range(client, hr_headers, leave):
    response = client.put(f"/api/leaves/{leave['id']}", json={"to": "2025-01-01"}, headers=hr_headers)

    assert response.status_code == 400
    assert Leave.query.one().to_date.day == 12


def test_delete_leave(client, hr_headers, leave):
    response = client.delete(f"/api/leaves/{leave['id']}", headers=hr_headers)

    assert response.status_code == 200
    assert Leave.query.count() == 0
