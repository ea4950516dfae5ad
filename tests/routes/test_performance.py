import pytest


@pytest.fixture
def review(client, employee_headers, employee):
    response = client.post(
        "/api/performance/reviews",
        json={"employeeId": employee.id, "reviewer": "Ana", "rating": 4, "comments": "Solid quarter"},
        headers=employee_headers,
    )
    return response.get_json()


# --- Cycles ---
def test_create_and_list_cycles(client, employee_headers):
    response = client.post(
        "/api/performance/cycles",
        json={"name": "H1 2025", "startDate": "2025-01-01", "endDate": "2025-06-30"},
        headers=employee_headers,
    )

    assert response.status_code == 201
    assert response.get_json()["status"] == "active"

    cycles = client.get("/api/performance/cycles", headers=employee_headers).get_json()
    assert [cycle["name"] for cycle in cycles] == ["H1 2025"]


def test_create_cycle_requires_dates(client, employee_headers):
    response = client.post("/api/performance/cycles", json={"name": "H1"}, headers=employee_headers)

    assert response.status_code == 400
    assert {tuple(error["loc"]) for error in response.get_json()["errors"]} == {("startDate",), ("endDate",)}


def test_create_cycle_with_inverted_dates(client, employee_headers):
    response = client.post(
        "/api/performance/cycles",
        json={"name": "H1", "startDate": "2025-06-30", "endDate": "2025-01-01"},
        headers=employee_headers,
    )

    assert response.status_code == 400


def test_delete_cycle(client, employee_headers):
    created = client.post(
        "/api/performance/cycles",
        json={"name": "H1", "startDate": "2025-01-01", "endDate": "2025-06-30", "status": "completed"},
        headers=employee_headers,
    ).get_json()

    assert client.delete(f"/api/performance/cycles/{created['id']}", headers=employee_headers).status_code == 200
    assert client.delete(f"/api/performance/cycles/{created['id']}", headers=employee_headers).status_code == 404


# --- Goals ---
def test_create_goal_applies_defaults(client, employee_headers):
    response = client.post("/api/performance/goals", json={"title": ""}, headers=employee_headers)

    assert response.status_code == 201
    goal = response.get_json()
    assert goal["title"] == "Untitled Goal"
    assert goal["description"] == "No description provided"
    assert goal["status"] == "pending"
    assert goal["targetDate"] is not None
    assert goal["employeeId"] is None


def test_create_goal(client, employee_headers, employee):
    response = client.post(
        "/api/performance/goals",
        json={"employeeId": employee.id, "title": "Ship v2", "status": "in-progress", "targetDate": "2025-09-01"},
        headers=employee_headers,
    )

    goal = response.get_json()
    assert goal["status"] == "in-progress"
    assert goal["targetDate"] == "2025-09-01T00:00:00"

    goals = client.get("/api/performance/goals", headers=employee_headers).get_json()
    assert [row["title"] for row in goals] == ["Ship v2"]


def test_delete_goal(client, employee_headers):
    goal = client.post("/api/performance/goals", json={}, headers=employee_headers).get_json()

    assert client.delete(f"/api/performance/goals/{goal['id']}", headers=employee_headers).status_code == 200
    assert client.delete(f"/api/performance/goals/{goal['id']}", headers=employee_headers).status_code == 404


# --- Reviews ---
def test_create_review_defaults(client, employee_headers):
    response = client.post("/api/performance/reviews", json={}, headers=employee_headers)

    review = response.get_json()
    assert review["reviewer"] == "System"
    assert review["rating"] == 3
    assert review["comments"] == ""
    assert review["status"] == "draft"
    assert review["acknowledged"] is False


def test_create_review_rating_out_of_range(client, employee_headers):
    response = client.post("/api/performance/reviews", json={"rating": 7}, headers=employee_headers)

    assert response.status_code == 400


def test_get_update_delete_review(client, employee_headers, review):
    url = f"/api/performance/reviews/{review['id']}"

    assert client.get(url, headers=employee_headers).get_json()["reviewer"] == "Ana"

    updated = client.put(url, json={"rating": 5, "comments": "Great"}, headers=employee_headers).get_json()
    assert updated["rating"] == 5
    assert updated["reviewer"] == "Ana"

    assert client.delete(url, headers=employee_headers).status_code == 200
    assert client.get(url, headers=employee_headers).status_code == 404


def test_list_reviews(client, employee_headers, review):
    assert len(client.get("/api/performance/reviews", headers=employee_headers).get_json()) == 1


def test_acknowledge_review(client, employee_headers, review):
    response = client.post(f"/api/performance/reviews/{review['id']}/acknowledge", headers=employee_headers)

    assert response.status_code == 200
    assert response.get_json()["review"]["acknowledged"] is True


def test_update_review_status(client, employee_headers, review):
    response = client.patch(
        f"/api/performance/reviews/{review['id']}/status", json={"status": "submitted"}, headers=employee_headers
    )

    assert response.get_json()["status"] == "submitted"


def test_review_summary(client, employee_headers, employee, review):
    client.post(
        "/api/performance/reviews", json={"employeeId": employee.id, "rating": 3}, headers=employee_headers
    )

    response = client.get(f"/api/performance/reviews/summary/{employee.id}", headers=employee_headers)

    body = response.get_json()
    assert body["avgRating"] == 3.5
    assert len(body["reviews"]) == 2


def test_review_summary_without_reviews(client, employee_headers, employee):
    response = client.get(f"/api/performance/reviews/summary/{employee.id}", headers=employee_headers)

    assert response.status_code == 404
