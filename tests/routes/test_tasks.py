from datetime import datetime, timedelta

import pytest

from staffsphere.enums.task_priority import TaskPriority
from staffsphere.enums.task_status import TaskStatus
from staffsphere.models.project import Project
from staffsphere.models.task import Task


@pytest.fixture
def project(db_session):
    project = Project(name="Apollo")
    db_session.add(project)
    db_session.commit()
    return project


@pytest.fixture
def seed_tasks(db_session, project, employee):
    now = datetime.now()
    tasks = [
        Task(
            title="Write docs",
            description="API reference",
            priority=TaskPriority.LOW,
            project_id=project.id,
            due_date=now + timedelta(days=3),
        ),
        Task(
            title="Fix login bug",
            description="Cookie not cleared",
            priority=TaskPriority.HIGH,
            status=TaskStatus.IN_PROGRESS,
            project_id=project.id,
            assigned_to=employee.id,
            due_date=now - timedelta(days=1),
        ),
        Task(
            title="Ship release",
            priority=TaskPriority.MEDIUM,
            status=TaskStatus.DONE,
            project_id=project.id,
            due_date=now - timedelta(days=2),
        ),
    ]
    db_session.add_all(tasks)
    db_session.commit()
    return tasks


def test_create_task(client, employee_user, employee_headers, project, employee):
    response = client.post(
        "/api/tasks",
        json={"title": "Plan sprint", "projectId": project.id, "assignedTo": employee.id, "priority": "HIGH"},
        headers=employee_headers,
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["status"] == "TO_DO"
    assert body["priority"] == "HIGH"
    assert body["description"] == ""
    assert body["assignee"]["name"] == "Jane Smith"
    assert body["createdBy"] == employee_user.id


def test_create_task_requires_title_and_project(client, employee_headers, project):
    assert client.post("/api/tasks", json={"title": "x"}, headers=employee_headers).status_code == 400
    assert client.post("/api/tasks", json={"projectId": project.id}, headers=employee_headers).status_code == 400


def test_create_task_unknown_project(client, employee_headers):
    response = client.post("/api/tasks", json={"title": "x", "projectId": 9999}, headers=employee_headers)

    assert response.status_code == 404


def test_list_tasks_pagination(client, employee_headers, seed_tasks):
    response = client.get("/api/tasks?page=2&limit=2&sort=title", headers=employee_headers)

    body = response.get_json()
    assert body["page"] == 2
    assert body["limit"] == 2
    assert body["total"] == 3
    assert body["totalPages"] == 2
    assert [task["title"] for task in body["tasks"]] == ["Write docs"]


def test_list_tasks_filters(client, employee_headers, seed_tasks, employee):
    by_status = client.get("/api/tasks?status=DONE", headers=employee_headers).get_json()
    by_assignee = client.get(f"/api/tasks?assignedTo={employee.id}", headers=employee_headers).get_json()
    by_search = client.get("/api/tasks?search=COOKIE", headers=employee_headers).get_json()

    assert [task["title"] for task in by_status["tasks"]] == ["Ship release"]
    assert [task["title"] for task in by_assignee["tasks"]] == ["Fix login bug"]
    assert [task["title"] for task in by_search["tasks"]] == ["Fix login bug"]


def test_list_tasks_sort_by_priority(client, employee_headers, seed_tasks):
    body = client.get("/api/tasks?sort=-priority", headers=employee_headers).get_json()

    assert [task["priority"] for task in body["tasks"]] == ["HIGH", "MEDIUM", "LOW"]


def test_list_tasks_unknown_sort_falls_back(client, employee_headers, seed_tasks):
    response = client.get("/api/tasks?sort=password&page=abc", headers=employee_headers)

    assert response.status_code == 200
    assert response.get_json()["page"] == 1
    assert len(response.get_json()["tasks"]) == 3


def test_all_tasks(client, employee_headers, seed_tasks):
    assert len(client.get("/api/tasks/all", headers=employee_headers).get_json()) == 3


def test_project_tasks(client, employee_headers, seed_tasks, project):
    assert len(client.get(f"/api/tasks/{project.id}", headers=employee_headers).get_json()) == 3
    assert client.get("/api/tasks/9999", headers=employee_headers).get_json() == []


def test_task_detail(client, employee_headers, seed_tasks):
    task_id = seed_tasks[0].id

    response = client.get(f"/api/tasks/detail/{task_id}", headers=employee_headers)

    assert response.get_json()["title"] == "Write docs"
    assert client.get("/api/tasks/detail/9999", headers=employee_headers).status_code == 404


def test_update_task(client, employee_headers, seed_tasks):
    task_id = seed_tasks[0].id

    response = client.put(
        f"/api/tasks/{task_id}", json={"status": "DONE", "dueDate": None, "title": "  "}, headers=employee_headers
    )

    body = response.get_json()
    assert body["status"] == "DONE"
    assert body["dueDate"] is None
    assert body["title"] == "Write docs"


def test_delete_task(client, employee_headers, seed_tasks):
    task_id = seed_tasks[0].id

    assert client.delete(f"/api/tasks/{task_id}", headers=employee_headers).status_code == 200
    assert client.delete(f"/api/tasks/{task_id}", headers=employee_headers).status_code == 404


def test_bulk_delete(client, employee_headers, seed_tasks):
    ids = [seed_tasks[0].id, seed_tasks[1].id, 9999]

    response = client.post("/api/tasks/bulk-delete", json={"ids": ids}, headers=employee_headers)

    assert response.get_json()["deletedCount"] == 2
    assert Task.query.count() == 1


def test_bulk_delete_requires_ids(client, employee_headers):
    assert client.post("/api/tasks/bulk-delete", json={"ids": []}, headers=employee_headers).status_code == 400


def test_bulk_update_status(client, employee_headers, seed_tasks):
    ids = [task.id for task in seed_tasks]

    response = client.post(
        "/api/tasks/bulk-update-status", json={"ids": ids, "status": "IN_PROGRESS"}, headers=employee_headers
    )

    assert response.get_json()["modifiedCount"] == 3
    assert {task.status for task in Task.query.all()} == {TaskStatus.IN_PROGRESS}


def test_stats_overview(client, employee_headers, seed_tasks):
    body = client.get("/api/tasks/stats/overview", headers=employee_headers).get_json()

    assert sorted(body["byStatus"], key=lambda row: row["status"]) == [
        {"status": "DONE", "count": 1},
        {"status": "IN_PROGRESS", "count": 1},
        {"status": "TO_DO", "count": 1},
    ]
    assert sum(row["count"] for row in body["byPriority"]) == 3


def test_search_query(client, employee_headers, seed_tasks):
    body = client.get("/api/tasks/search/query?search=docs", headers=employee_headers).get_json()

    assert [task["title"] for task in body] == ["Write docs"]
    assert client.get("/api/tasks/search/query", headers=employee_headers).status_code == 400


def test_overdue_list_skips_done(client, employee_headers, seed_tasks):
    body = client.get("/api/tasks/overdue/list", headers=employee_headers).get_json()

    assert [task["title"] for task in body] == ["Fix login bug"]


def test_assign_task(client, employee_headers, seed_tasks, other_employee):
    task_id = seed_tasks[0].id

    response = client.post(f"/api/tasks/{task_id}/assign", json={"employeeId": other_employee.id}, headers=employee_headers)

    assert response.get_json()["assignedTo"] == other_employee.id


def test_assign_task_unknown_employee(client, employee_headers, seed_tasks):
    task_id = seed_tasks[0].id

    response = client.post(f"/api/tasks/{task_id}/assign", json={"employeeId": 9999}, headers=employee_headers)

    assert response.status_code == 404
