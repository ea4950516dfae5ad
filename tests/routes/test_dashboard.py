from datetime import datetime, timedelta

from staffsphere.enums.attendance_status import AttendanceStatus
from staffsphere.enums.project_status import ProjectStatus
from staffsphere.models.attendance import Attendance
from staffsphere.models.employee import Employee
from staffsphere.models.notification import Notification
from staffsphere.models.project import Project


def test_dashboard_stats_empty(client, employee_headers):
    response = client.get("/api/dashboard/stats", headers=employee_headers)

    assert response.get_json() == {
        "employees": 0,
        "projects": 0,
        "notifications": 0,
        "attendancePercent": 0,
        "projectBreakdown": [
            {"name": "Completed", "value": 0},
            {"name": "Ongoing", "value": 0},
            {"name": "Pending", "value": 0},
        ],
    }


def test_dashboard_stats(client, db_session, employee_headers, employee, other_employee):
    now = datetime.now()
    db_session.add_all(
        [
            Employee(name="Third", email="third@company.com"),
            Attendance.new(employee.id, AttendanceStatus.PRESENT, now),
            Attendance.new(other_employee.id, AttendanceStatus.ABSENT, now),
            # Yesterday does not count toward today's attendance
            Attendance.new(other_employee.id, AttendanceStatus.PRESENT, now - timedelta(days=1)),
            Project(name="A", status=ProjectStatus.ONGOING),
            Project(name="B", status=ProjectStatus.ONGOING),
            Project(name="C", status=ProjectStatus.COMPLETED),
            Notification(message="Welcome"),
        ]
    )
    db_session.commit()

    body = client.get("/api/dashboard/stats", headers=employee_headers).get_json()

    assert body["employees"] == 3
    assert body["projects"] == 3
    assert body["notifications"] == 1
    assert body["attendancePercent"] == 33
    assert body["projectBreakdown"] == [
        {"name": "Completed", "value": 1},
        {"name": "Ongoing", "value": 2},
        {"name": "Pending", "value": 0},
    ]


def test_manager_insights(client, db_session, hr_headers, employee_user, employee, other_employee):
    body = client.get("/api/manager/insights", headers=hr_headers).get_json()

    assert body["totalEmployees"] == 2
    assert body["totalDepartments"] == 0
    assert body["totalManagers"] == 1
    assert [row["name"] for row in body["topEmployees"]] == ["Jane Smith", "Ravi Kumar"]


def test_manager_insights_top_five_by_salary(client, db_session, hr_headers):
    db_session.add_all(
        [Employee(name=f"E{i}", email=f"e{i}@company.com", salary=1000 * i) for i in range(1, 8)]
    )
    db_session.commit()

    body = client.get("/api/manager/insights", headers=hr_headers).get_json()

    assert [row["name"] for row in body["topEmployees"]] == ["E7", "E6", "E5", "E4", "E3"]


def test_manager_insights_requires_hr(client, employee_headers):
    assert client.get("/api/manager/insights", headers=employee_headers).status_code == 403
