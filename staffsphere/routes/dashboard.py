from flask import Blueprint, jsonify

from ..auth.decorators import auth_required
from ..enums.project_status import ProjectStatus
from ..extensions import db
from ..models.employee import Employee
from ..models.notification import Notification
from ..models.project import Project
from ..services.attendance_service import present_today_count

bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


@bp.get("/stats")
@auth_required
def stats():
    employees = Employee.query.count()
    present_today = present_today_count()

    project_counts = dict(db.session.query(Project.status, db.func.count(Project.id)).group_by(Project.status).all())

    return jsonify(
        {
            "employees": employees,
            "projects": Project.query.count(),
            "notifications": Notification.query.count(),
            "attendancePercent": round(present_today / employees * 100) if employees else 0,
            "projectBreakdown": [
                {"name": status.value, "value": project_counts.get(status, 0)} for status in ProjectStatus
            ],
        }
    )
