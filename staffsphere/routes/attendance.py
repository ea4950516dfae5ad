from flask import Blueprint, jsonify

from ..auth.decorators import auth_required
from ..extensions import db
from ..models.attendance import Attendance
from ..models.employee import Employee
from ..schemas.attendance import AttendanceResponse, MarkAttendanceRequest
from ..services.attendance_service import attendance_percentage, mark_attendance, monthly_overview
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("attendance", __name__, url_prefix="/api/attendance")


@bp.get("/")
@auth_required
def list_attendance():
    records = Attendance.newest_first().all()
    return jsonify(to_json_list(AttendanceResponse, records))


@bp.post("/")
@bp.post("/mark")
@auth_required
def mark():
    data = parse_body(MarkAttendanceRequest)
    record = mark_attendance(data.employee_id, data.status)
    return jsonify(to_json(AttendanceResponse.model_validate(record))), 201


@bp.get("/stats/overview")
@auth_required
def stats_overview():
    return jsonify(monthly_overview())


@bp.get("/stats/percentage/<int:employee_id>")
@auth_required
def stats_percentage(employee_id: int):
    return jsonify(attendance_percentage(employee_id))


@bp.get("/<int:employee_id>")
@auth_required
def employee_attendance(employee_id: int):
    if db.session.get(Employee, employee_id) is None:
        return jsonify({"message": "Employee not found."}), 404

    records = Attendance.newest_first().filter(Attendance.employee_id == employee_id).all()
    return jsonify(to_json_list(AttendanceResponse, records))
