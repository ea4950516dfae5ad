from flask import Blueprint, jsonify
from sqlalchemy.exc import IntegrityError

from ..auth.decorators import auth_required, role_required
from ..enums.role import Role
from ..extensions import db
from ..models.department import Department
from ..schemas.department import DepartmentRequest, DepartmentResponse
from ..services.department_service import department_stats, refresh_employee_counts
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("departments", __name__, url_prefix="/api/departments")


def _name_taken(name: str, exclude_id=None) -> bool:
    query = Department.query.filter(Department.name == name)
    if exclude_id is not None:
        query = query.filter(Department.id != exclude_id)
    return query.first() is not None


@bp.get("/")
@auth_required
def list_departments():
    departments = Department.query.order_by(Department.name).all()
    return jsonify(to_json_list(DepartmentResponse, departments))


@bp.post("/")
@role_required(Role.HR)
def create_department():
    data = parse_body(DepartmentRequest)
    name = (data.name or "").strip()
    if not name:
        return jsonify({"message": "Department name is required."}), 400

    if _name_taken(name):
        return jsonify({"message": "Department already exists."}), 400

    department = Department(name=name, manager=(data.manager or "").strip())
    db.session.add(department)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"message": "Department already exists."}), 400

    return jsonify(to_json(DepartmentResponse.model_validate(department))), 201


@bp.put("/<int:department_id>")
@role_required(Role.HR)
def update_department(department_id: int):
    data = parse_body(DepartmentRequest)

    department = db.session.get(Department, department_id)
    if department is None:
        return jsonify({"message": "Department not found"}), 404

    if data.name is not None and data.name.strip():
        name = data.name.strip()
        if _name_taken(name, exclude_id=department.id):
            return jsonify({"message": "Department already exists."}), 400
        department.name = name
    if data.manager is not None:
        department.manager = data.manager.strip()

    db.session.commit()
    return jsonify(to_json(DepartmentResponse.model_validate(department)))


@bp.delete("/<int:department_id>")
@role_required(Role.HR)
def delete_department(department_id: int):
    department = db.session.get(Department, department_id)
    if department is None:
        return jsonify({"message": "Department not found"}), 404

    db.session.delete(department)
    db.session.commit()
    return jsonify({"message": "Department deleted"})


@bp.get("/refresh-counts")
@auth_required
def refresh_counts():
    refresh_employee_counts()
    return jsonify({"message": "Employee counts refreshed successfully"})


@bp.get("/stats")
@auth_required
def stats():
    return jsonify(department_stats())
