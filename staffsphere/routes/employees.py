from flask import Blueprint, current_app, jsonify

from ..auth.decorators import auth_required, role_required
from ..auth.helpers import get_current_user_id
from ..constants import DEFAULT_DEPARTMENT, DEFAULT_JOB_TITLE
from ..enums.role import Role
from ..extensions import db
from ..models.employee import Employee, normalize_department
from ..schemas.employee import EmployeeRequest, EmployeeResponse
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("employees", __name__, url_prefix="/api/employees")

# Sent as null or empty on update these keep their stored value
NON_NULLABLE_FIELDS = ("name", "email", "job_title", "date_of_joining", "status", "salary")


def _apply_fields(employee: Employee, fields: dict):
    if "email" in fields and fields["email"] is not None:
        fields["email"] = fields["email"].strip().lower()
    if "department" in fields:
        fields["department"] = normalize_department(fields["department"])
    if "name" in fields and fields["name"] is not None:
        fields["name"] = fields["name"].strip()

    for key, value in fields.items():
        setattr(employee, key, value)


@bp.get("/stats/summary")
@auth_required
def stats_summary():
    rows = db.session.query(Employee.department, db.func.count(Employee.id)).group_by(Employee.department).all()

    by_department: dict[str, int] = {}
    for label, count in rows:
        label = (label or "").strip() or DEFAULT_DEPARTMENT
        by_department[label] = by_department.get(label, 0) + count

    ranked = sorted(by_department.items(), key=lambda item: (-item[1], item[0]))
    return jsonify(
        {
            "total": Employee.query.count(),
            "byDepartment": [{"department": label, "count": count} for label, count in ranked],
        }
    )


@bp.post("/")
@role_required(Role.HR)
def create_employee():
    data = parse_body(EmployeeRequest)
    if not data.name or not data.email:
        return jsonify({"message": "Name and email are required."}), 400

    fields = data.model_dump(exclude_unset=True, exclude_none=True)
    if Employee.email_taken(fields["email"].strip().lower()):
        return jsonify({"message": "Employee email already exists."}), 400

    fields.setdefault("department", DEFAULT_DEPARTMENT)
    fields.setdefault("job_title", DEFAULT_JOB_TITLE)

    employee = Employee()
    _apply_fields(employee, fields)
    employee.touch(get_current_user_id())

    db.session.add(employee)
    db.session.commit()

    current_app.logger.info(f"Employee {employee.id} created by user {get_current_user_id()}")
    return jsonify({"message": "Employee created.", "employee": to_json(EmployeeResponse.model_validate(employee))}), 201


@bp.get("/")
@auth_required
def list_employees():
    employees = Employee.query.order_by(Employee.created_at.desc(), Employee.id.desc()).all()
    return jsonify(to_json_list(EmployeeResponse, employees))


@bp.get("/<int:employee_id>")
@auth_required
def get_employee(employee_id: int):
    employee = db.session.get(Employee, employee_id)
    if employee is None:
        return jsonify({"message": "Employee not found."}), 404

    return jsonify(to_json(EmployeeResponse.model_validate(employee)))


@bp.put("/<int:employee_id>")
@role_required(Role.HR)
def update_employee(employee_id: int):
    data = parse_body(EmployeeRequest)

    employee = db.session.get(Employee, employee_id)
    if employee is None:
        return jsonify({"message": "Employee not found."}), 404

    fields = data.model_dump(exclude_unset=True)
    for key in NON_NULLABLE_FIELDS:
        if key in fields and fields[key] in (None, ""):
            fields.pop(key)

    if "email" in fields and Employee.email_taken(fields["email"].strip().lower(), exclude_id=employee.id):
        return jsonify({"message": "Duplicate email not allowed."}), 400

    _apply_fields(employee, fields)
    employee.touch(get_current_user_id())
    db.session.commit()

    return jsonify({"message": "Employee updated.", "employee": to_json(EmployeeResponse.model_validate(employee))})


@bp.delete("/<int:employee_id>")
@role_required(Role.HR)
def delete_employee(employee_id: int):
    employee = db.session.get(Employee, employee_id)
    if employee is None:
        return jsonify({"message": "Employee not found."}), 404

    db.session.delete(employee)
    db.session.commit()

    current_app.logger.info(f"Employee {employee_id} deleted by user {get_current_user_id()}")
    return jsonify({"message": "Employee deleted."})
