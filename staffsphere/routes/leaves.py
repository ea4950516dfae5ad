from flask import Blueprint, jsonify

from ..auth.decorators import auth_required
from ..auth.helpers import get_current_user_id
from ..extensions import db
from ..models.employee import Employee
from ..models.leave import Leave
from ..schemas.leave import LeaveRequest, LeaveResponse
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("leaves", __name__, url_prefix="/api/leaves")

INVALID_RANGE_MESSAGE = "Leave end date cannot be before the start date."


@bp.post("/")
@auth_required
def create_leave():
    data = parse_body(LeaveRequest)
    if data.employee_id is None or data.from_date is None or data.to_date is None:
        return jsonify({"message": "Employee, from and to dates are required."}), 400

    if db.session.get(Employee, data.employee_id) is None:
        return jsonify({"message": "Employee not found."}), 404

    leave = Leave(**data.model_dump(exclude_none=True))
    if not leave.has_valid_range():
        return jsonify({"message": INVALID_RANGE_MESSAGE}), 400

    leave.touch(get_current_user_id())
    db.session.add(leave)
    db.session.commit()

    return jsonify({"message": "Leave request created.", "leave": to_json(LeaveResponse.model_validate(leave))}), 201


@bp.get("/")
@auth_required
def list_leaves():
    leaves = Leave.query.order_by(Leave.created_at.desc(), Leave.id.desc()).all()
    return jsonify(to_json_list(LeaveResponse, leaves))


@bp.get("/<int:leave_id>")
@auth_required
def get_leave(leave_id: int):
    leave = db.session.get(Leave, leave_id)
    if leave is None:
        return jsonify({"message": "Leave not found"}), 404

    return jsonify(to_json(LeaveResponse.model_validate(leave)))


@bp.put("/<int:leave_id>")
@auth_required
def update_leave(leave_id: int):
    data = parse_body(LeaveRequest)

    leave = db.session.get(Leave, leave_id)
    if leave is None:
        return jsonify({"message": "Leave not found"}), 404

    fields = data.model_dump(exclude_none=True)
    if "employee_id" in fields and db.session.get(Employee, fields["employee_id"]) is None:
        return jsonify({"message": "Employee not found."}), 404

    for key, value in fields.items():
        setattr(leave, key, value)

    if not leave.has_valid_range():
        db.session.rollback()
        return jsonify({"message": INVALID_RANGE_MESSAGE}), 400

    leave.touch(get_current_user_id())
    db.session.commit()

    return jsonify({"message": "Leave updated", "leave": to_json(LeaveResponse.model_validate(leave))})


@bp.delete("/<int:leave_id>")
@auth_required
def delete_leave(leave_id: int):
    leave = db.session.get(Leave, leave_id)
    if leave is None:
        return jsonify({"message": "Leave not found"}), 404

    db.session.delete(leave)
    db.session.commit()
    return jsonify({"message": "Leave deleted"})
