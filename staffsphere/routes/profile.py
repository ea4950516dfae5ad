"""
Self-service endpoints. Every route here acts on the caller's own records,
identified by the id inside their credential.
"""

from flask import Blueprint, current_app, jsonify

from ..auth.decorators import auth_required
from ..auth.helpers import get_current_user_id
from ..extensions import db
from ..models.employee import Employee, normalize_department
from ..models.user import User
from ..schemas.employee import EmployeeResponse, SelfServiceUpdate
from ..schemas.user import ChangePasswordRequest, EmployeeProfileUpdate, ProfileUpdate, UserResponse
from ..utils.json_utils import to_json
from ..utils.request_utils import parse_body

bp = Blueprint("profile", __name__, url_prefix="/api")


def _current_user_or_none():
    return db.session.get(User, get_current_user_id())


def _user_not_found():
    return jsonify({"message": "User not found."}), 404


def _update_user(user: User, fields: dict):
    """Apply a partial update. Returns an error response when the new email is taken."""
    if fields.get("email"):
        email = User.normalize_email(fields["email"])
        other = User.get_by_email(email)
        if other is not None and other.id != user.id:
            return jsonify({"message": "Email already in use."}), 400
        fields["email"] = email
    else:
        fields.pop("email", None)

    if not (fields.get("name") or "").strip():
        fields.pop("name", None)
    if "department" in fields:
        fields["department"] = normalize_department(fields["department"])

    for key, value in fields.items():
        setattr(user, key, value)
    db.session.commit()
    return None


@bp.get("/employee/profile")
@auth_required
def get_employee_profile():
    user = _current_user_or_none()
    if user is None:
        return _user_not_found()

    return jsonify(to_json(UserResponse.model_validate(user)))


@bp.put("/employee/profile")
@auth_required
def update_employee_profile():
    data = parse_body(EmployeeProfileUpdate)

    user = _current_user_or_none()
    if user is None:
        return _user_not_found()

    error = _update_user(user, data.model_dump(exclude_unset=True))
    if error is not None:
        return error

    return jsonify({"message": "Profile updated.", "user": to_json(UserResponse.model_validate(user))})


@bp.get("/profile")
@auth_required
def get_profile():
    user = _current_user_or_none()
    if user is None:
        return _user_not_found()

    return jsonify(to_json(UserResponse.model_validate(user)))


@bp.put("/profile")
@auth_required
def update_profile():
    data = parse_body(ProfileUpdate)

    user = _current_user_or_none()
    if user is None:
        return _user_not_found()

    fields = data.model_dump(exclude_unset=True)
    if "theme" in fields and not fields["theme"]:
        fields.pop("theme")

    error = _update_user(user, fields)
    if error is not None:
        return error

    return jsonify({"message": "Profile updated.", "user": to_json(UserResponse.model_validate(user))})


@bp.put("/profile/change-password")
@auth_required
def change_password():
    data = parse_body(ChangePasswordRequest)
    if not data.current_password or not data.new_password:
        return jsonify({"message": "Current and new password are required."}), 400

    user = _current_user_or_none()
    if user is None:
        return _user_not_found()

    if not user.check_password(data.current_password):
        current_app.logger.warning(f"User {user.id} failed a password change: current password mismatch")
        return jsonify({"message": "Current password is incorrect."}), 400

    user.set_password(data.new_password)
    db.session.commit()

    current_app.logger.info(f"User {user.id} changed their password")
    return jsonify({"message": "Password updated successfully."})


@bp.get("/ess/me")
@auth_required
def get_self_service_record():
    employee = Employee.for_user(get_current_user_id())
    if employee is None:
        return jsonify({"message": "Employee record not found."}), 404

    return jsonify(to_json(EmployeeResponse.model_validate(employee)))


@bp.put("/ess/me")
@auth_required
def update_self_service_record():
    data = parse_body(SelfServiceUpdate)

    employee = Employee.for_user(get_current_user_id())
    if employee is None:
        return jsonify({"message": "Employee record not found."}), 404

    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(employee, key, value)
    employee.touch(get_current_user_id())
    db.session.commit()

    return jsonify({"message": "Profile updated.", "employee": to_json(EmployeeResponse.model_validate(employee))})
