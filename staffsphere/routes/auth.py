from flask import Blueprint, current_app, jsonify, make_response

from ..auth.decorators import auth_optional, auth_required, role_required
from ..auth.helpers import get_current_user, get_current_user_id, is_authenticated
from ..enums.role import Role
from ..extensions import db
from ..models.user import User
from ..schemas.user import (
    LoginRequest,
    RegisterRequest,
    RoleUpdateRequest,
    UserBrief,
    UserResponse,
)
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _me_payload(user: User) -> dict:
    full = to_json(UserResponse.model_validate(user))
    keys = ("id", "name", "email", "role", "phone", "department", "createdAt", "updatedAt")
    return {key: full.get(key) for key in keys}


@bp.post("/register")
def register():
    data = parse_body(RegisterRequest)
    if not data.name or not data.email or not data.password:
        return jsonify({"message": "Name, email, and password are required."}), 400

    if User.get_by_email(data.email):
        return jsonify({"message": "User already exists."}), 400

    user = User.create(data.name, data.email, data.password, data.role)
    db.session.add(user)
    db.session.commit()

    current_app.logger.info(f"Registered user {user.id} with role {user.role.value}")
    return jsonify({"message": "User registered successfully.", "user": to_json(UserBrief.model_validate(user))}), 201


@bp.post("/login")
def login():
    data = parse_body(LoginRequest)
    if not data.email or not data.password:
        return jsonify({"message": "Email and password are required."}), 400

    user = User.get_by_email(data.email)
    if user is None or not user.check_password(data.password):
        current_app.logger.warning("Rejected login with invalid credentials")
        return jsonify({"message": "Invalid credentials."}), 400

    token = current_app.token_service.issue(user.id, user.role.value)

    response = make_response(
        jsonify({"message": "Login successful.", "token": token, "user": to_json(UserBrief.model_validate(user))})
    )
    response.set_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        token,
        max_age=current_app.config["JWT_EXPIRES_IN_SECONDS"],
        httponly=True,
        secure=current_app.config["AUTH_COOKIE_SECURE"],
        samesite="Lax",
        path="/",
    )

    current_app.logger.info(f"User {user.id} logged in")
    return response


@bp.post("/logout")
def logout():
    response = make_response(jsonify({"message": "Logged out successfully."}))
    response.delete_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        path="/",
        httponly=True,
        secure=current_app.config["AUTH_COOKIE_SECURE"],
        samesite="Lax",
    )
    return response


@bp.get("/me")
@auth_required
def me():
    user = db.session.get(User, get_current_user_id())
    if user is None:
        return jsonify({"message": "User not found."}), 404

    return jsonify({"user": _me_payload(user)})


@bp.get("/status")
@auth_optional
def status():
    """Report whether the caller holds a valid credential without failing when it does not."""
    if not is_authenticated():
        return jsonify({"authenticated": False, "user": None})

    identity = get_current_user()
    return jsonify({"authenticated": True, "user": {"id": identity.id, "role": identity.role}})


@bp.get("/users")
@role_required(Role.ADMIN)
def list_users():
    users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    return jsonify(to_json_list(UserResponse, users))


@bp.patch("/users/<int:user_id>/role")
@role_required(Role.ADMIN)
def update_user_role(user_id: int):
    data = parse_body(RoleUpdateRequest)

    user = db.session.get(User, user_id)
    if user is None:
        return jsonify({"message": "User not found."}), 404

    user.role = Role.coerce(data.role)
    db.session.commit()

    current_app.logger.info(f"User {user.id} role changed to {user.role.value} by {get_current_user_id()}")
    return jsonify({"message": "User role updated.", "user": to_json(UserResponse.model_validate(user))})
