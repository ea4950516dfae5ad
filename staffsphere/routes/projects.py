from flask import Blueprint, jsonify

from ..auth.decorators import auth_required
from ..auth.helpers import get_current_user_id
from ..extensions import db
from ..models.employee import Employee
from ..models.project import Project
from ..schemas.project import ProjectRequest, ProjectResponse
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import parse_body

bp = Blueprint("projects", __name__, url_prefix="/api/projects")


def _resolve_members(member_ids: list[int]) -> list[Employee]:
    """Look up member employees. Unknown ids are dropped."""
    if not member_ids:
        return []
    return Employee.query.filter(Employee.id.in_(set(member_ids))).order_by(Employee.id).all()


@bp.get("/")
@auth_required
def list_projects():
    projects = Project.query.order_by(Project.created_at.desc(), Project.id.desc()).all()
    return jsonify(to_json_list(ProjectResponse, projects))


@bp.post("/")
@auth_required
def create_project():
    data = parse_body(ProjectRequest)
    if not data.name or not data.name.strip():
        return jsonify({"message": "Project name is required."}), 400

    fields = data.model_dump(exclude_none=True, exclude={"members"})
    fields["name"] = fields["name"].strip()
    project = Project(**fields)
    project.members = _resolve_members(data.members or [])
    project.touch(get_current_user_id())

    db.session.add(project)
    db.session.commit()

    return jsonify(to_json(ProjectResponse.model_validate(project))), 201


@bp.put("/<int:project_id>")
@auth_required
def update_project(project_id: int):
    data = parse_body(ProjectRequest)

    project = db.session.get(Project, project_id)
    if project is None:
        return jsonify({"message": "Project not found"}), 404

    fields = data.model_dump(exclude_unset=True, exclude={"members", "start_date"})
    if "name" in fields and not (fields["name"] or "").strip():
        fields.pop("name")
    if "status" in fields and fields["status"] is None:
        fields.pop("status")

    for key, value in fields.items():
        setattr(project, key, value)

    if data.members is not None:
        project.members = _resolve_members(data.members)

    project.touch(get_current_user_id())
    db.session.commit()

    return jsonify(to_json(ProjectResponse.model_validate(project)))


@bp.delete("/<int:project_id>")
@auth_required
def delete_project(project_id: int):
    project = db.session.get(Project, project_id)
    if project is None:
        return jsonify({"message": "Project not found"}), 404

    db.session.delete(project)
    db.session.commit()
    return jsonify({"message": "Project deleted"})
