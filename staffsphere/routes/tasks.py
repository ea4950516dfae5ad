import math
from datetime import datetime

from flask import Blueprint, jsonify, request

from ..auth.decorators import auth_required
from ..auth.helpers import get_current_user_id
from ..enums.task_priority import TaskPriority
from ..enums.task_status import TaskStatus
from ..extensions import db
from ..models.employee import Employee
from ..models.project import Project
from ..models.task import Task
from ..schemas.task import (
    AssignTaskRequest,
    BulkDeleteRequest,
    BulkStatusRequest,
    TaskRequest,
    TaskResponse,
)
from ..utils.json_utils import to_json, to_json_list
from ..utils.request_utils import get_pagination, parse_body

bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")

DEFAULT_SORT = "-createdAt"

# Priority sorts by rank, not alphabetically
_PRIORITY_RANK = db.case(
    {TaskPriority.LOW.name: 0, TaskPriority.MEDIUM.name: 1, TaskPriority.HIGH.name: 2},
    value=db.cast(Task.priority, db.String),
    else_=1,
)

SORT_COLUMNS = {
    "createdAt": Task.created_at,
    "dueDate": Task.due_date,
    "priority": _PRIORITY_RANK,
    "title": Task.title,
}


def _order_by(sort: str):
    descending = sort.startswith("-")
    column = SORT_COLUMNS.get(sort.lstrip("-"))
    if column is None:
        return _order_by(DEFAULT_SORT)

    if descending:
        return [column.desc(), Task.id.desc()]
    return [column.asc(), Task.id.asc()]


def _search_filter(term: str):
    pattern = f"%{term.strip()}%"
    return db.or_(Task.title.ilike(pattern), Task.description.ilike(pattern))


def _enum_arg(enum_class, value):
    if not value:
        return None
    try:
        return enum_class(value)
    except ValueError:
        return None


def _not_found():
    return jsonify({"message": "Task not found"}), 404


@bp.post("/")
@auth_required
def create_task():
    data = parse_body(TaskRequest)
    if not data.title or not data.title.strip() or data.project_id is None:
        return jsonify({"message": "Title and project are required."}), 400

    if db.session.get(Project, data.project_id) is None:
        return jsonify({"message": "Project not found"}), 404

    if data.assigned_to is not None and db.session.get(Employee, data.assigned_to) is None:
        return jsonify({"message": "Employee not found."}), 404

    task = Task(**data.model_dump(exclude_none=True))
    task.title = task.title.strip()
    task.created_by = get_current_user_id()

    db.session.add(task)
    db.session.commit()

    return jsonify(to_json(TaskResponse.model_validate(task))), 201


@bp.get("/")
@auth_required
def list_tasks():
    """Filtered, sorted and paginated task listing."""
    query = Task.query

    status = _enum_arg(TaskStatus, request.args.get("status"))
    if status is not None:
        query = query.filter(Task.status == status)

    priority = _enum_arg(TaskPriority, request.args.get("priority"))
    if priority is not None:
        query = query.filter(Task.priority == priority)

    assigned_to = request.args.get("assignedTo", type=int)
    if assigned_to is not None:
        query = query.filter(Task.assigned_to == assigned_to)

    project_id = request.args.get("projectId", type=int)
    if project_id is not None:
        query = query.filter(Task.project_id == project_id)

    search = request.args.get("search", "")
    if search.strip():
        query = query.filter(_search_filter(search))

    page, limit, offset = get_pagination(request.args)
    total = query.count()
    tasks = query.order_by(*_order_by(request.args.get("sort", DEFAULT_SORT))).offset(offset).limit(limit).all()

    return jsonify(
        {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit) if total else 0,
            "tasks": to_json_list(TaskResponse, tasks),
        }
    )


@bp.get("/all")
@auth_required
def all_tasks():
    tasks = Task.query.order_by(*_order_by(DEFAULT_SORT)).all()
    return jsonify(to_json_list(TaskResponse, tasks))


@bp.get("/stats/overview")
@auth_required
def stats_overview():
    by_status = db.session.query(Task.status, db.func.count(Task.id)).group_by(Task.status).all()
    by_priority = db.session.query(Task.priority, db.func.count(Task.id)).group_by(Task.priority).all()

    return jsonify(
        {
            "byStatus": [{"status": status.value, "count": count} for status, count in by_status],
            "byPriority": [{"priority": priority.value, "count": count} for priority, count in by_priority],
        }
    )


@bp.get("/search/query")
@auth_required
def search_tasks():
    search = request.args.get("search", "")
    if not search.strip():
        return jsonify({"message": "Search term is required."}), 400

    tasks = Task.query.filter(_search_filter(search)).order_by(*_order_by(DEFAULT_SORT)).all()
    return jsonify(to_json_list(TaskResponse, tasks))


@bp.get("/overdue/list")
@auth_required
def overdue_tasks():
    tasks = Task.filter_overdue(datetime.now()).order_by(Task.due_date.asc(), Task.id.asc()).all()
    return jsonify(to_json_list(TaskResponse, tasks))


@bp.post("/bulk-delete")
@auth_required
def bulk_delete():
    data = parse_body(BulkDeleteRequest)

    tasks = Task.query.filter(Task.id.in_(data.ids)).all()
    for task in tasks:
        db.session.delete(task)
    db.session.commit()

    return jsonify({"message": "Tasks deleted", "deletedCount": len(tasks)})


@bp.post("/bulk-update-status")
@auth_required
def bulk_update_status():
    data = parse_body(BulkStatusRequest)

    tasks = Task.query.filter(Task.id.in_(data.ids)).all()
    for task in tasks:
        task.status = data.status
    db.session.commit()

    return jsonify({"message": "Tasks updated", "modifiedCount": len(tasks)})


@bp.get("/detail/<int:task_id>")
@auth_required
def get_task(task_id: int):
    task = db.session.get(Task, task_id)
    if task is None:
        return _not_found()

    return jsonify(to_json(TaskResponse.model_validate(task)))


@bp.get("/<int:project_id>")
@auth_required
def project_tasks(project_id: int):
    tasks = Task.query.filter(Task.project_id == project_id).order_by(*_order_by(DEFAULT_SORT)).all()
    return jsonify(to_json_list(TaskResponse, tasks))


@bp.put("/<int:task_id>")
@auth_required
def update_task(task_id: int):
    data = parse_body(TaskRequest)

    task = db.session.get(Task, task_id)
    if task is None:
        return _not_found()

    fields = data.model_dump(exclude_unset=True)
    # Only due date and assignee may be cleared
    fields = {key: value for key, value in fields.items() if value is not None or key in ("due_date", "assigned_to")}
    if "title" in fields and not fields["title"].strip():
        fields.pop("title")

    if "project_id" in fields and db.session.get(Project, fields["project_id"]) is None:
        return jsonify({"message": "Project not found"}), 404
    if fields.get("assigned_to") is not None and db.session.get(Employee, fields["assigned_to"]) is None:
        return jsonify({"message": "Employee not found."}), 404

    for key, value in fields.items():
        setattr(task, key, value)
    db.session.commit()

    return jsonify(to_json(TaskResponse.model_validate(task)))


@bp.delete("/<int:task_id>")
@auth_required
def delete_task(task_id: int):
    task = db.session.get(Task, task_id)
    if task is None:
        return _not_found()

    db.session.delete(task)
    db.session.commit()
    return jsonify({"message": "Task deleted"})


@bp.post("/<int:task_id>/assign")
@auth_required
def assign_task(task_id: int):
    data = parse_body(AssignTaskRequest)
    if data.employee_id is None:
        return jsonify({"message": "Employee ID is required."}), 400

    task = db.session.get(Task, task_id)
    if task is None:
        return _not_found()

    if db.session.get(Employee, data.employee_id) is None:
        return jsonify({"message": "Employee not found."}), 404

    task.assigned_to = data.employee_id
    db.session.commit()

    return jsonify(to_json(TaskResponse.model_validate(task)))
