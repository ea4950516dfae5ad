from flask import Blueprint, jsonify

from ..auth.decorators import role_required
from ..constants import TOP_EMPLOYEES_LIMIT
from ..enums.role import Role
from ..models.department import Department
from ..models.employee import Employee
from ..models.user import User
from ..schemas.employee import EmployeeResponse
from ..utils.json_utils import to_json_list

bp = Blueprint("manager", __name__, url_prefix="/api/manager")


@bp.get("/insights")
@role_required(Role.HR)
def insights():
    top_employees = (
        Employee.query.order_by(Employee.salary.desc(), Employee.id.asc()).limit(TOP_EMPLOYEES_LIMIT).all()
    )

    return jsonify(
        {
            "totalEmployees": Employee.query.count(),
            "totalDepartments": Department.query.count(),
            "totalManagers": User.query.filter(User.role == Role.HR).count(),
            "topEmployees": to_json_list(EmployeeResponse, top_employees),
        }
    )
