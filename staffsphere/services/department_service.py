"""
Department aggregates. Employees reference their department by label, so
counts are keyed on the department name.
"""

from flask import current_app

from ..extensions import db
from ..models.department import Department
from ..models.employee import Employee


def _counts_by_label() -> dict[str, int]:
    rows = db.session.query(Employee.department, db.func.count(Employee.id)).group_by(Employee.department).all()
    return {label: count for label, count in rows}


def refresh_employee_counts() -> int:
    """Store the live employee count on every department. Returns the number of departments updated."""
    counts = _counts_by_label()
    departments = Department.query.all()
    for department in departments:
        department.employees_count = counts.get(department.name, 0)

    db.session.commit()
    current_app.logger.info(f"Refreshed employee counts for {len(departments)} departments")
    return len(departments)


def department_stats() -> list[dict]:
    counts = _counts_by_label()
    return [
        {
            "id": department.id,
            "name": department.name,
            "manager": department.manager,
            "employeesCount": counts.get(department.name, 0),
        }
        for department in Department.query.order_by(Department.name).all()
    ]
