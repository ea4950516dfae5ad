from ..extensions import db
from .mixins import TimestampMixin


class Department(db.Model, TimestampMixin):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, unique=True)
    manager = db.Column(db.String(120), nullable=False, default="")

    # Cached count, recomputed by department_service.refresh_employee_counts
    employees_count = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Department {self.id} - {self.name}>"
