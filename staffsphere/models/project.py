from datetime import datetime

from ..enums.project_status import ProjectStatus
from ..extensions import db
from .mixins import AuditMixin, TimestampMixin

project_members = db.Table(
    "project_members",
    db.Column("project_id", db.Integer, db.ForeignKey("project.id", ondelete="CASCADE"), primary_key=True),
    db.Column("employee_id", db.Integer, db.ForeignKey("employee.id", ondelete="CASCADE"), primary_key=True),
)


class Project(db.Model, TimestampMixin, AuditMixin):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    status = db.Column(db.Enum(ProjectStatus), nullable=False, default=ProjectStatus.PENDING, index=True)
    start_date = db.Column(db.DateTime, nullable=False, default=datetime.now)
    end_date = db.Column(db.DateTime, nullable=True)

    members = db.relationship("Employee", secondary=project_members, backref="projects", order_by="Employee.id")
    tasks = db.relationship("Task", back_populates="project", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Project {self.id} - {self.name} ({self.status})>"
