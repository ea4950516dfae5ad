from datetime import datetime

from ..enums.task_priority import TaskPriority
from ..enums.task_status import TaskStatus
from ..extensions import db
from .mixins import TimestampMixin


class Task(db.Model, TimestampMixin):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.Enum(TaskStatus), nullable=False, default=TaskStatus.TO_DO, index=True)
    priority = db.Column(db.Enum(TaskPriority), nullable=False, default=TaskPriority.MEDIUM, index=True)
    due_date = db.Column(db.DateTime, nullable=True)

    assigned_to = db.Column(db.Integer, db.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True, index=True)
    assignee = db.relationship("Employee", backref="assigned_tasks")
    project_id = db.Column(db.Integer, db.ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True)
    project = db.relationship("Project", back_populates="tasks")
    created_by = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    def __repr__(self):
        return f"<Task {self.id} - {self.title} ({self.status})>"

    @classmethod
    def filter_overdue(cls, now: datetime):
        return cls.query.filter(cls.due_date.isnot(None), cls.due_date < now, cls.status != TaskStatus.DONE)
