from datetime import datetime

from ..constants import DEFAULT_REVIEW_RATING, DEFAULT_REVIEWER
from ..enums.cycle_status import CycleStatus
from ..enums.goal_status import GoalStatus
from ..extensions import db
from .mixins import TimestampMixin


class PerformanceCycle(db.Model, TimestampMixin):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    start_date = db.Column(db.DateTime, nullable=False)
    end_date = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.Enum(CycleStatus), nullable=False, default=CycleStatus.ACTIVE)

    def __repr__(self):
        return f"<PerformanceCycle {self.id} - {self.name}>"


class PerformanceGoal(db.Model, TimestampMixin):
    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True, index=True)
    employee = db.relationship("Employee", backref="performance_goals")
    title = db.Column(db.String(200), nullable=False, default="Untitled Goal")
    description = db.Column(db.Text, nullable=False, default="No description provided")
    target_date = db.Column(db.DateTime, nullable=False, default=datetime.now)
    status = db.Column(db.Enum(GoalStatus), nullable=False, default=GoalStatus.PENDING)

    def __repr__(self):
        return f"<PerformanceGoal {self.id} - {self.title} ({self.status})>"


class PerformanceReview(db.Model, TimestampMixin):
    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True, index=True)
    employee = db.relationship("Employee", backref="performance_reviews")
    reviewer = db.Column(db.String(120), nullable=False, default=DEFAULT_REVIEWER)
    rating = db.Column(db.Integer, nullable=False, default=DEFAULT_REVIEW_RATING)
    comments = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.String(32), nullable=False, default="draft")
    acknowledged = db.Column(db.Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<PerformanceReview {self.id} - Employee: {self.employee_id} rating {self.rating}>"

    def acknowledge(self):
        self.acknowledged = True
        return self
