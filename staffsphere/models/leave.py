from ..enums.leave_status import LeaveStatus
from ..enums.leave_type import LeaveType
from ..extensions import db
from .mixins import AuditMixin, TimestampMixin


class Leave(db.Model, TimestampMixin, AuditMixin):
    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False, index=True)
    employee = db.relationship("Employee", back_populates="leaves")

    type = db.Column(db.Enum(LeaveType), nullable=False, default=LeaveType.CASUAL)
    from_date = db.Column(db.DateTime, nullable=False)
    to_date = db.Column(db.DateTime, nullable=False)
    reason = db.Column(db.Text, nullable=True)
    status = db.Column(db.Enum(LeaveStatus), nullable=False, default=LeaveStatus.PENDING)

    def __repr__(self):
        return f"<Leave {self.id} - Employee: {self.employee_id} - {self.status}>"

    def has_valid_range(self) -> bool:
        return self.to_date >= self.from_date
