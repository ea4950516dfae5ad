from datetime import datetime
from typing import Optional

from ..enums.attendance_status import AttendanceStatus
from ..extensions import db
from .mixins import TimestampMixin


class Attendance(db.Model, TimestampMixin):
    """One attendance mark. ``day`` is the calendar day of ``date`` and is unique per employee."""

    __table_args__ = (db.UniqueConstraint("employee_id", "day", name="uq_attendance_employee_day"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False, index=True)
    employee = db.relationship("Employee", back_populates="attendance_records")

    # Server-local timestamp of the mark
    date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    day = db.Column(db.Date, nullable=False)
    status = db.Column(db.Enum(AttendanceStatus), nullable=False, default=AttendanceStatus.PRESENT)

    def __repr__(self):
        return f"<Attendance {self.id} - Employee: {self.employee_id} - {self.day} {self.status}>"

    @staticmethod
    def new(employee_id: int, status: AttendanceStatus, when: Optional[datetime] = None):
        if when is None:
            when = datetime.now()
        return Attendance(employee_id=employee_id, status=status, date=when, day=when.date())

    @classmethod
    def filter_by_employee_between(cls, employee_id: int, start: datetime, end: datetime):
        return cls.query.filter(cls.employee_id == employee_id, cls.date >= start, cls.date <= end)

    @classmethod
    def newest_first(cls):
        return cls.query.order_by(cls.date.desc(), cls.id.desc())
