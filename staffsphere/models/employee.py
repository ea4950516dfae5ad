from datetime import datetime
from typing import Optional

from ..constants import DEFAULT_DEPARTMENT, DEFAULT_JOB_TITLE
from ..enums.employee_status import EmployeeStatus
from ..enums.gender import Gender
from ..extensions import db
from .mixins import AuditMixin, TimestampMixin


def normalize_department(label: Optional[str]) -> str:
    """Trim a department label. Blank labels become the default department."""
    label = (label or "").strip()
    return label or DEFAULT_DEPARTMENT


class Employee(db.Model, TimestampMixin, AuditMixin):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)

    # Free-text label, matched against Department.name by name only
    department = db.Column(db.String(120), nullable=False, default=DEFAULT_DEPARTMENT, index=True)
    job_title = db.Column(db.String(120), nullable=False, default=DEFAULT_JOB_TITLE)
    date_of_joining = db.Column(db.DateTime, nullable=False, default=datetime.now)
    status = db.Column(db.Enum(EmployeeStatus), nullable=False, default=EmployeeStatus.ACTIVE)
    phone = db.Column(db.String(40), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    salary = db.Column(db.Float, nullable=False, default=0)

    avatar_url = db.Column(db.String(512), nullable=True)
    dob = db.Column(db.Date, nullable=True)
    gender = db.Column(db.Enum(Gender), nullable=True)
    emergency_contact_name = db.Column(db.String(120), nullable=True)
    emergency_contact_relation = db.Column(db.String(64), nullable=True)
    emergency_contact_phone = db.Column(db.String(40), nullable=True)
    profile_summary = db.Column(db.Text, nullable=True)

    user_ref = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    attendance_records = db.relationship("Attendance", back_populates="employee", cascade="all, delete-orphan")
    leaves = db.relationship("Leave", back_populates="employee", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Employee {self.id} - {self.email}>"

    @property
    def emergency_contact(self) -> Optional[dict]:
        if not any((self.emergency_contact_name, self.emergency_contact_relation, self.emergency_contact_phone)):
            return None
        return {
            "name": self.emergency_contact_name,
            "relation": self.emergency_contact_relation,
            "phone": self.emergency_contact_phone,
        }

    @emergency_contact.setter
    def emergency_contact(self, contact: Optional[dict]):
        contact = contact or {}
        self.emergency_contact_name = contact.get("name")
        self.emergency_contact_relation = contact.get("relation")
        self.emergency_contact_phone = contact.get("phone")

    @staticmethod
    def email_taken(email: str, exclude_id: Optional[int] = None) -> bool:
        query = Employee.query.filter(Employee.email == email)
        if exclude_id is not None:
            query = query.filter(Employee.id != exclude_id)
        return db.session.query(query.exists()).scalar()

    @classmethod
    def for_user(cls, user_id) -> Optional["Employee"]:
        return cls.query.filter_by(user_ref=user_id).first()
