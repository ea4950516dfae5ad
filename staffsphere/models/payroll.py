from typing import Optional

from ..enums.payroll_status import PayrollStatus
from ..extensions import db
from .mixins import AuditMixin, TimestampMixin


def compute_net_pay(basic_pay: float, deductions: float, net_pay: Optional[float] = None) -> float:
    if net_pay is not None:
        return net_pay
    return basic_pay - deductions


class Payroll(db.Model, TimestampMixin, AuditMixin):
    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employee.id", ondelete="SET NULL"), nullable=True, index=True)
    employee = db.relationship("Employee", backref="payrolls")

    # Copied at creation so the slip survives employee renames
    employee_name = db.Column(db.String(120), nullable=False)
    month = db.Column(db.String(7), nullable=False, index=True)  # YYYY-MM
    basic_pay = db.Column(db.Float, nullable=False)
    deductions = db.Column(db.Float, nullable=False, default=0)
    net_pay = db.Column(db.Float, nullable=False)
    status = db.Column(db.Enum(PayrollStatus), nullable=False, default=PayrollStatus.PENDING)

    def __repr__(self):
        return f"<Payroll {self.id} - {self.employee_name} {self.month} ({self.status})>"

    def approve(self):
        self.status = PayrollStatus.PROCESSED
        return self
