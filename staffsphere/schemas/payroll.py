from typing import Optional

from pydantic import Field

from ..enums.payroll_status import PayrollStatus
from .base import CamelModel, RecordResponse


class PayrollRequest(CamelModel):
    employee_id: Optional[int] = None
    month: Optional[str] = Field(None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$")
    basic_pay: Optional[float] = Field(None, ge=0)
    deductions: Optional[float] = Field(None, ge=0)
    net_pay: Optional[float] = None
    status: Optional[PayrollStatus] = None


class PayrollResponse(RecordResponse):
    employee_id: Optional[int] = None
    employee_name: str
    month: str
    basic_pay: float
    deductions: float
    net_pay: float
    status: PayrollStatus
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
