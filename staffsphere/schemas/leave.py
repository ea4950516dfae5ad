from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from ..enums.leave_status import LeaveStatus
from ..enums.leave_type import LeaveType
from .base import CamelModel, LocalDatetime, RecordResponse
from .employee import EmployeeBrief


class LeaveRequest(CamelModel):
    employee_id: Optional[int] = Field(None, validation_alias=AliasChoices("employee", "employeeId", "employee_id"))
    type: Optional[LeaveType] = None
    from_date: Optional[LocalDatetime] = Field(None, validation_alias=AliasChoices("from", "fromDate", "from_date"))
    to_date: Optional[LocalDatetime] = Field(None, validation_alias=AliasChoices("to", "toDate", "to_date"))
    reason: Optional[str] = None
    status: Optional[LeaveStatus] = None


class LeaveResponse(RecordResponse):
    employee_id: int
    employee: Optional[EmployeeBrief] = None
    type: LeaveType
    from_date: datetime = Field(serialization_alias="from")
    to_date: datetime = Field(serialization_alias="to")
    reason: Optional[str] = None
    status: LeaveStatus
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
