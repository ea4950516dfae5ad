from datetime import date, datetime
from typing import Any, Optional

from ..enums.attendance_status import AttendanceStatus
from .base import CamelModel, RecordResponse
from .employee import EmployeeBrief


class MarkAttendanceRequest(CamelModel):
    employee_id: Optional[int] = None
    # Any JSON value is accepted, anything that is not a known status is recorded as PRESENT
    status: Optional[Any] = None


class AttendanceResponse(RecordResponse):
    employee_id: int
    day: date
    date: datetime
    status: AttendanceStatus
    employee: Optional[EmployeeBrief] = None
