from datetime import date, datetime
from typing import Optional

from ..enums.employee_status import EmployeeStatus
from ..enums.gender import Gender
from .base import CamelModel, CamelResponse, LocalDatetime, RecordResponse


class EmergencyContact(CamelResponse):
    name: Optional[str] = None
    relation: Optional[str] = None
    phone: Optional[str] = None


class SelfServiceUpdate(CamelModel):
    """Fields an employee may edit on their own record."""

    phone: Optional[str] = None
    address: Optional[str] = None
    avatar_url: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[Gender] = None
    emergency_contact: Optional[EmergencyContact] = None
    profile_summary: Optional[str] = None


class EmployeeRequest(SelfServiceUpdate):
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    job_title: Optional[str] = None
    date_of_joining: Optional[LocalDatetime] = None
    status: Optional[EmployeeStatus] = None
    salary: Optional[float] = None
    user_ref: Optional[int] = None


class EmployeeBrief(CamelResponse):
    id: int
    name: str
    department: str


class MemberBrief(CamelResponse):
    id: int
    name: str
    email: str


class EmployeeResponse(RecordResponse):
    name: str
    email: str
    department: str
    job_title: str
    date_of_joining: datetime
    status: EmployeeStatus
    phone: Optional[str] = None
    address: Optional[str] = None
    salary: float
    avatar_url: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[Gender] = None
    emergency_contact: Optional[EmergencyContact] = None
    profile_summary: Optional[str] = None
    user_ref: Optional[int] = None
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
