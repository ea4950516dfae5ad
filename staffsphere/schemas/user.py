from datetime import date
from typing import Optional

from ..enums.role import Role
from .base import CamelModel, CamelResponse, RecordResponse


class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RoleUpdateRequest(CamelModel):
    role: Optional[str] = None


class UserBrief(CamelResponse):
    id: int
    name: str
    email: str
    role: Role


class UserResponse(RecordResponse):
    name: str
    email: str
    role: Role
    department: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    profile_image: Optional[str] = None
    language: Optional[str] = None
    theme: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[str] = None


class EmployeeProfileUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class ProfileUpdate(EmployeeProfileUpdate):
    profile_image: Optional[str] = None
    language: Optional[str] = None
    theme: Optional[str] = None
    dob: Optional[date] = None
    gender: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
