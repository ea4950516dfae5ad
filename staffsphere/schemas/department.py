from typing import Optional

from .base import CamelModel, RecordResponse


class DepartmentRequest(CamelModel):
    name: Optional[str] = None
    manager: Optional[str] = None


class DepartmentResponse(RecordResponse):
    name: str
    manager: str
    employees_count: int
