from datetime import datetime
from typing import Optional

from ..enums.project_status import ProjectStatus
from .base import CamelModel, LocalDatetime, RecordResponse
from .employee import MemberBrief


class ProjectRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[LocalDatetime] = None
    end_date: Optional[LocalDatetime] = None
    members: Optional[list[int]] = None


class ProjectResponse(RecordResponse):
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    start_date: datetime
    end_date: Optional[datetime] = None
    members: list[MemberBrief] = []
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
