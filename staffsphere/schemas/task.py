from datetime import datetime
from typing import Optional

from pydantic import Field

from ..enums.task_priority import TaskPriority
from ..enums.task_status import TaskStatus
from .base import CamelModel, LocalDatetime, RecordResponse
from .employee import MemberBrief


class TaskRequest(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[LocalDatetime] = None
    assigned_to: Optional[int] = None
    project_id: Optional[int] = None


class BulkDeleteRequest(CamelModel):
    ids: list[int] = Field(min_length=1)


class BulkStatusRequest(BulkDeleteRequest):
    status: TaskStatus


class AssignTaskRequest(CamelModel):
    employee_id: Optional[int] = None


class TaskResponse(RecordResponse):
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    assigned_to: Optional[int] = None
    assignee: Optional[MemberBrief] = None
    project_id: int
    created_by: Optional[int] = None
