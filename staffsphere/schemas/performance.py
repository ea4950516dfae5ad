from datetime import datetime
from typing import Optional

from pydantic import Field

from ..constants import MAX_REVIEW_RATING, MIN_REVIEW_RATING
from ..enums.cycle_status import CycleStatus
from ..enums.goal_status import GoalStatus
from .base import CamelModel, LocalDatetime, RecordResponse


class CycleRequest(CamelModel):
    name: str = Field(min_length=1)
    start_date: LocalDatetime
    end_date: LocalDatetime
    status: Optional[CycleStatus] = None


class CycleResponse(RecordResponse):
    name: str
    start_date: datetime
    end_date: datetime
    status: CycleStatus


class GoalRequest(CamelModel):
    employee_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    target_date: Optional[LocalDatetime] = None
    status: Optional[GoalStatus] = None


class GoalResponse(RecordResponse):
    employee_id: Optional[int] = None
    title: str
    description: str
    target_date: datetime
    status: GoalStatus


class ReviewRequest(CamelModel):
    employee_id: Optional[int] = None
    reviewer: Optional[str] = None
    rating: Optional[int] = Field(None, ge=MIN_REVIEW_RATING, le=MAX_REVIEW_RATING)
    comments: Optional[str] = None
    status: Optional[str] = None


class ReviewStatusRequest(CamelModel):
    status: str = Field(min_length=1)


class ReviewResponse(RecordResponse):
    employee_id: Optional[int] = None
    reviewer: str
    rating: int
    comments: str
    status: str
    acknowledged: bool
