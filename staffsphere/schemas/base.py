from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel

from ..utils.date_utils import to_naive_local

# Timestamps are stored naive in server-local time
LocalDatetime = Annotated[datetime, AfterValidator(to_naive_local)]


class CamelModel(BaseModel):
    """Request body: camelCase on the wire, snake_case in Python. Unknown keys are ignored."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class CamelResponse(CamelModel):
    model_config = {"from_attributes": True}


class RecordResponse(CamelResponse):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
