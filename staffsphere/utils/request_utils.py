from typing import Optional, TypeVar

from flask import request
from pydantic import BaseModel

from ..constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..exceptions import ValidationException

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        raise ValidationException("Missing or invalid JSON body")
    return data


def parse_body(schema: type[SchemaT]) -> SchemaT:
    """Validate the JSON body against a schema. pydantic errors are turned into 400s by the app."""
    return schema.model_validate(get_json_body())


def _positive_int(value: Optional[str], default: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def get_pagination(args) -> tuple[int, int, int]:
    """Return (page, limit, offset) from query args, falling back to defaults on bad input."""
    page = _positive_int(args.get("page"), DEFAULT_PAGE)
    limit = _positive_int(args.get("limit"), DEFAULT_PAGE_SIZE)
    return page, limit, (page - 1) * limit
