from typing import Iterable

from pydantic import BaseModel


def to_json(model: BaseModel) -> dict:
    """Dump a response schema with its camelCase wire names."""
    return model.model_dump(mode="json", by_alias=True)


def to_json_list(schema: type[BaseModel], objects: Iterable) -> list[dict]:
    return [to_json(schema.model_validate(obj)) for obj in objects]
