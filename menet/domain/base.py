"""Shared pydantic base model for the camelCase wire format."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys.

    Python code uses the snake_case attribute names; ``model_dump(by_alias=True)``
    and ``model_dump_json(by_alias=True)`` produce the wire format. Infinite
    floats are written as the string ``"Infinity"``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        ser_json_inf_nan="strings",
    )
