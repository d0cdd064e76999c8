from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    """Speaks camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordOut(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime


def reject_padding(value: str) -> str:
    if value != value.strip():
        raise PydanticCustomError("untrimmed", "Value cannot start or end with whitespace")
    return value
