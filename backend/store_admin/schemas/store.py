from pydantic import Field, field_validator

from store_admin.schemas.base import CamelModel, RecordOut, reject_padding


class StoreIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def _trimmed_name(cls, value: str) -> str:
        return reject_padding(value)


class StoreOut(RecordOut):
    name: str
    user_id: str
