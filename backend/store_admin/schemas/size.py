from pydantic import Field, field_validator

from store_admin.core.validation import LETTERS_AND_DIGITS
from store_admin.schemas.base import CamelModel, RecordOut, reject_padding


class SizeIn(CamelModel):
    name: str = Field(..., min_length=3, max_length=30, pattern=LETTERS_AND_DIGITS)
    value: str = Field(..., min_length=1, max_length=5, pattern=LETTERS_AND_DIGITS)

    @field_validator("name", "value")
    @classmethod
    def _trimmed(cls, value: str) -> str:
        return reject_padding(value)


class SizeOut(RecordOut):
    store_id: str
    name: str
    value: str
