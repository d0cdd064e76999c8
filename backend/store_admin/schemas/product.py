from decimal import Decimal
from typing import List

from pydantic import Field, field_validator

from store_admin.schemas.base import CamelModel, RecordOut, reject_padding


class ImageIn(CamelModel):
    url: str = Field(..., min_length=1, max_length=1024)


class ImageOut(RecordOut):
    url: str
    position: int


class ProductIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    # Matches the Numeric(10, 2) column; finer prices would be rounded on save.
    price: Decimal = Field(..., gt=Decimal("0"), max_digits=10, decimal_places=2)
    category_id: str = Field(..., min_length=1)
    size_id: str = Field(..., min_length=1)
    color_id: str = Field(..., min_length=1)
    images: List[ImageIn] = Field(..., min_length=1)
    is_featured: bool = False
    is_archived: bool = False

    @field_validator("name")
    @classmethod
    def _trimmed_name(cls, value: str) -> str:
        return reject_padding(value)


class ProductOut(RecordOut):
    store_id: str
    category_id: str
    size_id: str
    color_id: str
    name: str
    price: float
    is_featured: bool
    is_archived: bool
    images: List[ImageOut]
