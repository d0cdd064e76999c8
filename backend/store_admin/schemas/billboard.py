from pydantic import Field

from store_admin.schemas.base import CamelModel, RecordOut


class BillboardIn(CamelModel):
    label: str = Field(..., min_length=1, max_length=100)
    image_url: str = Field(..., min_length=1, max_length=1024)


class BillboardOut(RecordOut):
    store_id: str
    label: str
    image_url: str
