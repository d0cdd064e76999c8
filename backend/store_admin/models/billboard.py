from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from store_admin.models.base import Base, TimestampedRecord


class Billboard(TimestampedRecord, Base):
    __tablename__ = "billboards"

    store_id: Mapped[str] = mapped_column(ForeignKey("stores.id"), nullable=False, index=True)
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
