from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from store_admin.models.base import Base, TimestampedRecord


class Category(TimestampedRecord, Base):
    __tablename__ = "categories"

    store_id: Mapped[str] = mapped_column(ForeignKey("stores.id"), nullable=False, index=True)
    billboard_id: Mapped[str] = mapped_column(
        ForeignKey("billboards.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
