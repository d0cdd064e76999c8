from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from store_admin.models.base import Base, TimestampedRecord


class Size(TimestampedRecord, Base):
    __tablename__ = "sizes"

    store_id: Mapped[str] = mapped_column(ForeignKey("stores.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    value: Mapped[str] = mapped_column(String(5), nullable=False)
