from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from store_admin.models.base import Base, TimestampedRecord


class Store(TimestampedRecord, Base):
    __tablename__ = "stores"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
