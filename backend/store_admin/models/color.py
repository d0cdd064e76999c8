from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from store_admin.models.base import Base, TimestampedRecord


class Color(TimestampedRecord, Base):
    __tablename__ = "colors"

    store_id: Mapped[str] = mapped_column(ForeignKey("stores.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    value: Mapped[str] = mapped_column(String(7), nullable=False)  # #RGB or #RRGGBB
