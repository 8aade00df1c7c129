from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gymbook.database.db import Base


class Slot(Base):
    __tablename__ = "slots"
    __table_args__ = (
        CheckConstraint("capacity >= 0", name="ck_slots_capacity_non_negative"),
        CheckConstraint("duration >= 0", name="ck_slots_duration_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # minutes
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # remaining seats

    bookings: Mapped[list["Booking"]] = relationship(
        back_populates="slot",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
