"""
Table-backed store for slots and bookings.

All reads and writes used by the booking flow go through ``SlotStore`` so
the fetch-check-write sequence can be wrapped in a single transaction with
``run_atomic``.
"""
from datetime import datetime
from typing import Callable, TypeVar

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from gymbook.models.bookings import Booking
from gymbook.models.slots import Slot

T = TypeVar("T")


class SlotStore:
    def __init__(self, db: Session):
        self.db = db

    def run_atomic(self, fn: Callable[["SlotStore"], T]) -> T:
        """
        Run ``fn`` inside one transaction.

        Any exception raised by ``fn`` rolls back every write it made. When
        the session already has a transaction open, ``fn`` runs under a
        savepoint so only its own writes are discarded.
        """
        if self.db.in_transaction():
            with self.db.begin_nested():
                return fn(self)
        with self.db.begin():
            return fn(self)

    def get_slot(self, slot_id: int) -> Slot | None:
        return self.db.get(Slot, slot_id)

    def get_slot_with_bookings(self, slot_id: int) -> Slot | None:
        """Fetch a slot and its bookings, locking the slot row where supported."""
        stmt = (
            select(Slot)
            .where(Slot.id == slot_id)
            .options(selectinload(Slot.bookings))
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self.db.scalars(stmt).first()

    def insert_booking(self, booking: Booking) -> Booking:
        self.db.add(booking)
        self.db.flush()  # gets booking.id
        self.db.refresh(booking)
        return booking

    def decrement_slot_capacity(self, slot_id: int) -> bool:
        """
        Take one seat from a slot, provided it still has one.

        Returns False when the stored capacity is already zero.
        """
        stmt = (
            update(Slot)
            .where(Slot.id == slot_id)
            .where(Slot.capacity > 0)
            .values(capacity=Slot.capacity - 1)
        )
        res = self.db.execute(stmt)
        return res.rowcount == 1  # type: ignore

    def add_slot(self, *, time: datetime, duration: int, capacity: int) -> Slot:
        slot = Slot(time=time, duration=duration, capacity=capacity)
        self.db.add(slot)
        self.db.flush()
        self.db.refresh(slot)
        return slot

    def list_slots(self) -> list[Slot]:
        return list(self.db.scalars(select(Slot)))

    def list_bookings(self) -> list[Booking]:
        stmt = select(Booking).options(selectinload(Booking.slot))
        return list(self.db.scalars(stmt))
