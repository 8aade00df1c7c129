import logging
from dataclasses import dataclass
from typing import Union

from sqlalchemy.orm import Session

from gymbook.database.store import SlotStore
from gymbook.models.bookings import Booking

logger = logging.getLogger(__name__)

SLOT_FULL = "Slot is full."
ALREADY_BOOKED = "You have already booked this slot."


@dataclass(frozen=True)
class SlotNotFound:
    slot_id: int


@dataclass(frozen=True)
class BookingRejected:
    """A booking refused by a business rule; ``reason`` is shown to the user as is."""

    reason: str


BookingOutcome = Union[Booking, SlotNotFound, BookingRejected]


def book_slot(db: Session, *, slot_id: int, user_id: int) -> BookingOutcome:
    """
    Book one seat of a slot for a user.

    The slot is read, checked and written inside a single transaction:
    on success a Booking row is inserted and the slot's capacity drops by
    exactly one; any other outcome leaves both tables untouched.
    """
    store = SlotStore(db)
    outcome = store.run_atomic(
        lambda s: _book_slot_in_transaction(s, slot_id=slot_id, user_id=user_id)
    )

    if isinstance(outcome, SlotNotFound):
        logger.warning("Booking failed: slot %s not found", slot_id)
    elif isinstance(outcome, BookingRejected):
        logger.info("Booking rejected for user %s on slot %s: %s", user_id, slot_id, outcome.reason)
    else:
        logger.info("User %s booked slot %s (booking %s)", user_id, slot_id, outcome.id)
    return outcome


def _book_slot_in_transaction(store: SlotStore, *, slot_id: int, user_id: int) -> BookingOutcome:
    """Internal function to book a slot within a transaction."""
    slot = store.get_slot_with_bookings(slot_id)
    if slot is None:
        return SlotNotFound(slot_id)

    # Capacity is checked before duplicates: a full slot the user already
    # holds reports "Slot is full."
    if slot.capacity <= 0:
        return BookingRejected(SLOT_FULL)

    if any(b.user_id == user_id for b in slot.bookings):
        return BookingRejected(ALREADY_BOOKED)

    # The guarded decrement only fails when a concurrent booking took the
    # last seat after the snapshot was read
    if not store.decrement_slot_capacity(slot_id):
        return BookingRejected(SLOT_FULL)

    return store.insert_booking(Booking(slot_id=slot_id, user_id=user_id))


def list_bookings(db: Session) -> list[Booking]:
    """Return every booking with its slot loaded."""
    return SlotStore(db).list_bookings()
