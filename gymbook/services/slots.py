from datetime import datetime

from sqlalchemy.orm import Session

from gymbook.core.config import get_default_slot_capacity
from gymbook.database.store import SlotStore
from gymbook.models.slots import Slot
from gymbook.services.bookings import SlotNotFound


def get_slot(db: Session, slot_id: int) -> Slot | SlotNotFound:
    slot = SlotStore(db).get_slot(slot_id)
    if slot is None:
        return SlotNotFound(slot_id)
    return slot


def list_slots(db: Session) -> list[Slot]:
    return SlotStore(db).list_slots()


def create_slot(db: Session, *, time: datetime, duration: int, capacity: int | None = None) -> Slot:
    """Create a slot; capacity falls back to DEFAULT_SLOT_CAPACITY."""
    if capacity is None:
        capacity = get_default_slot_capacity()
    store = SlotStore(db)
    return store.run_atomic(lambda s: s.add_slot(time=time, duration=duration, capacity=capacity))
