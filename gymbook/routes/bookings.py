from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from gymbook.database.db import get_db
from gymbook.schemas.bookings import BookingOut, BookRequest
from gymbook.schemas.slots import SlotOut
from gymbook.services.bookings import BookingRejected, SlotNotFound, book_slot, list_bookings
from gymbook.services.slots import get_slot

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=list[BookingOut])
def bookings_index(db: Session = Depends(get_db)):
    return list_bookings(db)


@router.get("/book/{slot_id}", response_model=SlotOut)
def booking_form(slot_id: int, db: Session = Depends(get_db)):
    """Slot details shown for confirmation before booking."""
    slot = get_slot(db, slot_id)
    if isinstance(slot, SlotNotFound):
        raise HTTPException(status_code=404, detail="Slot not found")
    return slot


@router.post("/book")
def book(payload: BookRequest, db: Session = Depends(get_db)):
    outcome = book_slot(db, slot_id=payload.slot_id, user_id=payload.user_id)
    if isinstance(outcome, SlotNotFound):
        raise HTTPException(status_code=404, detail="Slot not found")
    if isinstance(outcome, BookingRejected):
        raise HTTPException(status_code=409, detail=outcome.reason)

    return RedirectResponse(
        url=router.url_path_for("bookings_index"),
        status_code=status.HTTP_303_SEE_OTHER,
    )
