from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gymbook.database.db import get_db
from gymbook.schemas.slots import SlotCreate, SlotOut
from gymbook.services.slots import create_slot, list_slots

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("", response_model=list[SlotOut])
def slots_index(db: Session = Depends(get_db)):
    return list_slots(db)


@router.post("", response_model=SlotOut, status_code=201)
def add_slot(payload: SlotCreate, db: Session = Depends(get_db)):
    return create_slot(db, time=payload.time, duration=payload.duration, capacity=payload.capacity)
