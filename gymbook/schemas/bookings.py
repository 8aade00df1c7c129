from pydantic import BaseModel, Field

from gymbook.schemas.slots import SlotOut


class BookRequest(BaseModel):
    slot_id: int = Field(ge=1)
    user_id: int = Field(ge=1)


class BookingOut(BaseModel):
    id: int
    slot_id: int
    user_id: int
    slot: SlotOut

    class Config:
        from_attributes = True
