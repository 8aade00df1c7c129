from datetime import datetime

from pydantic import BaseModel, Field


class SlotCreate(BaseModel):
    time: datetime
    duration: int = Field(ge=0)
    capacity: int | None = Field(default=None, ge=0)


class SlotOut(BaseModel):
    id: int
    time: datetime
    duration: int
    capacity: int

    class Config:
        from_attributes = True
