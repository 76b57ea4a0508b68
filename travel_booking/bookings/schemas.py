from pydantic import BaseModel, Field
from enum import Enum

class BookingType(str, Enum):
    """Kinds of reservation a booking can describe"""
    FLIGHT = "Flight"
    HOTEL = "Hotel"
    CAB = "Cab"

class BookingCreate(BaseModel):
    type: BookingType
    details: str = Field(..., min_length=1)

class BookingOut(BaseModel):
    id: int
    type: BookingType
    details: str
    user_id: int

    class Config:
        from_attributes = True
