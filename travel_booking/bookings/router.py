from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from travel_booking.database import get_db
from travel_booking.models import User
from travel_booking.auth.dependencies import get_current_user
from travel_booking.bookings.schemas import BookingCreate, BookingOut
from travel_booking.bookings.service import BookingService

router = APIRouter()

@router.get("", response_model=List[BookingOut])
def get_bookings(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List bookings of the current user"""
    return BookingService(db).get_bookings_for_user(current_user.id)

@router.post("", response_model=BookingOut)
def create_booking(
    request: BookingCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a booking for the current user"""
    return BookingService(db).create_booking(
        user_id=current_user.id,
        booking_type=request.type,
        details=request.details
    )
