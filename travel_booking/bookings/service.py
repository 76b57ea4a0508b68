import logging
from typing import List
from sqlalchemy.orm import Session

from travel_booking.models import Booking
from travel_booking.bookings.schemas import BookingType

logger = logging.getLogger(__name__)

class BookingService:
    """Service for storing and listing a user's bookings"""

    def __init__(self, db: Session):
        self.db = db

    def create_booking(self, user_id: int, booking_type: BookingType, details: str) -> Booking:
        """Persist a new booking owned by ``user_id``"""
        booking = Booking(
            type=BookingType(booking_type).value,
            details=details,
            user_id=user_id
        )
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info("Created %s booking id=%s for user id=%s", booking.type, booking.id, user_id)
        return booking

    def get_bookings_for_user(self, user_id: int) -> List[Booking]:
        """All bookings owned by ``user_id``, oldest first"""
        return (
            self.db.query(Booking)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.id)
            .all()
        )
