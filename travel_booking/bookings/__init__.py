"""
Booking Module

Stores the reservations a user makes and lists them back. Bookings are
created either directly or by the flight/hotel/cab booking endpoints in
the travel module, which render the reservation into free-text details.

Key Components:
- service.py: BookingService persisting and listing bookings per user
- router.py: FastAPI endpoints for the current user's bookings
- schemas.py: Pydantic models for booking requests and responses
"""

from .router import router
from .service import BookingService
from .schemas import BookingType, BookingCreate, BookingOut

__all__ = [
    "router",
    "BookingService",
    "BookingType",
    "BookingCreate",
    "BookingOut"
]
