from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from typing import List

from travel_booking.database import get_db
from travel_booking.models import User
from travel_booking.auth.dependencies import get_current_user
from travel_booking.bookings.schemas import BookingOut, BookingType
from travel_booking.bookings.service import BookingService
from travel_booking.travel.schemas import (
    FlightSearchRequest, HotelSearchRequest, CabSearchRequest,
    FlightOffer, HotelOffer, CabOffer,
    FlightBookingRequest, HotelBookingRequest, CabBookingRequest
)
from travel_booking.travel.service import TravelSearchService

router = APIRouter()

def get_travel_service(request: Request) -> TravelSearchService:
    return request.app.state.travel_service

# Flights
@router.post("/flights/search", response_model=List[FlightOffer])
def search_flights(
    request: FlightSearchRequest,
    travel_service: TravelSearchService = Depends(get_travel_service)
):
    """Search flight offers"""
    try:
        return travel_service.search_flights(
            request.origin,
            request.destination,
            request.departure_date,
            request.adults or 1
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to search flights: {str(e)}"
        )

@router.post("/flights/book", response_model=BookingOut)
def book_flight(
    request: FlightBookingRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Book a flight for the current user"""
    details = (
        f"Flight {request.flight_number} from {request.origin} "
        f"to {request.destination} on {request.departure_date}"
    )
    return BookingService(db).create_booking(current_user.id, BookingType.FLIGHT, details)

# Hotels
@router.post("/hotels/search", response_model=List[HotelOffer])
def search_hotels(
    request: HotelSearchRequest,
    travel_service: TravelSearchService = Depends(get_travel_service)
):
    """Search hotels in a city"""
    try:
        return travel_service.search_hotels(
            request.city,
            request.check_in,
            request.check_out,
            request.guests or 1
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to search hotels: {str(e)}"
        )

@router.post("/hotels/book", response_model=BookingOut)
def book_hotel(
    request: HotelBookingRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Book a hotel stay for the current user"""
    details = (
        f"Hotel {request.hotel} in {request.city} "
        f"from {request.check_in} to {request.check_out}"
    )
    return BookingService(db).create_booking(current_user.id, BookingType.HOTEL, details)

# Cabs
@router.post("/cabs/search", response_model=List[CabOffer])
def search_cabs(
    request: CabSearchRequest,
    travel_service: TravelSearchService = Depends(get_travel_service)
):
    """Search cab rides"""
    try:
        return travel_service.search_cabs(request.pickup, request.dropoff, request.pickup_time)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to search cabs: {str(e)}"
        )

@router.post("/cabs/book", response_model=BookingOut)
def book_cab(
    request: CabBookingRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Book a cab ride for the current user"""
    details = f"Cab from {request.pickup} to {request.dropoff} at {request.pickup_time}"
    return BookingService(db).create_booking(current_user.id, BookingType.CAB, details)
