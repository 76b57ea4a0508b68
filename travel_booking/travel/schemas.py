from pydantic import BaseModel, Field
from typing import List, Optional, Literal

OfferSource = Literal["amadeus", "mock"]

class TravelModel(BaseModel):
    """Base for travel payloads, which use camelCase keys on the wire"""

    class Config:
        populate_by_name = True

# Search Requests
class FlightSearchRequest(TravelModel):
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    departure_date: str = Field(..., alias="departureDate")
    return_date: Optional[str] = Field(None, alias="returnDate")
    adults: Optional[int] = Field(None, ge=1, le=9)
    children: Optional[int] = Field(None, ge=0)
    class_type: Optional[str] = Field(None, alias="classType")

class HotelSearchRequest(TravelModel):
    city: str
    check_in: str = Field(..., alias="checkIn")
    check_out: str = Field(..., alias="checkOut")
    guests: Optional[int] = Field(None, ge=1)
    rooms: Optional[int] = Field(None, ge=1)

class CabSearchRequest(TravelModel):
    pickup: str
    dropoff: str
    pickup_time: str = Field(..., alias="pickupTime")

# Offers
class FlightOffer(TravelModel):
    """A bookable flight, normalized from the provider or generated as mock data"""
    flight_number: str = Field(..., alias="flightNumber")
    airline: Optional[str] = None
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    departure_time: Optional[str] = Field(None, alias="departureTime")
    arrival_time: Optional[str] = Field(None, alias="arrivalTime")
    price: float
    currency: str = "USD"
    source: OfferSource = "mock"

class HotelOffer(TravelModel):
    hotel_id: str = Field(..., alias="hotelId")
    name: Optional[str] = None
    city: str
    check_in: str = Field(..., alias="checkIn")
    check_out: str = Field(..., alias="checkOut")
    price_per_night: float = Field(..., alias="pricePerNight")
    currency: str = "USD"
    rating: Optional[float] = None
    amenities: Optional[List[str]] = None
    source: OfferSource = "mock"

class CabOffer(TravelModel):
    provider_id: str = Field(..., alias="providerId")
    provider: str
    vehicle_type: str = Field(..., alias="vehicleType")
    pickup: str
    dropoff: str
    pickup_time: str = Field(..., alias="pickupTime")
    estimated_duration: str = Field(..., alias="estimatedDuration")
    price: float
    currency: str = "USD"
    source: OfferSource = "mock"

# Booking Requests
class FlightBookingRequest(TravelModel):
    flight_number: str = Field(..., alias="flightNumber")
    origin: str = Field(..., alias="from")
    destination: str = Field(..., alias="to")
    departure_date: str = Field(..., alias="departureDate")

class HotelBookingRequest(TravelModel):
    hotel: str
    city: str
    check_in: str = Field(..., alias="checkIn")
    check_out: str = Field(..., alias="checkOut")

class CabBookingRequest(TravelModel):
    pickup: str
    dropoff: str
    pickup_time: str = Field(..., alias="pickupTime")
