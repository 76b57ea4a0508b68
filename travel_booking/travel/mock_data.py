"""
Fixed offers returned when the travel data provider is unavailable.

Every function is pure: the same query always yields equal offers, echoing
the query fields into each record.
"""

from typing import List

from travel_booking.travel.schemas import FlightOffer, HotelOffer, CabOffer

DEFAULT_ORIGIN = "JFK"
DEFAULT_DESTINATION = "LAX"
DEFAULT_CITY = "New York"

# (flight number, airline, departs, arrives, price)
MOCK_FLIGHTS = [
    ("AA101", "American Airlines", "08:00:00", "11:30:00", 299.99),
    ("DL202", "Delta Airlines", "14:00:00", "17:30:00", 349.50),
    ("UA303", "United Airlines", "19:00:00", "22:30:00", 279.99),
]

# (hotel id, name, price per night, rating, amenities)
MOCK_HOTELS = [
    ("HOTEL001", "Grand Plaza Hotel", 199.99, 4.5, ["WiFi", "Pool", "Gym", "Restaurant"]),
    ("HOTEL002", "Business Center Hotel", 149.99, 4.2, ["WiFi", "Business Center", "Restaurant"]),
    ("HOTEL003", "Budget Inn", 89.99, 3.8, ["WiFi", "Parking"]),
]

# (provider id, provider, vehicle type, estimated duration, price)
MOCK_CABS = [
    ("UBER001", "Uber", "Standard", "25 minutes", 18.50),
    ("LYFT001", "Lyft", "Standard", "28 minutes", 16.75),
    ("TAXI001", "Local Taxi", "Taxi", "30 minutes", 22.00),
]

def mock_flights(origin: str, destination: str, departure_date: str) -> List[FlightOffer]:
    origin = origin or DEFAULT_ORIGIN
    destination = destination or DEFAULT_DESTINATION
    departure_date = departure_date or ""

    return [
        FlightOffer(
            flight_number=flight_number,
            airline=airline,
            origin=origin,
            destination=destination,
            departure_time=f"{departure_date}T{departs}",
            arrival_time=f"{departure_date}T{arrives}",
            price=price,
            currency="USD",
            source="mock",
        )
        for flight_number, airline, departs, arrives, price in MOCK_FLIGHTS
    ]

def mock_hotels(city: str, check_in: str, check_out: str) -> List[HotelOffer]:
    city = city or DEFAULT_CITY

    return [
        HotelOffer(
            hotel_id=hotel_id,
            name=name,
            city=city,
            check_in=check_in,
            check_out=check_out,
            price_per_night=price,
            currency="USD",
            rating=rating,
            amenities=list(amenities),
            source="mock",
        )
        for hotel_id, name, price, rating, amenities in MOCK_HOTELS
    ]

def mock_cabs(pickup: str, dropoff: str, pickup_time: str) -> List[CabOffer]:
    return [
        CabOffer(
            provider_id=provider_id,
            provider=provider,
            vehicle_type=vehicle_type,
            pickup=pickup,
            dropoff=dropoff,
            pickup_time=pickup_time,
            estimated_duration=duration,
            price=price,
            currency="USD",
            source="mock",
        )
        for provider_id, provider, vehicle_type, duration, price in MOCK_CABS
    ]
