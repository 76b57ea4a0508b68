import logging
from typing import Any, Dict, List, Optional

from travel_booking.travel.provider import AmadeusClient
from travel_booking.travel.schemas import FlightOffer, HotelOffer, CabOffer
from travel_booking.travel.mock_data import mock_flights, mock_hotels, mock_cabs

logger = logging.getLogger(__name__)

# The by-city hotel list carries no rates
DEFAULT_HOTEL_RATE = 120.0

class TravelSearchService:
    """
    Flight, hotel and cab search backed by the travel data provider.

    Provider failures never reach the caller: a missing access token, an
    upstream error or a response with no usable entries all resolve to the
    mock offers for the same query.
    """

    def __init__(self, provider: AmadeusClient):
        self.provider = provider

    def search_flights(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        adults: int = 1
    ) -> List[FlightOffer]:
        try:
            access_token = self.provider.fetch_access_token()
            if not access_token:
                return mock_flights(origin, destination, departure_date)

            body = self.provider.get_flight_offers(
                access_token, origin, destination, departure_date, adults
            )
            offers = normalize_flight_offers(body)
            if not offers:
                logger.info("Provider returned no usable flight offers; using mock data")
                return mock_flights(origin, destination, departure_date)
            return offers
        except Exception as e:
            logger.warning("Flight search fell back to mock data: %s", e)
            return mock_flights(origin, destination, departure_date)

    def search_hotels(
        self,
        city: str,
        check_in: str,
        check_out: str,
        guests: int = 1
    ) -> List[HotelOffer]:
        try:
            access_token = self.provider.fetch_access_token()
            if not access_token:
                return mock_hotels(city, check_in, check_out)

            body = self.provider.get_hotels_by_city(access_token, city)
            offers = normalize_hotel_offers(body, city, check_in, check_out)
            if not offers:
                logger.info("Provider returned no usable hotels; using mock data")
                return mock_hotels(city, check_in, check_out)
            return offers
        except Exception as e:
            logger.warning("Hotel search fell back to mock data: %s", e)
            return mock_hotels(city, check_in, check_out)

    def search_cabs(self, pickup: str, dropoff: str, pickup_time: str) -> List[CabOffer]:
        # No cab provider is integrated
        return mock_cabs(pickup, dropoff, pickup_time)

def normalize_flight_offers(body: Dict[str, Any]) -> List[FlightOffer]:
    """Map an Amadeus flight-offers payload to FlightOffers, skipping unusable entries"""
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        return []

    offers = []
    for entry in data:
        try:
            offer = _normalize_flight(entry)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.debug("Skipping malformed flight offer: %s", e)
            continue
        if offer is not None:
            offers.append(offer)
    return offers

def _normalize_flight(entry: Any) -> Optional[FlightOffer]:
    if not isinstance(entry, dict):
        return None

    price = entry.get("price")
    if not isinstance(price, dict):
        return None
    try:
        amount = float(price.get("grandTotal") or price.get("total"))
    except (TypeError, ValueError):
        return None

    itineraries = entry.get("itineraries")
    if not isinstance(itineraries, list) or not itineraries or not isinstance(itineraries[0], dict):
        return None
    segments = itineraries[0].get("segments")
    if not isinstance(segments, list) or not segments:
        return None

    first, last = segments[0], segments[-1]
    if not isinstance(first, dict) or not isinstance(last, dict):
        return None
    departure = first.get("departure")
    arrival = last.get("arrival")
    if not isinstance(departure, dict) or not isinstance(arrival, dict):
        return None
    if not departure.get("iataCode") or not arrival.get("iataCode"):
        return None

    carrier = first.get("carrierCode")
    if carrier and first.get("number"):
        flight_number = f"{carrier}{first['number']}"
    else:
        flight_number = str(entry.get("id", ""))

    validating = entry.get("validatingAirlineCodes")
    if not isinstance(validating, list):
        validating = []

    return FlightOffer(
        flight_number=flight_number,
        airline=validating[0] if validating else carrier,
        origin=departure["iataCode"],
        destination=arrival["iataCode"],
        departure_time=departure.get("at"),
        arrival_time=arrival.get("at"),
        price=amount,
        currency=price.get("currency") or "USD",
        source="amadeus",
    )

def normalize_hotel_offers(
    body: Dict[str, Any],
    city: str,
    check_in: str,
    check_out: str
) -> List[HotelOffer]:
    """Map an Amadeus hotels-by-city payload to HotelOffers for the given stay"""
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        return []

    offers = []
    for entry in data:
        if not isinstance(entry, dict) or not entry.get("hotelId"):
            continue
        try:
            offers.append(HotelOffer(
                hotel_id=str(entry["hotelId"]),
                name=entry.get("name"),
                city=entry.get("iataCode") or city,
                check_in=check_in,
                check_out=check_out,
                price_per_night=DEFAULT_HOTEL_RATE,
                currency="USD",
                source="amadeus",
            ))
        except ValueError as e:
            logger.debug("Skipping malformed hotel entry: %s", e)
    return offers
