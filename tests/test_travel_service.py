"""
Tests for provider-backed search and its fallback to mock data.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from travel_booking.travel.mock_data import mock_flights, mock_hotels, mock_cabs
from travel_booking.travel.provider import AmadeusClient, ProviderError
from travel_booking.travel.service import (
    TravelSearchService, normalize_flight_offers, normalize_hotel_offers
)

TOKEN_PATH = "/v1/security/oauth2/token"
FLIGHTS_PATH = "/v2/shopping/flight-offers"
HOTELS_PATH = "/v1/reference-data/locations/hotels/by-city"

FLIGHT_OFFERS = {
    "data": [
        {
            "id": "1",
            "price": {"currency": "EUR", "total": "355.34", "grandTotal": "355.34"},
            "validatingAirlineCodes": ["AA"],
            "itineraries": [
                {
                    "segments": [
                        {
                            "departure": {"iataCode": "JFK", "at": "2024-06-01T07:00:00"},
                            "arrival": {"iataCode": "ORD", "at": "2024-06-01T09:05:00"},
                            "carrierCode": "AA",
                            "number": "100",
                        },
                        {
                            "departure": {"iataCode": "ORD", "at": "2024-06-01T10:30:00"},
                            "arrival": {"iataCode": "LAX", "at": "2024-06-01T13:10:00"},
                            "carrierCode": "AA",
                            "number": "2210",
                        },
                    ]
                }
            ],
        },
        {"id": "2", "itineraries": []},
    ]
}

HOTELS = {
    "data": [
        {"hotelId": "HLPAR001", "name": "Hotel Lumiere", "iataCode": "PAR"},
        {"name": "No identifier"},
    ]
}


def make_service(handler, api_key="key", api_secret="secret"):
    client = AmadeusClient(
        api_key=api_key,
        api_secret=api_secret,
        base_url="https://provider.test",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )
    return TravelSearchService(client)


def routes(token_response=None, search_response=None, calls=None):
    """Build a transport handler answering the token and search endpoints."""
    def handler(request):
        if calls is not None:
            calls.append(request)
        if request.url.path == TOKEN_PATH:
            if token_response is not None:
                return token_response
            return httpx.Response(200, json={"access_token": "upstream-token"})
        if request.url.path in (FLIGHTS_PATH, HOTELS_PATH):
            if search_response is not None:
                return search_response
            return httpx.Response(200, json={"data": []})
        return httpx.Response(404)
    return handler


def refuse(request):
    raise httpx.ConnectError("connection refused", request=request)


def test_no_credentials_returns_mock_flights_without_calling_provider():
    calls = []
    service = make_service(routes(calls=calls), api_key="", api_secret="")
    offers = service.search_flights("JFK", "LAX", "2024-06-01", 1)

    assert calls == []
    assert len(offers) == 3
    assert all(o.origin == "JFK" and o.destination == "LAX" for o in offers)
    assert all(o.source == "mock" for o in offers)
    assert [o.flight_number for o in offers] == ["AA101", "DL202", "UA303"]
    assert offers[0].departure_time == "2024-06-01T08:00:00"


def test_blank_secret_counts_as_missing():
    calls = []
    service = make_service(routes(calls=calls), api_key="key", api_secret="  ")
    assert service.search_flights("JFK", "LAX", "2024-06-01") == mock_flights("JFK", "LAX", "2024-06-01")
    assert calls == []


@pytest.mark.parametrize("token_response", [
    httpx.Response(401, json={"error": "invalid_client"}),
    httpx.Response(500, text="upstream down"),
    httpx.Response(200, text="not json"),
    httpx.Response(200, json={"token_type": "Bearer"}),
])
def test_failed_exchange_matches_unconfigured_result(token_response):
    unconfigured = make_service(routes(), api_key="", api_secret="")
    failing = make_service(routes(token_response=token_response))

    expected = unconfigured.search_flights("CDG", "NRT", "2024-07-15", 2)
    assert failing.search_flights("CDG", "NRT", "2024-07-15", 2) == expected


def test_connection_error_falls_back_to_mock():
    service = make_service(refuse)
    assert service.search_flights("JFK", "LAX", "2024-06-01") == mock_flights("JFK", "LAX", "2024-06-01")
    assert service.search_hotels("PAR", "2024-06-01", "2024-06-03") == mock_hotels("PAR", "2024-06-01", "2024-06-03")


def test_timeout_falls_back_to_mock():
    def handler(request):
        if request.url.path == TOKEN_PATH:
            return httpx.Response(200, json={"access_token": "upstream-token"})
        raise httpx.ReadTimeout("timed out", request=request)

    service = make_service(handler)
    assert service.search_flights("JFK", "LAX", "2024-06-01") == mock_flights("JFK", "LAX", "2024-06-01")


def test_flight_search_normalizes_provider_offers():
    calls = []
    service = make_service(routes(
        search_response=httpx.Response(200, json=FLIGHT_OFFERS), calls=calls
    ))
    offers = service.search_flights("JFK", "LAX", "2024-06-01", 2)

    assert len(offers) == 1
    offer = offers[0]
    assert offer.source == "amadeus"
    assert offer.flight_number == "AA100"
    assert offer.airline == "AA"
    assert offer.origin == "JFK"
    assert offer.destination == "LAX"
    assert offer.departure_time == "2024-06-01T07:00:00"
    assert offer.arrival_time == "2024-06-01T13:10:00"
    assert offer.price == 355.34
    assert offer.currency == "EUR"

    token_request, search_request = calls
    assert parse_qs(token_request.content.decode()) == {
        "grant_type": ["client_credentials"],
        "client_id": ["key"],
        "client_secret": ["secret"],
    }
    assert search_request.headers["Authorization"] == "Bearer upstream-token"
    assert search_request.url.params["originLocationCode"] == "JFK"
    assert search_request.url.params["destinationLocationCode"] == "LAX"
    assert search_request.url.params["departureDate"] == "2024-06-01"
    assert search_request.url.params["adults"] == "2"
    assert search_request.url.params["max"] == "10"


def test_search_error_status_falls_back_to_mock():
    service = make_service(routes(search_response=httpx.Response(503)))
    assert service.search_flights("JFK", "LAX", "2024-06-01") == mock_flights("JFK", "LAX", "2024-06-01")


def test_missing_data_falls_back_to_mock_for_same_query():
    service = make_service(routes(search_response=httpx.Response(200, json={"errors": []})))
    offers = service.search_flights("BOS", "SFO", "2024-08-09")
    assert offers == mock_flights("BOS", "SFO", "2024-08-09")
    assert offers[0].origin == "BOS"


def test_no_usable_entries_falls_back_to_mock():
    body = {"data": [{"id": "1", "price": {"total": "oops"}}, "junk"]}
    service = make_service(routes(search_response=httpx.Response(200, json=body)))
    assert service.search_flights("JFK", "LAX", "2024-06-01") == mock_flights("JFK", "LAX", "2024-06-01")


def malformed_flight(**overrides):
    entry = {
        "id": "9",
        "price": {"currency": "USD", "total": "99.00"},
        "itineraries": [{"segments": [{"departure": "JFK", "arrival": "LAX"}]}],
    }
    entry.update(overrides)
    return entry


def test_malformed_entry_is_skipped_not_whole_response():
    good = FLIGHT_OFFERS["data"][0]
    body = {"data": [malformed_flight(), good]}
    service = make_service(routes(search_response=httpx.Response(200, json=body)))
    offers = service.search_flights("JFK", "LAX", "2024-06-01")

    assert len(offers) == 1
    assert offers[0].source == "amadeus"
    assert offers[0].flight_number == "AA100"


@pytest.mark.parametrize("bad", [
    malformed_flight(),
    malformed_flight(itineraries={"segments": []}),
    malformed_flight(itineraries=[{"segments": {"departure": {"iataCode": "JFK"}}}]),
    malformed_flight(itineraries=["segments"]),
    malformed_flight(validatingAirlineCodes={"code": "AA"}),
    malformed_flight(itineraries=[{"segments": [
        {"departure": {"iataCode": 123}, "arrival": {"iataCode": "LAX"}}
    ]}]),
])
def test_normalize_flight_offers_skips_malformed_shapes(bad):
    good = FLIGHT_OFFERS["data"][0]
    offers = normalize_flight_offers({"data": [bad, good, bad]})
    assert [o.flight_number for o in offers] == ["AA100"]


def test_flight_number_falls_back_to_offer_id():
    entry = {
        "id": "42",
        "price": {"total": "120.00"},
        "itineraries": [{"segments": [
            {"departure": {"iataCode": "BOS"}, "arrival": {"iataCode": "SFO"}}
        ]}],
    }
    offers = normalize_flight_offers({"data": [entry]})
    assert [o.flight_number for o in offers] == ["42"]
    assert offers[0].airline is None
    assert offers[0].currency == "USD"


def test_hotel_search_normalizes_provider_hotels():
    calls = []
    service = make_service(routes(search_response=httpx.Response(200, json=HOTELS), calls=calls))
    offers = service.search_hotels("PAR", "2024-06-01", "2024-06-03", 2)

    assert len(offers) == 1
    hotel = offers[0]
    assert hotel.hotel_id == "HLPAR001"
    assert hotel.name == "Hotel Lumiere"
    assert hotel.city == "PAR"
    assert hotel.check_in == "2024-06-01"
    assert hotel.check_out == "2024-06-03"
    assert hotel.price_per_night == 120.0
    assert hotel.source == "amadeus"
    assert calls[-1].url.params["cityCode"] == "PAR"


def test_hotel_search_without_credentials_uses_mock():
    service = make_service(routes(), api_key="", api_secret="")
    offers = service.search_hotels("Paris", "2024-06-01", "2024-06-03")
    assert [h.hotel_id for h in offers] == ["HOTEL001", "HOTEL002", "HOTEL003"]
    assert all(h.city == "Paris" and h.check_in == "2024-06-01" for h in offers)


def test_cab_search_never_calls_provider():
    calls = []
    service = make_service(routes(calls=calls))
    offers = service.search_cabs("Airport", "Downtown", "2024-06-01T10:00")
    assert calls == []
    assert [c.provider for c in offers] == ["Uber", "Lyft", "Local Taxi"]
    assert all(c.pickup == "Airport" and c.dropoff == "Downtown" for c in offers)


def test_mock_data_is_deterministic():
    assert mock_flights("JFK", "LAX", "2024-06-01") == mock_flights("JFK", "LAX", "2024-06-01")
    assert mock_hotels("Rome", "a", "b") == mock_hotels("Rome", "a", "b")
    assert mock_cabs("x", "y", "z") == mock_cabs("x", "y", "z")


def test_mock_defaults_for_empty_locations():
    flights = mock_flights("", "", "2024-06-01")
    assert flights[0].origin == "JFK"
    assert flights[0].destination == "LAX"
    assert mock_hotels("", "a", "b")[0].city == "New York"


def test_normalizers_ignore_non_list_data():
    assert normalize_flight_offers({"data": {"id": "1"}}) == []
    assert normalize_hotel_offers({"data": None}, "PAR", "a", "b") == []


def test_client_search_raises_provider_error_on_failure():
    client = AmadeusClient("key", "secret", "https://provider.test", transport=httpx.MockTransport(refuse))
    with pytest.raises(ProviderError):
        client.get_hotels_by_city("token", "PAR")
