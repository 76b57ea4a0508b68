"""
Client for the Amadeus self-service travel API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

class ProviderError(Exception):
    """Raised when the travel data provider cannot serve a request"""

class AmadeusClient:
    """Client-credentials authenticated access to Amadeus search endpoints."""

    TOKEN_PATH = "/v1/security/oauth2/token"
    FLIGHT_OFFERS_PATH = "/v2/shopping/flight-offers"
    HOTELS_BY_CITY_PATH = "/v1/reference-data/locations/hotels/by-city"
    MAX_FLIGHT_OFFERS = 10

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = "https://test.api.amadeus.com",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key or ""
        self.api_secret = api_secret or ""
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.BaseTransport] = None) -> "AmadeusClient":
        return cls(
            api_key=settings.AMADEUS_API_KEY,
            api_secret=settings.AMADEUS_API_SECRET,
            base_url=settings.AMADEUS_BASE_URL,
            timeout=settings.PROVIDER_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key.strip()) and bool(self.api_secret.strip())

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    def fetch_access_token(self) -> Optional[str]:
        """Exchange the API key and secret for an access token, or None"""
        if not self.has_credentials:
            return None

        try:
            with self._client() as client:
                response = client.post(
                    self.TOKEN_PATH,
                    data={
                        "grant_type": "client_credentials",
                        "client_id": self.api_key,
                        "client_secret": self.api_secret,
                    },
                )
        except httpx.TimeoutException:
            logger.warning("Amadeus token request timed out")
            return None
        except httpx.HTTPError as e:
            logger.warning("Amadeus token request failed: %s", e)
            return None

        if not response.is_success:
            logger.warning("Amadeus token request rejected: status=%s", response.status_code)
            return None

        try:
            body = response.json()
        except ValueError:
            logger.warning("Amadeus token response is not JSON")
            return None

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            logger.warning("Amadeus token response has no access_token")
            return None
        return token

    def get_flight_offers(
        self,
        access_token: str,
        origin: str,
        destination: str,
        departure_date: str,
        adults: int,
    ) -> Dict[str, Any]:
        return self._get(
            access_token,
            self.FLIGHT_OFFERS_PATH,
            {
                "originLocationCode": origin,
                "destinationLocationCode": destination,
                "departureDate": departure_date,
                "adults": adults,
                "max": self.MAX_FLIGHT_OFFERS,
            },
        )

    def get_hotels_by_city(self, access_token: str, city_code: str) -> Dict[str, Any]:
        return self._get(access_token, self.HOTELS_BY_CITY_PATH, {"cityCode": city_code})

    def _get(self, access_token: str, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("GET %s%s params=%s", self.base_url, path, params)
        try:
            with self._client() as client:
                response = client.get(
                    path,
                    params=params,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProviderError(f"Timed out calling {path}") from e
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"{path} returned status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to {path} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError(f"{path} returned a non-JSON body") from e

        if not isinstance(body, dict):
            raise ProviderError(f"{path} returned an unexpected payload")
        return body
