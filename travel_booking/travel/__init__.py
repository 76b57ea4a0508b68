"""
Travel Search Module

Flight, hotel and cab search plus the matching booking endpoints.

Key Components:
- provider.py: AmadeusClient for the client-credentials token exchange and search calls
- service.py: TravelSearchService normalizing provider responses and falling back to mock data
- mock_data.py: deterministic offers used whenever the provider is unavailable
- router.py: FastAPI search and booking endpoints
- schemas.py: Pydantic models for search requests, offers and booking requests
"""

from .router import router
from .provider import AmadeusClient, ProviderError
from .service import TravelSearchService

__all__ = [
    "router",
    "AmadeusClient",
    "ProviderError",
    "TravelSearchService"
]
