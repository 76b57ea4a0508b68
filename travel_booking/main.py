import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from travel_booking.config import Settings, settings as default_settings
from travel_booking.database import Base, create_db_engine, create_session_factory
from travel_booking.auth import router as auth_router
from travel_booking.users import router as users_router
from travel_booking.bookings import router as bookings_router
from travel_booking.travel import router as travel_router
from travel_booking.auth.token_service import TokenService
from travel_booking.travel.provider import AmadeusClient
from travel_booking.travel.service import TravelSearchService

logger = logging.getLogger(__name__)

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=app.state.engine)
    yield
    app.state.engine.dispose()

def create_app(settings: Optional[Settings] = None, provider: Optional[AmadeusClient] = None) -> FastAPI:
    settings = settings or default_settings

    # Create FastAPI app
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Travel booking API: accounts, bookings and flight/hotel/cab search",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.token_service = TokenService.from_settings(settings)
    app.state.travel_service = TravelSearchService(provider or AmadeusClient.from_settings(settings))

    if not app.state.travel_service.provider.has_credentials:
        logger.info("Amadeus credentials not configured; searches will return mock data")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        auth_router.router,
        prefix=f"{settings.API_PREFIX}/auth",
        tags=["Authentication"]
    )

    app.include_router(
        users_router.router,
        prefix=f"{settings.API_PREFIX}/user",
        tags=["User Profile"]
    )

    app.include_router(
        bookings_router,
        prefix=f"{settings.API_PREFIX}/bookings",
        tags=["Bookings"]
    )

    app.include_router(
        travel_router,
        prefix=settings.API_PREFIX,
        tags=["Travel Search"]
    )

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app

configure_logging(default_settings.LOG_LEVEL)
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
