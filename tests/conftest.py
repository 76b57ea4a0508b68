"""
Shared fixtures: an in-memory database and an app wired to it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from travel_booking.config import Settings
from travel_booking.database import Base, get_db
from travel_booking.main import create_app

TEST_SECRET = "test-secret-" + "x" * 64


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        JWT_SECRET=TEST_SECRET,
        AMADEUS_API_KEY="",
        AMADEUS_API_SECRET="",
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def app(settings, db_session):
    app = create_app(settings)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def token_service(app):
    return app.state.token_service


@pytest.fixture
def register(client):
    """Post a registration and return the response."""
    def _register(email="alice@example.com", password="pw123"):
        return client.post("/api/auth/register", json={"email": email, "password": password})
    return _register


@pytest.fixture
def auth_headers(register):
    """Register a user and return bearer headers for them."""
    response = register()
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
