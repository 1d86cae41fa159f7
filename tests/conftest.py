"""
Shared test fixtures and configuration for entire test suite.

Provides: settings, in-memory SQLite database, a fake Wealthbox client,
a TestClient around the real application, and auth helpers
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import os

# Settings are read from the environment on first use
os.environ.setdefault("AUTH_JWT_SECRET", "test-signing-secret-0123456789abcdef")

import pytest
from fastapi.testclient import TestClient

from orgsync.api.main import create_app
from orgsync.boundary.db import Database
from orgsync.boundary.wealthbox import WealthboxContact
from orgsync.configs.auth import AuthSettings
from orgsync.configs.settings import Settings
from orgsync.core.exceptions import WealthboxAPIError

TEST_SECRET = "test-signing-secret-0123456789abcdef"
SQLITE_URL = "sqlite+aiosqlite:///:memory:"


class FakeWealthboxClient:
    """In-memory stand-in for WealthboxClient."""

    def __init__(self) -> None:
        self.users: list[WealthboxContact] = []
        self.fail = False
        self.tokens: list[str] = []
        self.closed = False

    def set_users(self, *users: dict) -> None:
        self.users = [WealthboxContact(**u) for u in users]

    async def fetch_users(self, api_token: str) -> list[WealthboxContact]:
        self.tokens.append(api_token)
        if self.fail:
            raise WealthboxAPIError(details={"reason": "test"})
        return list(self.users)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a low bcrypt cost to keep tests fast."""
    return AuthSettings(jwt_secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def settings(auth_settings: AuthSettings) -> Settings:
    return Settings(auth=auth_settings)


@pytest.fixture
def fake_wealthbox() -> FakeWealthboxClient:
    return FakeWealthboxClient()


@pytest.fixture
def app(settings: Settings, fake_wealthbox: FakeWealthboxClient):
    """Real application wired to a fresh in-memory database."""
    database = Database(SQLITE_URL, create_tables=True)
    return create_app(settings=settings, database=database, wealthbox_client=fake_wealthbox)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running (database connected)."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
async def test_database():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        Database: Connected database with all tables created
    """
    database = Database(SQLITE_URL, create_tables=True)
    await database.connect()
    yield database
    await database.dispose()


@pytest.fixture
async def test_async_db(test_database: Database):
    """
    Session on the in-memory test database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_database.session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def register_user(client: TestClient):
    """Return a helper that registers through the API and returns the body."""

    def _register(email: str, password: str = "secret1", name: str = "Ann", **extra) -> dict:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name, **extra},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers():
    """Return a helper building the Authorization header for a token."""

    def _headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _headers
