"""
Shared fixtures: an in-memory SQLite store and an in-process HTTP client.
"""

from typing import Dict

import httpx
import pytest
import pytest_asyncio

from auth.jwt import TokenService
from config.settings import Settings
from database.session import build_engine, build_session_factory, init_db
from main import create_app

TEST_SECRET = "test-secret-key-for-the-vehicle-manager-suite"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def token_service(settings) -> TokenService:
    return TokenService(settings.jwt_secret, expiry_seconds=settings.jwt_expiry_seconds)


@pytest_asyncio.fixture
async def session(settings):
    engine = build_engine(settings)
    await init_db(engine)
    factory = build_session_factory(engine)
    async with factory() as db:
        yield db
    await engine.dispose()


@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    await init_db(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def signup(client: httpx.AsyncClient, email: str, password: str) -> str:
    resp = await client.post("/api/auth/signup", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]
