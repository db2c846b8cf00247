"""Shared fixtures: isolated settings, an app on a fresh in-memory database, and an HTTP client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.config import Settings
from blog.main import create_app


@pytest.fixture
def settings() -> Settings:
    # Explicit values win over any .env file or environment variable
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite://",
        contact_email="editor@example.com",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    """Client against an app whose lifespan (schema creation) has run."""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
