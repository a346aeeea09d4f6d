"""
Test configuration and fixtures.

Provides:
- INTERNAL_SECRET configured per test
- HTTPX AsyncClient bound to the ASGI app, with and without the secret header
"""
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.config import settings


INTERNAL_SECRET = "test-internal-secret"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def internal_secret(monkeypatch) -> str:
    """Configure INTERNAL_SECRET for the duration of a test."""
    monkeypatch.setattr(settings, "INTERNAL_SECRET", INTERNAL_SECRET)
    return INTERNAL_SECRET


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create AsyncClient without the internal secret header."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture(scope="function")
async def internal_client(internal_secret: str) -> AsyncGenerator[AsyncClient, None]:
    """Create AsyncClient sending the configured X-Internal-Secret header."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-Internal-Secret": internal_secret},
    ) as c:
        yield c
