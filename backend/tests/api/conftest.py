"""API test infrastructure: async httpx client against the ASGI app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.services.yield_service import get_provider
from engine.weather import ClimatologyProvider


# ---------------------------------------------------------------------------
# FastAPI app with overridden dependencies
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app():
    from app.main import create_app

    application = create_app()

    # Deterministic meteorology, no network
    application.dependency_overrides[get_provider] = ClimatologyProvider

    from app.core.rate_limit import estimate_limiter
    estimate_limiter.reset()

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def estimate_body() -> dict:
    """Form-style payload: efficiency and losses in percent."""
    return {
        "latitude": 35.0,
        "longitude": -118.0,
        "system_size": 10.0,
        "panel_efficiency": 20.0,
        "tilt_angle": 20.0,
        "azimuth_angle": 180.0,
        "system_losses": 14.0,
        "albedo": 0.2,
    }
