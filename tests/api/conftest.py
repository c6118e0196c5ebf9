"""Fixtures for API tests: the FastAPI app bound to the test pool."""

import httpx
import pytest_asyncio

from apps.api.deps import get_pool
from apps.api.main import app


@pytest_asyncio.fixture
async def client(pool):
    """Async HTTP client talking to the app in-process.

    The app's lifespan is not run; the connection pool dependency is
    overridden with the test pool instead.
    """
    app.dependency_overrides[get_pool] = lambda: pool

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
