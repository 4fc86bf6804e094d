# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from wanderplan.main import app
from wanderplan.services.session import TripSessionManager


@pytest.fixture
def session_manager(mock_ai_client: MagicMock) -> TripSessionManager:
    return TripSessionManager(mock_ai_client)


@pytest.fixture
async def client(session_manager: TripSessionManager) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client with a session manager backed by a mocked AI client."""
    app.state.session_manager = session_manager
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    del app.state.session_manager
