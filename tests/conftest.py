# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so this must happen before the app is imported
os.environ["LOG_TO_FILE"] = "false"
os.environ["GEMINI_API_KEY"] = "fake-api-key"

import json
from collections.abc import Callable
from datetime import date
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from wanderplan.clients.ai_client import AiClient
from wanderplan.schemas.trip import BudgetLevel, TripPreferences, WalkingTolerance

PayloadFactory = Callable[..., str]


def activity(title: str = "Fushimi Inari Shrine", **overrides: Any) -> dict[str, Any]:
    return {
        "title": title,
        "description": "Walk the lower torii gates before the crowds arrive.",
        "location": "Fushimi Ward, Kyoto",
        "estimatedCost": "Free",
        "duration": "2 hours",
        "tags": ["culture", "outdoors"],
    } | overrides


def itinerary_document(days: int, title: str = "Kyoto Family Escape") -> dict[str, Any]:
    return {
        "title": title,
        "summary": "Temples, gardens and plenty of snack breaks.",
        "days": [
            {
                "dayNumber": n,
                "theme": f"Day {n} in Kyoto",
                "morning": [activity()],
                "afternoon": [activity("Nishiki Market", location="Nakagyo Ward")],
                "evening": [],
            }
            for n in range(1, days + 1)
        ],
    }


@pytest.fixture
def itinerary_payload() -> PayloadFactory:
    """Build a JSON itinerary payload with ``days`` day plans."""

    def _build(days: int = 2, title: str = "Kyoto Family Escape") -> str:
        return json.dumps(itinerary_document(days, title))

    return _build


@pytest.fixture
def kyoto_prefs() -> TripPreferences:
    return TripPreferences(
        destination="Kyoto, Japan",
        start_date=date(2025, 4, 1),
        duration=2,
        budget=BudgetLevel.Moderate,
        walking=WalkingTolerance.Medium,
        interests=["Local Culture"],
        travelers="2 Adults",
    )


@pytest.fixture
def mock_ai_client() -> MagicMock:
    """AiClient double: every ``open_chat`` returns a fresh chat handle."""
    client = MagicMock(spec=AiClient)
    client.open_chat.side_effect = lambda *args, **kwargs: MagicMock(name="chat")
    client.send_message = AsyncMock()
    return client


@pytest.fixture
def itinerary_doc() -> Callable[..., dict[str, Any]]:
    """Build an itinerary document as a dict, for tests that break it on purpose."""
    return itinerary_document
