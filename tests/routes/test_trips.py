# tests/routes/test_trips.py
"""Tests for the /trips endpoints."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient

from wanderplan.errors import AiQuotaExceededError, EmptyResponseError

PayloadFactory = Callable[..., str]

KYOTO = {
    "destination": "Kyoto, Japan",
    "startDate": "2025-04-01",
    "duration": 2,
    "budget": "Moderate",
    "walking": "Medium",
    "interests": ["Local Culture"],
    "travelers": "2 Adults",
}


@pytest.mark.asyncio
async def test_create_trip(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    itinerary_payload: PayloadFactory,
) -> None:
    mock_ai_client.send_message.return_value = itinerary_payload(2)

    response = await client.post("/trips", json=KYOTO)

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Kyoto Family Escape"
    assert [day["dayNumber"] for day in data["days"]] == [1, 2]
    assert [day["date"] for day in data["days"]] == ["2025-04-01", "2025-04-02"]
    assert data["days"][0]["morning"][0]["estimatedCost"] == "Free"


@pytest.mark.asyncio
async def test_create_trip_replaces_generated_dates(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    itinerary_doc: Callable[..., dict[str, Any]],
) -> None:
    doc = itinerary_doc(2)
    doc["days"][0]["date"] = "Tuesday, April 1"
    doc["days"][1]["date"] = "2030-01-01"
    mock_ai_client.send_message.return_value = json.dumps(doc)

    response = await client.post("/trips", json=KYOTO)

    assert response.status_code == 201
    assert [day["date"] for day in response.json()["days"]] == ["2025-04-01", "2025-04-02"]
    state = (await client.get("/trips/current")).json()
    assert [day["date"] for day in state["itinerary"]["days"]] == ["2025-04-01", "2025-04-02"]


@pytest.mark.asyncio
async def test_current_trip_idle_then_active(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    itinerary_payload: PayloadFactory,
) -> None:
    response = await client.get("/trips/current")
    assert response.status_code == 200
    assert response.json() == {
        "status": "idle",
        "busy": False,
        "preferences": None,
        "itinerary": None,
    }

    mock_ai_client.send_message.return_value = itinerary_payload(2)
    await client.post("/trips", json=KYOTO)

    data = (await client.get("/trips/current")).json()
    assert data["status"] == "active"
    assert data["preferences"]["destination"] == "Kyoto, Japan"
    assert data["preferences"]["startDate"] == "2025-04-01"
    assert len(data["itinerary"]["days"]) == 2


@pytest.mark.asyncio
async def test_refine_trip(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    itinerary_payload: PayloadFactory,
) -> None:
    mock_ai_client.send_message.return_value = itinerary_payload(2)
    await client.post("/trips", json=KYOTO)

    mock_ai_client.send_message.return_value = itinerary_payload(2, "Relaxed Kyoto")
    response = await client.post("/trips/refine", json={"feedback": "Make day 2 more relaxing"})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Relaxed Kyoto"
    assert data["days"][1]["dayNumber"] == 2


@pytest.mark.asyncio
async def test_refine_without_trip_is_conflict(
    client: AsyncClient,
    mock_ai_client: MagicMock,
) -> None:
    response = await client.post("/trips/refine", json={"feedback": "More museums"})

    assert response.status_code == 409
    assert response.json() == {"detail": "No active session. Please create a trip first."}
    mock_ai_client.send_message.assert_not_called()


@pytest.mark.asyncio
async def test_refine_blank_feedback(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    itinerary_payload: PayloadFactory,
) -> None:
    mock_ai_client.send_message.return_value = itinerary_payload(2)
    await client.post("/trips", json=KYOTO)
    mock_ai_client.send_message.reset_mock()

    response = await client.post("/trips/refine", json={"feedback": "   "})

    assert response.status_code == 422
    assert response.json()["detail"] == "Feedback cannot be empty"
    mock_ai_client.send_message.assert_not_called()


@pytest.mark.asyncio
async def test_refine_blank_feedback_without_trip_is_conflict(client: AsyncClient) -> None:
    response = await client.post("/trips/refine", json={"feedback": "   "})

    assert response.status_code == 409
    assert response.json() == {"detail": "No active session. Please create a trip first."}


@pytest.mark.asyncio
async def test_invalid_preferences_are_rejected(
    client: AsyncClient,
    mock_ai_client: MagicMock,
) -> None:
    response = await client.post("/trips", json=KYOTO | {"duration": 15, "destination": " "})

    assert response.status_code == 422
    body = response.json()
    assert body["detail"] == "Validation failed"
    fields = {error["field"] for error in body["errors"]}
    assert fields == {"duration", "destination"}
    mock_ai_client.open_chat.assert_not_called()


@pytest.mark.asyncio
async def test_schema_violation_is_bad_gateway(
    client: AsyncClient,
    mock_ai_client: MagicMock,
) -> None:
    mock_ai_client.send_message.return_value = '{"title": "Kyoto", "summary": "No days"}'

    response = await client.post("/trips", json=KYOTO)

    assert response.status_code == 502
    body = response.json()
    assert body["errors"] == [{"field": "days", "message": "Field required"}]

    state = (await client.get("/trips/current")).json()
    assert state["status"] == "idle"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "status_code"),
    [(AiQuotaExceededError(), 429), (EmptyResponseError(), 502)],
)
async def test_service_failures_map_to_status(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    error: Exception,
    status_code: int,
) -> None:
    mock_ai_client.send_message.side_effect = error

    response = await client.post("/trips", json=KYOTO)

    assert response.status_code == status_code
    assert response.json()["detail"] == error.detail


@pytest.mark.asyncio
async def test_reset_trip(
    client: AsyncClient,
    mock_ai_client: MagicMock,
    itinerary_payload: PayloadFactory,
) -> None:
    mock_ai_client.send_message.return_value = itinerary_payload(2)
    await client.post("/trips", json=KYOTO)

    response = await client.delete("/trips/current")

    assert response.status_code == 204
    state = (await client.get("/trips/current")).json()
    assert state["status"] == "idle"
    assert state["itinerary"] is None
