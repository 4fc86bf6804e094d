# tests/errors/test_base.py
"""Tests for wanderplan/errors/base.py and the error taxonomy."""

from unittest.mock import MagicMock

import pytest

from wanderplan.errors import (
    AiAuthenticationError,
    AiNetworkError,
    AiQuotaExceededError,
    BaseAppError,
    EmptyResponseError,
    FeedbackValidationError,
    NoActiveSessionError,
    SchemaViolationError,
    SessionBusyError,
    TransportError,
    create_exception_handler,
)


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        assert str(BaseAppError(detail="Test error")) == "Test error"


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (TransportError(), 502),
        (AiNetworkError(), 503),
        (AiAuthenticationError(), 401),
        (AiQuotaExceededError(), 429),
        (EmptyResponseError(), 502),
        (SchemaViolationError(), 502),
        (NoActiveSessionError(), 409),
        (SessionBusyError(), 409),
        (FeedbackValidationError(), 422),
    ],
)
def test_status_codes(error: BaseAppError, status_code: int) -> None:
    assert error.status_code == status_code


def test_transport_family() -> None:
    for error in (AiNetworkError(), AiAuthenticationError(), AiQuotaExceededError()):
        assert isinstance(error, TransportError)
    assert not isinstance(EmptyResponseError(), TransportError)
    assert not isinstance(SchemaViolationError(), TransportError)


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        request = MagicMock()
        request.client.host = "192.168.1.1"
        request.url.path = "/trips"

        response = await handler(request, BaseAppError(detail="Test error", status_code=400))

        assert response.status_code == 400
        assert response.body == b'{"detail":"Test error"}'
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /trips",
        )

    @pytest.mark.asyncio
    async def test_handler_includes_extra_attributes(self) -> None:
        handler = create_exception_handler(MagicMock())
        request = MagicMock()
        request.client.host = "10.0.0.1"
        request.url.path = "/trips/refine"

        error = SchemaViolationError(errors=[{"field": "days", "message": "Field required"}])
        response = await handler(request, error)

        assert response.status_code == 502
        assert b'"errors":[{"field":"days","message":"Field required"}]' in response.body

    @pytest.mark.asyncio
    async def test_handler_with_unexpected_exception(self) -> None:
        handler = create_exception_handler(MagicMock())
        request = MagicMock()
        request.client.host = "10.0.0.1"
        request.url.path = "/trips"

        response = await handler(request, RuntimeError("boom"))

        assert response.status_code == 500
        assert response.body == b'{"detail":"Internal Server Error"}'


def test_to_content_includes_subclass_attributes() -> None:
    error = SchemaViolationError(detail="Bad itinerary", errors=[{"field": "days", "message": "x"}])

    assert error.to_content() == {
        "detail": "Bad itinerary",
        "errors": [{"field": "days", "message": "x"}],
    }
