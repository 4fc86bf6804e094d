"""Errors raised while talking to the generation service or reading its reply."""

from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import Any

from fastapi.responses import ORJSONResponse
from starlette.requests import Request
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_429_TOO_MANY_REQUESTS,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from wanderplan.configs import file_logger
from wanderplan.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class AiError(BaseAppError):
    """Base exception for AI client errors."""

    def __init__(
        self,
        detail: str = "AI client error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class TransportError(AiError):
    """The call to the generation service could not complete."""

    def __init__(
        self,
        detail: str = "AI service call failed",
        status_code: int = HTTP_502_BAD_GATEWAY,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class AiAuthenticationError(TransportError):
    """Authentication failed."""

    def __init__(self, detail: str = "AI authentication failed") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class AiQuotaExceededError(TransportError):
    """Quota exceeded."""

    def __init__(self, detail: str = "AI quota exceeded") -> None:
        super().__init__(detail, HTTP_429_TOO_MANY_REQUESTS)


class AiNetworkError(TransportError):
    """Network connectivity issues."""

    def __init__(self, detail: str = "AI network error") -> None:
        super().__init__(detail, HTTP_503_SERVICE_UNAVAILABLE)


class EmptyResponseError(AiError):
    """The call completed but the service returned no text."""

    def __init__(self, detail: str = "Empty response from Gemini API") -> None:
        super().__init__(detail, HTTP_502_BAD_GATEWAY)


class SchemaViolationError(AiError):
    """
    The payload does not match the itinerary schema.

    Attributes:
        errors: One entry per offending location, ``{"field", "message"}``.
    """

    def __init__(
        self,
        detail: str = "AI response does not match the itinerary schema",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail, HTTP_502_BAD_GATEWAY)
        self.errors = errors or []


# Create the exception handler using the helper
ai_exception_handler: Callable[[Request, Exception], Awaitable[ORJSONResponse]] = (
    create_exception_handler(logger)
)
