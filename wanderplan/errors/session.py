"""Usage errors of the trip session manager. None of them is transient."""

from collections.abc import Awaitable, Callable
from logging import getLogger

from fastapi.responses import ORJSONResponse
from starlette.requests import Request
from starlette.status import HTTP_409_CONFLICT, HTTP_422_UNPROCESSABLE_CONTENT

from wanderplan.configs import file_logger
from wanderplan.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class TripSessionError(BaseAppError):
    """Base exception for session state errors."""

    def __init__(
        self,
        detail: str = "Trip session error",
        status_code: int = HTTP_409_CONFLICT,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class NoActiveSessionError(TripSessionError):
    """Refinement was requested before any trip was created."""

    def __init__(self, detail: str = "No active session. Please create a trip first.") -> None:
        super().__init__(detail)


class SessionBusyError(TripSessionError):
    """A generation or refinement call is already in flight."""

    def __init__(
        self,
        detail: str = "A trip request is already in progress. Please wait for it to finish.",
    ) -> None:
        super().__init__(detail)


class SessionSupersededError(TripSessionError):
    """The session changed while the call was in flight; its result was dropped."""

    def __init__(
        self,
        detail: str = "The trip was replaced before this request finished.",
    ) -> None:
        super().__init__(detail)


class FeedbackValidationError(TripSessionError):
    """Refinement feedback is empty or too long."""

    def __init__(self, detail: str = "Feedback cannot be empty") -> None:
        super().__init__(detail, HTTP_422_UNPROCESSABLE_CONTENT)


session_exception_handler: Callable[[Request, Exception], Awaitable[ORJSONResponse]] = (
    create_exception_handler(logger)
)
