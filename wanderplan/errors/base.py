from collections.abc import Awaitable, Callable
from logging import Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from wanderplan.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail

    def to_content(self) -> dict[str, object]:
        """Response body: ``detail`` plus any attributes a subclass adds."""
        extra = {k: v for k, v in vars(self).items() if k not in ("status_code", "detail")}
        return {"detail": self.detail, **extra}


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create an exception handler for one family of application errors.

    Args:
        logger: Logger the handler reports each error to.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        if not isinstance(exc, BaseAppError):
            exc = BaseAppError()

        logger.warning(f"{exc.detail} for ip: {host(request)} for endpoint {request.url.path}")

        return ORJSONResponse(content=exc.to_content(), status_code=exc.status_code)

    return handler
