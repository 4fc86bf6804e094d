"""Request validation errors, flattened into a field/message list."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_CONTENT

from wanderplan.configs import file_logger
from wanderplan.utils.helpers import host

logger = file_logger(getLogger(__name__))

# Request sections FastAPI puts at the front of an error location
REQUEST_SECTIONS = ("body", "query", "path", "header", "cookie")


def _format_error(error: dict[str, Any]) -> dict[str, Any]:
    loc = list(error.get("loc", ()))
    if loc and loc[0] in REQUEST_SECTIONS:
        loc = loc[1:]

    formatted: dict[str, Any] = {
        "field": ".".join(str(part) for part in loc),
        "message": error.get("msg", "Invalid value"),
        "type": error.get("type", "validation_error"),
    }
    if ctx := error.get("ctx"):
        # Validator errors carry the raised ValueError, which is not serializable
        formatted["context"] = {
            key: str(value) if isinstance(value, Exception) else value
            for key, value in ctx.items()
        }
    return formatted


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Turn a ``RequestValidationError`` into a 422 response.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with ``detail`` and one entry per invalid field.
    """
    errors = [_format_error(error) for error in cast(RequestValidationError, exc).errors()]

    logger.warning(
        f"Invalid request from ip: {host(request)} at endpoint {request.url.path}: {errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": "Validation failed", "errors": errors},
    )
