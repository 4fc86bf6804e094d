from wanderplan.errors.ai import (
    AiAuthenticationError,
    AiError,
    AiNetworkError,
    AiQuotaExceededError,
    EmptyResponseError,
    SchemaViolationError,
    TransportError,
    ai_exception_handler,
)
from wanderplan.errors.base import BaseAppError, create_exception_handler
from wanderplan.errors.session import (
    FeedbackValidationError,
    NoActiveSessionError,
    SessionBusyError,
    SessionSupersededError,
    TripSessionError,
    session_exception_handler,
)
from wanderplan.errors.validation import validation_exception_handler

__all__ = [
    "AiAuthenticationError",
    "AiError",
    "AiNetworkError",
    "AiQuotaExceededError",
    "BaseAppError",
    "EmptyResponseError",
    "FeedbackValidationError",
    "NoActiveSessionError",
    "SchemaViolationError",
    "SessionBusyError",
    "SessionSupersededError",
    "TransportError",
    "TripSessionError",
    "ai_exception_handler",
    "create_exception_handler",
    "session_exception_handler",
    "validation_exception_handler",
]
