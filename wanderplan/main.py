# wanderplan/main.py

"""WanderPlan Backend - AI family trip planning with iterative refinement."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from wanderplan.errors import (
    AiError,
    TripSessionError,
    ai_exception_handler,
    session_exception_handler,
    validation_exception_handler,
)
from wanderplan.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from wanderplan.routes import trips_router
from wanderplan.schemas import HealthCheckResponse, ServicesStatus
from wanderplan.utils.helpers import today_str

app = FastAPI(
    title="WanderPlan Backend",
    description="WanderPlan Backend API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(trips_router)

errors = [
    (AiError, ai_exception_handler),
    (TripSessionError, session_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    operation_id="health_check",
)
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Health status including AI client and trip session state.
    """
    state = request.app.state
    ai_client_status = (
        "initialized" if getattr(state, "ai_client", None) is not None else "not_initialized"
    )
    manager = getattr(state, "session_manager", None)

    services = ServicesStatus(
        ai_client=ai_client_status,
        trip_session=manager.status if manager is not None else None,
    )

    response_data = {
        "version": app.version,
        "status": "ok",
        "timestamp": today_str(),
        "services": services.model_dump(mode="json"),
    }

    return ORJSONResponse(response_data)
