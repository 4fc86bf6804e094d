from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from wanderplan.configs import file_logger
from wanderplan.schemas.itinerary import Itinerary
from wanderplan.schemas.state import TripState
from wanderplan.schemas.trip import RefineRequest, TripPreferences
from wanderplan.services.session import TripSessionManager
from wanderplan.utils.helpers import host

logger = file_logger(getLogger(__name__))

router = APIRouter(prefix="/trips", tags=["trips"])


def get_session_manager(request: Request) -> TripSessionManager:
    return request.app.state.session_manager


SessionDep = Annotated[TripSessionManager, Depends(get_session_manager)]

ERROR_RESPONSES = {
    409: {"description": "No active trip, or another request is in progress"},
    502: {"description": "The AI service failed or returned an invalid itinerary"},
}


@router.post(
    "",
    status_code=HTTP_201_CREATED,
    summary="Create a trip",
    response_model=Itinerary,
    response_class=ORJSONResponse,
    responses=ERROR_RESPONSES,
)
async def create_trip(
    request: Request,
    prefs: TripPreferences,
    manager: SessionDep,
) -> Itinerary:
    """
    Start a new planning session and generate its itinerary.

    Any previous trip is replaced once the new itinerary is ready.
    """
    logger.info(f"New trip requested from ip {host(request)}")
    return await manager.start_session(prefs)


@router.post(
    "/refine",
    summary="Refine the current trip",
    response_model=Itinerary,
    response_class=ORJSONResponse,
    responses=ERROR_RESPONSES,
)
async def refine_trip(
    request: Request,
    body: RefineRequest,
    manager: SessionDep,
) -> Itinerary:
    """
    Revise the current itinerary from free-text feedback.

    On failure the previous itinerary stays current.
    """
    logger.info(f"Trip refinement requested from ip {host(request)}")
    return await manager.refine(body.feedback)


@router.get(
    "/current",
    summary="Get the current trip",
    response_model=TripState,
    response_class=ORJSONResponse,
)
async def current_trip(manager: SessionDep) -> TripState:
    """Return the session state and the current itinerary, if any."""
    return manager.snapshot()


@router.delete(
    "/current",
    status_code=HTTP_204_NO_CONTENT,
    summary="Start over",
    response_class=Response,
)
async def reset_trip(manager: SessionDep) -> Response:
    """Drop the current trip and abandon any request still in flight."""
    manager.reset()
    return Response(status_code=HTTP_204_NO_CONTENT)
