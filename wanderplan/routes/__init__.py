from wanderplan.routes.trips import get_session_manager
from wanderplan.routes.trips import router as trips_router

__all__ = [
    "get_session_manager",
    "trips_router",
]
