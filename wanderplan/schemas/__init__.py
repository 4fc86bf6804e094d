from wanderplan.schemas.itinerary import Activity, DayPlan, Itinerary
from wanderplan.schemas.state import HealthCheckResponse, ServicesStatus, TripState, TripStatus
from wanderplan.schemas.trip import BudgetLevel, RefineRequest, TripPreferences, WalkingTolerance

__all__ = [
    "Activity",
    "BudgetLevel",
    "DayPlan",
    "HealthCheckResponse",
    "Itinerary",
    "RefineRequest",
    "ServicesStatus",
    "TripPreferences",
    "TripState",
    "TripStatus",
    "WalkingTolerance",
]
