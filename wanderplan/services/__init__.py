from wanderplan.services.session import TripSession, TripSessionManager
from wanderplan.services.validation import parse_itinerary

__all__ = [
    "TripSession",
    "TripSessionManager",
    "parse_itinerary",
]
