from wanderplan.clients.ai_client import ITINERARY_SCHEMA, AiClient

__all__ = [
    "ITINERARY_SCHEMA",
    "AiClient",
]
