from enum import StrEnum

from pydantic import BaseModel, Field

from wanderplan.schemas.itinerary import Itinerary
from wanderplan.schemas.trip import TripPreferences


class TripStatus(StrEnum):
    """Session manager state."""

    IDLE = "idle"
    ACTIVE = "active"


class TripState(BaseModel):
    """Snapshot of the session manager for the display layer."""

    status: TripStatus = Field(description="idle until a trip has been created")
    busy: bool = Field(description="True while a generation call is in flight")
    preferences: TripPreferences | None = Field(
        default=None,
        description="Preferences of the active trip",
    )
    itinerary: Itinerary | None = Field(default=None, description="Current itinerary")


class ServicesStatus(BaseModel):
    """Status of dependent services."""

    ai_client: str = Field(description="initialized or not_initialized")
    trip_session: TripStatus | None = Field(
        default=None,
        description="State of the session manager, if running",
    )


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    services: ServicesStatus = Field(description="Status of dependent services")
