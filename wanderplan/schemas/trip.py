"""
Trip preference schemas.

``TripPreferences`` is the preference collector's output: one immutable
record holding everything the planner is told about the trip. It sanitises
free text the same way for every caller so the prompt built from it is
predictable.
"""

from datetime import date
from enum import StrEnum
from re import sub
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from wanderplan.configs.settings import (
    DEFAULT_TRAVELERS,
    DEFAULT_TRIP_DURATION,
    MAX_DESTINATION_LENGTH,
    MAX_FEEDBACK_LENGTH,
    MAX_INTEREST_LENGTH,
    MAX_INTERESTS_COUNT,
    MAX_TRAVELERS_LENGTH,
    MAX_TRIP_DURATION,
    MIN_TRIP_DURATION,
)


class BudgetLevel(StrEnum):
    """Budget tier. The value is the wording used in prompts."""

    Budget = "Budget-friendly"
    Moderate = "Moderate"
    Luxury = "Luxury"


class WalkingTolerance(StrEnum):
    """How much walking the travelers accept."""

    Low = "Low (prefer taxi/transit)"
    Medium = "Medium (happy to walk)"
    High = "High (hiking/long walks)"


def _clean_text(value: str, max_length: int) -> str:
    return sub(r"[<>\"']", "", value.strip())[:max_length].strip()


class TripPreferences(BaseModel):
    """
    Traveler preferences for a new trip.

    Validation Rules:
        - Destination: non-empty after trimming
        - Duration: 1-14 days
        - Start date: ISO calendar date
        - Interests: optional, deduplicated, at most 20
        - Budget / walking: enum value or member name

    Example:
        >>> prefs = TripPreferences(
        ...     destination="Kyoto, Japan",
        ...     startDate="2025-04-01",
        ...     duration=2,
        ...     budget="Moderate",
        ...     walking="Medium",
        ...     interests=["Local Culture"],
        ...     travelers="2 Adults",
        ... )
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    destination: str = Field(
        ...,
        max_length=MAX_DESTINATION_LENGTH,
        description="Where the trip goes",
        examples=["Kyoto, Japan"],
    )
    start_date: date = Field(
        ...,
        alias="startDate",
        description="First day of the trip",
        examples=["2025-04-01"],
    )
    duration: int = Field(
        default=DEFAULT_TRIP_DURATION,
        ge=MIN_TRIP_DURATION,
        le=MAX_TRIP_DURATION,
        description="The duration of the trip in days",
        examples=[3],
    )
    budget: BudgetLevel = Field(
        default=BudgetLevel.Moderate,
        description="Budget tier",
    )
    walking: WalkingTolerance = Field(
        default=WalkingTolerance.Medium,
        description="Walking tolerance",
    )
    interests: tuple[str, ...] = Field(
        default=(),
        description="Free-text interest tags",
        examples=[["Local Culture", "Food & Dining"]],
    )
    travelers: str = Field(
        default=DEFAULT_TRAVELERS,
        max_length=MAX_TRAVELERS_LENGTH,
        description="Who is travelling",
        examples=["2 adults, 2 kids (ages 5 and 8)"],
    )

    @field_validator("destination", "travelers")
    @classmethod
    def validate_text(cls, v: str, info: ValidationInfo) -> str:
        """Trim and sanitise free text; it must not end up empty."""
        limit = MAX_DESTINATION_LENGTH if info.field_name == "destination" else MAX_TRAVELERS_LENGTH
        sanitized = _clean_text(v, limit)
        if not sanitized:
            msg = f"{info.field_name.capitalize()} cannot be empty"
            raise ValueError(msg)
        return sanitized

    @field_validator("budget", "walking", mode="before")
    @classmethod
    def accept_member_name(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept ``"Moderate"`` as well as ``"Medium (happy to walk)"``."""
        enum_type = BudgetLevel if info.field_name == "budget" else WalkingTolerance
        if isinstance(v, str) and v in enum_type.__members__:
            return enum_type[v]
        return v

    @field_validator("interests")
    @classmethod
    def validate_interests(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """
        Sanitize the interests list.

        Blank entries and case-insensitive duplicates are dropped; an empty
        list is allowed.
        """
        seen: set[str] = set()
        sanitized_interests = []
        for interest in v:
            sanitized = _clean_text(interest, MAX_INTEREST_LENGTH)
            if sanitized and sanitized.lower() not in seen:
                seen.add(sanitized.lower())
                sanitized_interests.append(sanitized)

        if len(sanitized_interests) > MAX_INTERESTS_COUNT:
            msg = f"At most {MAX_INTERESTS_COUNT} interests can be selected"
            raise ValueError(msg)

        return tuple(sanitized_interests)


class RefineRequest(BaseModel):
    """Free-text feedback for the current itinerary."""

    feedback: str = Field(
        ...,
        max_length=MAX_FEEDBACK_LENGTH,
        description="What to change about the current itinerary",
        examples=["Make day 2 more relaxing"],
    )
