"""
Itinerary schemas.

These models describe the structured document the generation service
returns. Wire names are camelCase (``dayNumber``, ``estimatedCost``) to match
the response schema the model is given.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _require_text(v: str, info: ValidationInfo) -> str:
    stripped = v.strip()
    if not stripped:
        msg = f"{info.field_name.capitalize()} cannot be blank"
        raise ValueError(msg)
    return stripped


class Activity(BaseModel):
    """One thing to do within a time slot."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., description="Activity name")
    description: str = Field(..., description="What the activity involves")
    location: str = Field(..., description="Where it happens")
    estimated_cost: str = Field(
        default="",
        alias="estimatedCost",
        description="Free-text cost estimate",
        examples=["¥1,000 per person"],
    )
    duration: str = Field(default="", description="Free-text duration", examples=["2 hours"])
    tags: list[str] = Field(default_factory=list, description="Short labels")

    @field_validator("title", "description", "location")
    @classmethod
    def validate_required_text(cls, v: str, info: ValidationInfo) -> str:
        return _require_text(v, info)


class DayPlan(BaseModel):
    """A single day of the trip, split into morning, afternoon and evening."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    day_number: int = Field(..., alias="dayNumber", gt=0, strict=True)
    day_date: date | None = Field(
        default=None,
        alias="date",
        description="Calendar date, derived from the trip start date",
    )
    theme: str = Field(..., description="Theme of the day")
    morning: list[Activity]
    afternoon: list[Activity]
    evening: list[Activity]

    @field_validator("day_date", mode="before")
    @classmethod
    def ignore_generated_date(cls, v: Any, info: ValidationInfo) -> Any:
        """Dates in generated payloads are replaced from the trip start date."""
        if info.context and info.context.get("generated"):
            return None
        return v

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str, info: ValidationInfo) -> str:
        return _require_text(v, info)


class Itinerary(BaseModel):
    """Root travel-plan document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(..., description="Catchy trip title")
    summary: str = Field(..., description="Short overview of the trip")
    days: list[DayPlan] = Field(..., description="Day plans, in order")

    @field_validator("title", "summary")
    @classmethod
    def validate_required_text(cls, v: str, info: ValidationInfo) -> str:
        return _require_text(v, info)
