"""
Validation of generation-service payloads.

A payload either becomes a complete ``Itinerary`` or raises
``SchemaViolationError``. Nothing is defaulted: a missing or blank
required field anywhere rejects the whole document.
"""

from datetime import date
from logging import getLogger

from pydantic import ValidationError

from wanderplan.configs import file_logger
from wanderplan.errors import SchemaViolationError
from wanderplan.schemas.itinerary import Itinerary
from wanderplan.utils.helpers import day_date

logger = file_logger(getLogger(__name__))


def _format_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", ())) or "(root)",
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors(include_url=False)
    ]


def parse_itinerary(text: str, expected_days: int, start_date: date) -> Itinerary:
    """
    Parse and validate a raw payload into an itinerary.

    Args:
        text: The raw text returned by the service.
        expected_days: Number of days the trip must have.
        start_date: First day of the trip, used to date each day.

    Returns:
        The validated itinerary, days dated from ``start_date``.

    Raises:
        SchemaViolationError: If the text is not JSON, misses a required field,
            numbers its days other than ``1..expected_days``, or has the
            wrong number of days.
    """
    try:
        itinerary = Itinerary.model_validate_json(text, context={"generated": True})
    except ValidationError as e:
        errors = _format_errors(e)
        logger.warning(f"Itinerary payload rejected: {errors}")
        raise SchemaViolationError(errors=errors) from e

    day_numbers = [day.day_number for day in itinerary.days]
    if len(day_numbers) != expected_days:
        detail = f"Expected {expected_days} day(s) in itinerary, got {len(day_numbers)}"
        logger.warning(detail)
        raise SchemaViolationError(
            detail=detail,
            errors=[{"field": "days", "message": detail}],
        )
    if day_numbers != list(range(1, expected_days + 1)):
        detail = f"Day numbers must run 1..{expected_days} in order, got {day_numbers}"
        logger.warning(detail)
        raise SchemaViolationError(
            detail=detail,
            errors=[{"field": "days.dayNumber", "message": detail}],
        )

    days = [
        day.model_copy(update={"day_date": day_date(start_date, day.day_number)})
        for day in itinerary.days
    ]
    return itinerary.model_copy(update={"days": days})
