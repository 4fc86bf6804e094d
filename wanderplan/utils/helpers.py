from datetime import date, datetime, timedelta

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import Match


def host(request: Request) -> str:
    """Return the client IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Current local time, formatted for health reports."""
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def get_summary(request: Request) -> str | None:
    """Summary of the API route matching the request, if any."""
    app: FastAPI = request.scope["app"]
    for route in app.routes:
        if isinstance(route, APIRoute) and route.matches(request.scope)[0] == Match.FULL:
            return route.summary
    return None


def day_date(start_date: date, day_number: int) -> date:
    """
    Calendar date of a 1-based trip day.

    Args:
        start_date: The first day of the trip.
        day_number: The day's position in the itinerary, starting at 1.

    Returns:
        ``start_date`` shifted by ``day_number - 1`` days.
    """
    return start_date + timedelta(days=day_number - 1)
