"""Utility helper functions."""

from wanderplan.utils.helpers import day_date, get_summary, host, today_str

__all__ = [
    "day_date",
    "get_summary",
    "host",
    "today_str",
]
