"""Utility helpers."""

from datetime import date, datetime, timedelta
from typing import Union

SECONDS_PER_DAY = timedelta(days=1).total_seconds()

DateLike = Union[date, datetime]


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def num_days(start: DateLike, end: DateLike) -> float:
    """Return the days between ``start`` and ``end``, fractional if not whole."""

    elapsed = _as_datetime(end) - _as_datetime(start)
    return elapsed.total_seconds() / SECONDS_PER_DAY


def format_amount(value: Union[int, float]) -> str:
    """Render a number the way it was given, dropping a trailing ``.0``."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_date(value: DateLike) -> str:
    """Return a short US date like '12/30/2019'."""

    return f"{value.month}/{value.day}/{value.year}"


def format_datetime(value: DateLike) -> str:
    """Return '12/30/2019, 2:30 PM' style formatting."""

    parsed = _as_datetime(value)
    time_str = parsed.strftime("%I:%M %p").lstrip("0")
    return f"{format_date(parsed)}, {time_str}"
