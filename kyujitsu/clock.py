"""Sources for the current date."""

from collections.abc import Callable
from datetime import date, datetime

Clock = Callable[[], date]


def local_today() -> date:
    """Get today's date in the local timezone."""
    return datetime.now().astimezone().date()


def fixed(target_date: date) -> Clock:
    """Get a clock that always returns the given date."""
    return lambda: target_date
