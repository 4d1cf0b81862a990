"""Holiday file loading and the weekend/holiday predicate."""

import logging
import re
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from kyujitsu.errors import HolidayDataUnavailableError
from kyujitsu.models import DayType, Holidays

logger = logging.getLogger(__name__)

DEFAULT_HOLIDAYS_PATH = Path("./res/holidays.yml")
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
SEPARATOR = ": "


def extract_date(line: str) -> date | None:
    """
    Extract the date from a 'YYYY-MM-DD: description' line.

    Whitespace around the date is ignored. Headers, separators and anything
    else that does not start with a valid date give None.
    """
    head = line.split(SEPARATOR, 1)[0].strip()
    if not ISO_DATE_PATTERN.fullmatch(head):
        return None
    try:
        return date.fromisoformat(head)
    except ValueError:
        return None


def _extract_name(line: str) -> str:
    _, _, name = line.partition(SEPARATOR)
    return name.strip()


def parse_lines(lines: Iterable[str]) -> Holidays:
    """Build a Holidays set from lines, skipping the ones without a date."""
    dates = []
    names = []
    for line in lines:
        holiday = extract_date(line)
        if holiday is None:
            continue
        dates.append(holiday)
        names.append(_extract_name(line))
    return Holidays(dates=tuple(dates), names=tuple(names))


def load(path: Path = DEFAULT_HOLIDAYS_PATH) -> Holidays:
    """Load holidays from a file in the holiday_jp holidays.yml layout."""
    try:
        with Path(path).open(encoding="utf-8", newline="") as holidays_file:
            content = holidays_file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise HolidayDataUnavailableError(Path(path)) from e

    holidays = parse_lines(content.split("\n"))
    logger.debug("Loaded %d holidays from %s", len(holidays), path)
    return holidays


def is_weekend(target_date: date) -> bool:
    """Check if a date is a Saturday or Sunday."""
    # 5 = Saturday, 6 = Sunday
    return target_date.weekday() in (5, 6)


def is_holiday(target_date: date, holidays: Holidays) -> bool:
    """Check if a date is a non-working day (weekend or listed holiday)."""
    return is_weekend(target_date) or holidays.contains(target_date)


def day_type(target_date: date, holidays: Holidays) -> DayType:
    """Classify a date as weekend, holiday or working day."""
    if is_weekend(target_date):
        return DayType.WEEKEND
    if holidays.contains(target_date):
        return DayType.HOLIDAY
    return DayType.WORKING_DAY
