"""Write holiday files from the jpholiday calendar."""

import logging
from collections.abc import Iterable
from pathlib import Path

import jpholiday

from kyujitsu.errors import InvalidYearRangeError

logger = logging.getLogger(__name__)

HEADER = "---"
MIN_YEAR = 1948  # National Holiday Act


def year_range(start: int, end: int | None = None) -> range:
    """Inclusive range of years to generate."""
    end = start if end is None else end
    if start < MIN_YEAR or end < start:
        raise InvalidYearRangeError(f"invalid year range: {start}..{end}")
    return range(start, end + 1)


def holiday_lines(years: Iterable[int]) -> list[str]:
    """Render holidays for the given years as 'YYYY-MM-DD: name' lines."""
    holidays = []
    for year in years:
        holidays.extend(jpholiday.year_holidays(year))
    holidays.sort(key=lambda holiday: holiday[0])

    lines = [HEADER]
    lines.extend(f"{holiday.isoformat()}: {name}" for holiday, name in holidays)
    return lines


def write_holidays(path: Path, years: Iterable[int]) -> int:
    """Write a holiday file and return the number of holidays written."""
    lines = holiday_lines(years)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as holidays_file:
        holidays_file.write("\n".join(lines) + "\n")

    count = len(lines) - 1
    logger.info("Wrote %d holidays to %s", count, path)
    return count
