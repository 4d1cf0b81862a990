"""Data models for the holiday calendar."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from enum import Enum


class DayType(str, Enum):
    """Type of day."""

    WORKING_DAY = "working_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


@dataclass(frozen=True)
class Holidays:
    """Holiday dates in file order, with the description of each entry."""

    dates: tuple[date, ...] = ()
    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.names:
            object.__setattr__(self, "names", ("",) * len(self.dates))
        elif len(self.names) != len(self.dates):
            raise ValueError(
                f"{len(self.dates)} holiday dates but {len(self.names)} names"
            )

    def contains(self, target_date: date) -> bool:
        """Check if the date matches one of the listed holidays."""
        return any(holiday == target_date for holiday in self.dates)

    __contains__ = contains

    def name_of(self, target_date: date) -> str | None:
        """Get the description of a listed holiday, or None if not listed."""
        for holiday, name in zip(self.dates, self.names):
            if holiday == target_date:
                return name
        return None

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)
