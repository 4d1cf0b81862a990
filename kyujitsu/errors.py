"""Custom exceptions."""

from pathlib import Path


class KyujitsuError(Exception):
    """Base exception for kyujitsu."""


class HolidayDataUnavailableError(KyujitsuError):
    """Raised when the holiday file cannot be opened, read or decoded."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"holiday data unavailable: {path}")
        self.path = path


class InvalidYearRangeError(KyujitsuError):
    """Raised when the generate command gets an unusable year range."""
