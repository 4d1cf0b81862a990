"""Tests for holiday file generation."""

from datetime import date
from pathlib import Path

import jpholiday
import pytest

from kyujitsu.errors import InvalidYearRangeError
from kyujitsu.generator import holiday_lines, write_holidays, year_range
from kyujitsu.holidays import load

BUNDLED_HOLIDAYS = Path(__file__).parent.parent / "res" / "holidays.yml"


@pytest.fixture
def fake_calendar(monkeypatch):
    """Replace jpholiday with a small calendar, returned out of order."""
    calendar = {
        2030: [(date(2030, 2, 11), "建国記念の日"), (date(2030, 1, 1), "元日")],
        2031: [(date(2031, 1, 1), "元日")],
    }
    monkeypatch.setattr(
        "kyujitsu.generator.jpholiday.year_holidays", lambda year: calendar[year]
    )
    return calendar


def test_year_range():
    """Test inclusive year ranges."""
    assert list(year_range(2030)) == [2030]
    assert list(year_range(2030, 2032)) == [2030, 2031, 2032]


def test_year_range_invalid():
    """Test reversed and pre-1948 ranges are rejected."""
    with pytest.raises(InvalidYearRangeError):
        year_range(2031, 2030)
    with pytest.raises(InvalidYearRangeError):
        year_range(1900)


def test_holiday_lines(fake_calendar):
    """Test lines are sorted by date under a header."""
    assert holiday_lines([2030, 2031]) == [
        "---",
        "2030-01-01: 元日",
        "2030-02-11: 建国記念の日",
        "2031-01-01: 元日",
    ]


def test_write_holidays(tmp_path, fake_calendar):
    """Test the written file loads back with the same dates and names."""
    path = tmp_path / "res" / "holidays.yml"

    count = write_holidays(path, [2030])

    assert count == 2
    holidays = load(path)
    assert holidays.dates == (date(2030, 1, 1), date(2030, 2, 11))
    assert holidays.name_of(date(2030, 2, 11)) == "建国記念の日"


def test_bundled_file_matches_jpholiday():
    """Test the bundled 2025 and 2026 dates agree with jpholiday."""
    bundled = [d for d in load(BUNDLED_HOLIDAYS) if d.year in (2025, 2026)]
    generated = [
        d for year in (2025, 2026) for d, _ in sorted(jpholiday.year_holidays(year))
    ]

    assert bundled == generated
