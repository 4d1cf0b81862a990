"""Main entry point for kyujitsu.

Exits with 0 on a working day, 1 on a weekend or listed holiday, and 255
when the holiday file cannot be read.
"""

import logging
import sys

from kyujitsu.clock import Clock, local_today
from kyujitsu.config import Config
from kyujitsu.errors import HolidayDataUnavailableError, InvalidYearRangeError
from kyujitsu.generator import write_holidays, year_range
from kyujitsu.holidays import is_holiday, load

logger = logging.getLogger(__name__)

EXIT_WORKING_DAY = 0
EXIT_HOLIDAY = 1
EXIT_USAGE = 2
EXIT_WRITE_FAILED = 3
# -1 truncated to an unsigned 8-bit exit status
EXIT_DATA_UNAVAILABLE = 255

GENERATE_USAGE = "usage: python -m kyujitsu generate START_YEAR [END_YEAR]\n"


def check(clock: Clock, config: Config) -> int:
    """Exit status for the date given by the clock."""
    try:
        holidays = load(config.holidays_path)
    except HolidayDataUnavailableError:
        logger.debug("Could not load %s", config.holidays_path, exc_info=True)
        return EXIT_DATA_UNAVAILABLE

    today = clock()
    if is_holiday(today, holidays):
        logger.debug("%s is a non-working day", today)
        return EXIT_HOLIDAY
    logger.debug("%s is a working day", today)
    return EXIT_WORKING_DAY


def generate(args: list[str], config: Config) -> int:
    """Write the holiday file for a range of years."""
    if not 1 <= len(args) <= 2:
        sys.stderr.write(GENERATE_USAGE)
        return EXIT_USAGE
    try:
        years = year_range(*(int(arg) for arg in args))
    except (ValueError, InvalidYearRangeError):
        sys.stderr.write(GENERATE_USAGE)
        return EXIT_USAGE

    try:
        write_holidays(config.holidays_path, years)
    except OSError as e:
        sys.stderr.write(f"could not write {config.holidays_path}: {e.strerror or e}\n")
        return EXIT_WRITE_FAILED
    return 0


def run(
    argv: list[str] | None = None,
    clock: Clock = local_today,
    config: Config | None = None,
) -> int:
    """Run kyujitsu and return the process exit status."""
    argv = [] if argv is None else argv
    config = config or Config.resolve()

    if argv and argv[0] == "generate":
        return generate(argv[1:], config)
    return check(clock, config)


def main() -> None:
    """Main entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
