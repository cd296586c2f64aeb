"""Due dates attached to tasks.

A due date always has a month and day and may carry a year. Comparisons treat
a missing year as the current calendar year, so ``03/10`` sorts with (and is
equal to) ``03/10/<this year>`` while ``12/25/2020`` sorts before both.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from functools import total_ordering

from pydantic import BaseModel, Field, model_validator

from todolist_cli.exceptions import DateParseError

# MM/DD, MM/DD/YY, MM/DD/YYYY with '/' or '-' separators
DATE_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})(?:[/-](\d{4}|\d{2}))?$")

FORMAT_HINT = (
    "Accepted formats: MM/DD, MM/DD/YY, MM/DD/YYYY "
    "(single digit days and months are also accepted)"
)

_THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def current_year() -> int:
    """Return the year used in place of a missing one."""
    return datetime.now(UTC).year


def _max_day(month: int, has_year: bool) -> int:
    if month in _THIRTY_ONE_DAY_MONTHS:
        return 31
    if month in _THIRTY_DAY_MONTHS:
        return 30
    # February: no leap-year arithmetic, an explicit year allows the 29th
    return 29 if has_year else 28


@total_ordering
class Date(BaseModel):
    """Month/day due date with an optional year."""

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    year: int | None = None

    @model_validator(mode="after")
    def _check_day(self) -> Date:
        max_day = _max_day(self.month, self.year is not None)
        if self.day > max_day:
            raise ValueError(
                f"day {self.day} is out of range for month {self.month} (max {max_day})"
            )
        return self

    def sort_key(self, year: int | None = None) -> tuple[int, int, int]:
        """Return ``(year, month, day)`` with a missing year resolved."""
        if year is None:
            year = current_year()
        return (self.year if self.year is not None else year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        year = current_year()
        return self.sort_key(year) == other.sort_key(year)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        year = current_year()
        return self.sort_key(year) < other.sort_key(year)

    def __str__(self) -> str:
        if self.year is None:
            return f"{self.month:02}/{self.day:02}"
        return f"{self.month:02}/{self.day:02}/{self.year}"


def compare_dates(a: Date, b: Date) -> int:
    """Three-way comparison of two dates: -1, 0 or 1."""
    year = current_year()
    left, right = a.sort_key(year), b.sort_key(year)
    return (left > right) - (left < right)


def parse_date(text: str) -> Date:
    """Parse a due date from user input.

    Args:
        text: A date such as ``3/10``, ``03-10-24`` or ``12/25/2020``

    Returns:
        The parsed Date. Two-digit years are taken as 20YY.

    Raises:
        DateParseError: If the text is malformed or names an impossible day
    """
    given = text
    match = DATE_RE.match(text.strip())
    if not match:
        raise DateParseError(given, f"Invalid date format. {FORMAT_HINT}")

    month = int(match.group(1))
    day = int(match.group(2))
    year: int | None = None
    if match.group(3) is not None:
        year = int(match.group(3))
        if year < 100:
            year += 2000

    if not 1 <= month <= 12:
        raise DateParseError(given, "Invalid date. Month must be between 1 and 12")
    if day < 1:
        raise DateParseError(given, "Invalid date. Day must be at least 1")

    max_day = _max_day(month, year is not None)
    if day > max_day:
        if month == 2:
            reason = f"Invalid date. February has at most {max_day} days"
        else:
            reason = f"Invalid date. This month has at most {max_day} days"
        raise DateParseError(given, reason)

    return Date(month=month, day=day, year=year)
