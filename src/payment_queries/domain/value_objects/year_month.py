from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payment_queries.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import datetime

MIN_YEAR = 1
MAX_YEAR = 9999
_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """Calendar bucket identified by (year, month), ignoring day and time.

    Ordering follows the calendar: 2024-12 < 2025-01.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidYearMonthError(
                f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {self.year}"
            )

        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"Month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> YearMonth:
        """Bucket a timestamp by its own wall clock.

        No time zone conversion is applied: 2024-03-31T23:30-05:00 belongs
        to 2024-03 even though it is already April in UTC.
        """
        return cls(year=dt.year, month=dt.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse a year-month from its "YYYY-MM" form.

        Raises:
            InvalidYearMonthError: If the text is malformed or out of range.
        """
        match = _YEAR_MONTH_PATTERN.match(text.strip())
        if match is None:
            raise InvalidYearMonthError(f"Invalid year-month: {text!r}; expected YYYY-MM")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, dt: datetime) -> bool:
        """Return True if the timestamp falls within this calendar month."""
        return dt.year == self.year and dt.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
