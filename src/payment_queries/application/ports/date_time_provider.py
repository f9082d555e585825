from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from payment_queries.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from datetime import datetime


class DateTimeProvider(ABC):
    """Port for clock operations.

    Contract:
    - now() MUST return a timezone-aware datetime (any zone)
    - now() MUST NOT return naive datetimes under any circumstance
    - current_year_month() is the calendar month of now() on its own wall clock

    Query code never reads the system clock directly; it asks this port,
    so tests can substitute a fixed clock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...

    def current_year_month(self) -> YearMonth:
        """Return the calendar month that now() falls in."""
        return YearMonth.from_datetime(self.now())
