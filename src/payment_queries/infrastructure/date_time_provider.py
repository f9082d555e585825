from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING

from payment_queries.application.ports import DateTimeProvider

if TYPE_CHECKING:
    from payment_queries.infrastructure.config import PaymentQueriesSettings


class SystemDateTimeProvider(DateTimeProvider):
    """Production date-time provider using the system clock.

    The zone decides which calendar month "now" belongs to; it defaults to UTC.
    """

    def __init__(self, zone: tzinfo = UTC) -> None:
        self._zone = zone

    @classmethod
    def from_settings(cls, settings: PaymentQueriesSettings) -> SystemDateTimeProvider:
        return cls(zone=settings.zone)

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def now(self) -> datetime:
        return datetime.now(self._zone)


class FixedDateTimeProvider(DateTimeProvider):
    """Test date-time provider with controllable fixed timestamp.

    Note: This implementation is NOT thread-safe. It is intended for
    single-threaded unit tests only.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_aware(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time for testing scenarios."""
        self._validate_aware(new_time)
        self._fixed_time = new_time

    def _validate_aware(self, dt: datetime) -> None:
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"datetime must be timezone-aware, got tzinfo={dt.tzinfo}")
