from __future__ import annotations

from datetime import UTC, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from payment_queries.domain.exceptions import InvalidDaysError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

    from payment_queries.application.ports import DateTimeProvider, PaymentRepository
    from payment_queries.domain.entities import Payment, PaymentItem
    from payment_queries.domain.value_objects import YearMonth

logger = structlog.get_logger(__name__)


class PaymentQueryService:
    """Read-only views and aggregates over the payment collection.

    Every public method fetches a fresh snapshot from the repository
    (nothing is cached between calls) and derives its result from that
    snapshot alone. Nothing is ever written back.

    Month membership uses each payment's own wall clock (see
    YearMonth.contains). Sums are exact Decimals and return Decimal("0")
    when nothing matches.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        date_time_provider: DateTimeProvider,
    ) -> None:
        self._payment_repo = payment_repository
        self._date_time_provider = date_time_provider

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def find_payments_sorted_by_date_ascending(self) -> list[Payment]:
        return sorted(self._fetch_all(), key=_payment_instant)

    def find_payments_sorted_by_date_descending(self) -> list[Payment]:
        # sorted() stays stable with reverse=True: ties keep repository order
        return sorted(self._fetch_all(), key=_payment_instant, reverse=True)

    def find_payments_sorted_by_item_count_ascending(self) -> list[Payment]:
        return sorted(self._fetch_all(), key=_item_count)

    def find_payments_sorted_by_item_count_descending(self) -> list[Payment]:
        return sorted(self._fetch_all(), key=_item_count, reverse=True)

    # -------------------------------------------------------------------------
    # Time windows
    # -------------------------------------------------------------------------

    def find_payments_for_month(self, year_month: YearMonth) -> list[Payment]:
        return list(self._payments_for_month(year_month))

    def find_payments_for_current_month(self) -> list[Payment]:
        return self.find_payments_for_month(self._date_time_provider.current_year_month())

    def find_payments_for_last_days(self, days: int) -> list[Payment]:
        """Find payments made less than `days` whole days ago.

        Whole days are counted on the payment's own wall clock and truncated
        toward zero, so a payment made 4 days and 23 hours ago is 4 days old
        and a payment dated a few hours in the future is 0 days old.

        Args:
            days: Exclusive upper bound on the payment's age in whole days.

        Returns:
            Matching payments in repository order.

        Raises:
            InvalidDaysError: If days is negative.
        """
        if days < 0:
            logger.warning("invalid_days_rejected", days=days)
            raise InvalidDaysError(f"days must be zero or positive, got {days}")

        now = self._date_time_provider.now()
        return [
            payment
            for payment in self._fetch_all()
            if _whole_days_between(payment.payment_date, now) < days
        ]

    # -------------------------------------------------------------------------
    # Item filters
    # -------------------------------------------------------------------------

    def find_payments_with_exactly_one_item(self) -> set[Payment]:
        return {payment for payment in self._fetch_all() if payment.item_count == 1}

    def find_products_sold_in_current_month(self) -> set[str]:
        current_month = self._date_time_provider.current_year_month()
        return {item.name for item in self._items_for_month(current_month)}

    def find_items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Flatten the items of every payment owned by the given email.

        The match is exact and case-sensitive. Items keep payment order,
        then item order within each payment; duplicates are kept.
        """
        return [
            item
            for payment in self._fetch_all()
            if payment.user.email == email
            for item in payment.payment_items
        ]

    def find_payments_with_value_over(self, threshold: int) -> set[Payment]:
        """Find payments whose truncated total strictly exceeds threshold.

        The total is the sum of final prices with the fractional part
        discarded (99.99 counts as 99), not rounded.
        """
        return {
            payment for payment in self._fetch_all() if _truncated_total(payment) > threshold
        }

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def sum_total_for_month(self, year_month: YearMonth) -> Decimal:
        return sum(
            (item.final_price for item in self._items_for_month(year_month)),
            Decimal("0"),
        )

    def sum_discount_for_month(self, year_month: YearMonth) -> Decimal:
        return sum(
            (item.discount for item in self._items_for_month(year_month)),
            Decimal("0"),
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _fetch_all(self) -> list[Payment]:
        payments = self._payment_repo.find_all()
        logger.debug("payments_queried", count=len(payments))
        return payments

    def _payments_for_month(self, year_month: YearMonth) -> Iterator[Payment]:
        return (
            payment for payment in self._fetch_all() if year_month.contains(payment.payment_date)
        )

    def _items_for_month(self, year_month: YearMonth) -> Iterator[PaymentItem]:
        return (
            item
            for payment in self._payments_for_month(year_month)
            for item in payment.payment_items
        )


def _payment_instant(payment: Payment) -> datetime:
    # same-tzinfo datetimes compare by wall clock and ignore fold; UTC keeps time order
    return payment.payment_date.astimezone(UTC)


def _item_count(payment: Payment) -> int:
    return payment.item_count


def _truncated_total(payment: Payment) -> int:
    # int() on a Decimal truncates toward zero
    return int(payment.total_final_price())


def _whole_days_between(start: datetime, end: datetime) -> int:
    """Count complete days from start to end, truncated toward zero.

    end is first moved into start's zone and both are compared as local
    wall-clock times, so a DST shift does not eat into a day.
    """
    local_end = end.astimezone(start.tzinfo).replace(tzinfo=None)
    elapsed = local_end - start.replace(tzinfo=None)
    if elapsed < timedelta(0):
        return -(-elapsed).days
    return elapsed.days
