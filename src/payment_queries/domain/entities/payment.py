"""Payment entity: a sale transaction with its line items."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from payment_queries.domain.exceptions import InvalidPaymentDateError

if TYPE_CHECKING:
    from datetime import datetime

    from payment_queries.domain.entities.payment_item import PaymentItem
    from payment_queries.domain.entities.user import User
    from payment_queries.domain.value_objects.payment_id import PaymentId


@dataclass(frozen=True, slots=True)
class Payment:
    """Sale transaction owned by a user.

    Payment is immutable (frozen dataclass). payment_items keeps the order
    the items were recorded in and may be empty; a list given at
    construction is stored as a tuple so the entity stays hashable and
    payments can be collected into sets.

    payment_date must be timezone-aware. Its own offset is authoritative:
    queries never convert it to another zone before bucketing by month.
    """

    id: PaymentId
    payment_date: datetime
    user: User
    payment_items: tuple[PaymentItem, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.payment_date.tzinfo is None or self.payment_date.utcoffset() is None:
            raise InvalidPaymentDateError(
                f"payment_date must be timezone-aware, got {self.payment_date.isoformat()}"
            )

        if not isinstance(self.payment_items, tuple):
            object.__setattr__(self, "payment_items", tuple(self.payment_items))

    @property
    def item_count(self) -> int:
        return len(self.payment_items)

    def total_final_price(self) -> Decimal:
        """Exact sum of the final prices of all items.

        Returns:
            Decimal("0") for a payment without items.
        """
        return sum((item.final_price for item in self.payment_items), Decimal("0"))
