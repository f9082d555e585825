from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """A priced line entry within a payment.

    Prices are Decimal so that sums stay exact. The upstream producer
    guarantees final_price <= regular_price; that precondition is not
    checked here. An item whose final price exceeds the regular price is
    treated as not discounted.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    @property
    def is_discounted(self) -> bool:
        return self.final_price < self.regular_price

    @property
    def discount(self) -> Decimal:
        """Amount taken off the regular price, Decimal("0") when undiscounted."""
        if not self.is_discounted:
            return Decimal("0")
        return self.regular_price - self.final_price
