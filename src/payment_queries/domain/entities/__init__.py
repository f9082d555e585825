"""Domain entities - Objects with identity and lifecycle."""

from payment_queries.domain.entities.payment import Payment
from payment_queries.domain.entities.payment_item import PaymentItem
from payment_queries.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
