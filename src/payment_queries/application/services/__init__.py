"""Application services - Read-side query services over domain entities."""

from payment_queries.application.services.payment_query_service import PaymentQueryService

__all__ = [
    "PaymentQueryService",
]
