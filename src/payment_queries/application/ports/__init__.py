"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payment_queries.application.ports.date_time_provider import DateTimeProvider
from payment_queries.application.ports.payment_repository import PaymentRepository

__all__ = [
    "DateTimeProvider",
    "PaymentRepository",
]
