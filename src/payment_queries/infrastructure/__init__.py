"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Repositories: In-memory payment data source
- Date-Time Provider: Clock abstraction for testability
- Configuration: Environment-driven settings
- Logging: structlog setup

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_queries.infrastructure.date_time_provider import (
    FixedDateTimeProvider,
    SystemDateTimeProvider,
)
from payment_queries.infrastructure.payment_repository import InMemoryPaymentRepository

__all__ = [
    "FixedDateTimeProvider",
    "InMemoryPaymentRepository",
    "SystemDateTimeProvider",
]
