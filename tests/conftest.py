"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payment_queries.domain.entities import Payment, PaymentItem, User
from payment_queries.domain.value_objects import PaymentId
from payment_queries.infrastructure.date_time_provider import FixedDateTimeProvider
from payment_queries.infrastructure.payment_repository import InMemoryPaymentRepository

PaymentFactory = Callable[..., Payment]


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def date_time_provider(fixed_time: datetime) -> FixedDateTimeProvider:
    """A date-time provider with a fixed timestamp."""
    return FixedDateTimeProvider(fixed_time)


@pytest.fixture
def repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def user() -> User:
    return User(email="jan.kowalski@example.com", first_name="Jan", last_name="Kowalski")


@pytest.fixture
def make_payment(user: User) -> PaymentFactory:
    """Factory for payments; items are (name, regular, final) triples."""

    def _make(
        payment_date: datetime,
        items: Sequence[tuple[str, str, str]] = (),
        owner: User | None = None,
    ) -> Payment:
        return Payment(
            id=PaymentId.generate(),
            payment_date=payment_date,
            user=owner or user,
            payment_items=tuple(
                PaymentItem(name=name, regular_price=Decimal(regular), final_price=Decimal(final))
                for name, regular, final in items
            ),
        )

    return _make
