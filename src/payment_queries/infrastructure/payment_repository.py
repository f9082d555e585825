from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from payment_queries.application.ports import PaymentRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payment_queries.domain.entities import Payment
    from payment_queries.domain.value_objects import PaymentId


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository for tests and local use.

    Implementation notes:
    - Uses dict with PaymentId as key (requires frozen dataclass)
    - find_all() returns payments in first-insertion order
    - save() upserts; replacing a payment keeps its original position
    - Returns deep copies from find_all() to mimic database detachment
    - NOT thread-safe

    Copy-on-read rationale:
    Every query works on a detached snapshot, so a query can never observe
    or cause changes to stored state, and a later save() does not alter a
    list a caller is still iterating.
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: dict[PaymentId, Payment] = {}
        for payment in payments:
            self.save(payment)

    def find_all(self) -> list[Payment]:
        return copy.deepcopy(list(self._payments.values()))

    def save(self, payment: Payment) -> None:
        self._payments[payment.id] = copy.deepcopy(payment)

    def __len__(self) -> int:
        return len(self._payments)
