from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_queries.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for the payment data source.

    Contract:
    - find_all() returns every stored payment; an empty list when there are none
    - The returned list is a snapshot: it stays stable for the duration of
      one query even if the store changes afterwards
    - Order is the repository's own; callers must not rely on it unless the
      implementation documents one
    - Implementations are NOT thread-safe; concurrent writers are out of scope
    """

    @abstractmethod
    def find_all(self) -> list[Payment]:
        """Return a snapshot of all payments.

        Returns:
            List of Payment entities, possibly empty.
            Mutating the list does not affect stored state.
        """
