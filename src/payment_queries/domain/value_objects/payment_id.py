from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from payment_queries.domain.exceptions import InvalidPaymentIdError


@dataclass(frozen=True, slots=True)
class PaymentId:
    """Identity of a payment; the key InMemoryPaymentRepository upserts by.

    Payments with identical contents but different ids are different
    payments, so sets of query results never merge them.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvalidPaymentIdError(
                f"PaymentId value must be a UUID, got {type(self.value).__name__}"
            )

    @classmethod
    def generate(cls) -> PaymentId:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> PaymentId:
        """Parse a PaymentId as produced by str(), tolerating padding.

        Hyphens are optional and case is ignored.

        Raises:
            InvalidPaymentIdError: If the text is not a UUID.
        """
        try:
            parsed = UUID(id_str.strip())
        except (ValueError, AttributeError) as e:
            raise InvalidPaymentIdError(f"Invalid payment ID: {id_str!r}") from e
        return cls(value=parsed)

    def __str__(self) -> str:
        return str(self.value)
