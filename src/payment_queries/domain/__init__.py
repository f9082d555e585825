"""Domain layer - Payment records and the values derived from them.

This layer contains:
- Entities: Payment, its PaymentItems and the owning User
- Value Objects: Immutable identifiers and buckets (PaymentId, YearMonth)
- Domain Exceptions: Validation and query-argument errors

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
