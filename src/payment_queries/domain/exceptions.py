"""Domain exceptions for payment-queries.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidPaymentIdError
    │   ├── InvalidPaymentDateError
    │   └── InvalidYearMonthError
    └── Query Argument Errors
        └── InvalidDaysError

Data-integrity problems in records produced upstream (for example an item
whose final price exceeds its regular price) are preconditions, not errors,
and have no exception here.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentIdError(DomainException):
    """Raised when a payment ID fails validation.

    PaymentId must be a valid UUID.
    """


class InvalidPaymentDateError(DomainException):
    """Raised when a payment is built with a naive payment_date.

    Month bucketing and day counting read the timestamp's own offset,
    so a payment date without tzinfo has no meaning here.
    """


class InvalidYearMonthError(DomainException):
    """Raised when a year-month is out of range or cannot be parsed.

    Valid values: year in 1..9999, month in 1..12, text form "YYYY-MM".
    """


# =============================================================================
# Query Argument Errors
# =============================================================================


class InvalidDaysError(DomainException):
    """Raised when a last-days query receives a negative number of days.

    Zero is accepted (it only matches same-instant or future-dated payments).
    """
