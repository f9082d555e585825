from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Owner of a payment.

    The email is the lookup key for user queries and is compared exactly
    (case-sensitive, no trimming). Many payments may reference one user.
    """

    email: str
    first_name: str = ""
    last_name: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
