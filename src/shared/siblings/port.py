"""Sibling-service lookup port.

The reviews and ordering contexts resolve products and users that live in
other services. Every lookup returns a ``LookupResult`` instead of raising,
so each caller decides whether a miss degrades the response or fails it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class LookupStatus(Enum):
    FOUND = "Found"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    UNAVAILABLE = "Unavailable"


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    data: dict[str, Any] | None = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND

    def or_default(self, default):
        """Resolved payload, or ``default`` for any unresolved lookup."""
        return self.data if self.found else default

    @classmethod
    def of(cls, data: dict[str, Any]) -> "LookupResult":
        return cls(LookupStatus.FOUND, data)

    @classmethod
    def not_found(cls) -> "LookupResult":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def forbidden(cls) -> "LookupResult":
        return cls(LookupStatus.FORBIDDEN)

    @classmethod
    def unavailable(cls) -> "LookupResult":
        return cls(LookupStatus.UNAVAILABLE)


class SiblingLookup(ABC):
    """Abstract interface for resolving remote products and users."""

    @abstractmethod
    def get_product(self, product_id: str) -> LookupResult:
        """Fetch a product summary from the catalogue service."""
        ...

    @abstractmethod
    def get_user(self, user_id: str, auth_token: str = "") -> LookupResult:
        """Fetch a user profile, forwarding the caller's Authorization header."""
        ...
