"""Exception types shared by the distribution, subscription and catalog services."""

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DistributionError(Exception):
    """Service-level error with a stable code and a human-readable message."""

    code: str
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


class NotFoundError(DistributionError):
    """A publication, customer, log entry or catalog item could not be resolved."""


class InvalidInputError(DistributionError):
    """Input rejected before any record was changed."""
