"""Notification models: error entries, the per-entity accumulator and the aggregated failure"""

from dataclasses import dataclass
from typing import Optional


# Separator used when flattening entries into a single failure message
MESSAGE_DELIMITER = ","


@dataclass(frozen=True)
class ErrorEntry:
    """A single rule violation recorded against an entity.

    Attributes:
        context: Entity kind the error belongs to (e.g. "order", "address")
        message: Human readable rule message (e.g. "Id is required")
    """
    context: str
    message: str

    def qualified(self) -> str:
        """Return the context-qualified form used in aggregated messages"""
        return f"{self.context}: {self.message}"


class Notification:
    """Ordered accumulator of ErrorEntry objects owned by one entity instance.

    Entries keep insertion order and duplicates are kept as-is. Nothing
    clears a Notification; a new one is created for each entity.
    """

    def __init__(self) -> None:
        self._errors: list[ErrorEntry] = []

    def add_error(self, error: ErrorEntry) -> None:
        """Append an error entry."""
        self._errors.append(error)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_errors(self) -> list[ErrorEntry]:
        """Return a copy of the recorded entries in insertion order."""
        return list(self._errors)

    def messages(self, context: Optional[str] = None) -> str:
        """Join the context-qualified messages into one string.

        Args:
            context: If given, only entries with this context are included

        Returns:
            Comma-joined messages, e.g. "address: Street is required,address: City is required"
        """
        return MESSAGE_DELIMITER.join(
            error.qualified()
            for error in self._errors
            if context is None or error.context == context
        )

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"


class DomainError(Exception):
    """Base class for errors raised by domain entities and services."""
    pass


class NotificationError(DomainError):
    """Raised by an entity when its validation recorded one or more errors.

    Only the flattened message survives the raise; the individual entries
    are not exposed.
    """

    def __init__(self, errors: list[ErrorEntry]):
        self.message = MESSAGE_DELIMITER.join(error.qualified() for error in errors)
        super().__init__(self.message)


class ProductNotFoundError(DomainError):
    """Raised when a product id is not present in the repository."""
    pass
