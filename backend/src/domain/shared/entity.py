"""Self-validating base classes for entities and value objects"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .models import Notification, NotificationError
from .port import ValidatorPort


logger = logging.getLogger(__name__)


class Validatable(ABC):
    """Base for domain objects that validate themselves.

    Each instance owns one Notification for its whole lifetime. Subclasses
    assign their fields and then call ``_ensure_valid()`` as the last step of
    ``__init__`` so that an invalid object never reaches the caller.

    The validator can be injected through the ``validator`` argument;
    otherwise the subclass's factory supplies one.
    """

    def __init__(self, validator: Optional[ValidatorPort] = None):
        self.notification = Notification()
        self._validator = validator

    @abstractmethod
    def _default_validator(self) -> ValidatorPort:
        """Return the validator used when none was injected."""
        pass

    @property
    def validator(self) -> ValidatorPort:
        if self._validator is not None:
            return self._validator
        return self._default_validator()

    def validate(self) -> None:
        """Run the validator and record its errors in the notification.

        Never raises for rule violations.
        """
        for error in self.validator.validate(self):
            self.notification.add_error(error)

    def _ensure_valid(self) -> None:
        self.validate()
        if self.notification.has_errors():
            error = NotificationError(self.notification.get_errors())
            logger.warning(
                f"Rejected {type(self).__name__}: {error.message}",
                extra={"entity": type(self).__name__, "error_count": len(self.notification)}
            )
            raise error

    def _after_change(self) -> None:
        """Hook for recomputing derived state after a field changes."""
        pass

    def _apply_changes(self, **changes: Any) -> None:
        """Assign attributes atomically, keeping the object valid.

        The candidate state is checked against a scratch Notification. When
        it fails, the previous values are restored and NotificationError is
        raised; the owned notification is never touched. Any other exception
        raised while applying or validating the change also restores the
        previous values before propagating.

        Args:
            **changes: Attribute name to new value (e.g. ``_name="Pen"``)

        Raises:
            NotificationError: If the new state breaks any rule
        """
        previous = {name: getattr(self, name) for name in changes}
        scratch = Notification()
        try:
            for name, value in changes.items():
                setattr(self, name, value)
            self._after_change()

            for entry in self.validator.validate(self):
                scratch.add_error(entry)
        except BaseException:
            self._restore(previous)
            raise

        if scratch.has_errors():
            self._restore(previous)

            error = NotificationError(scratch.get_errors())
            logger.warning(
                f"Rejected change to {type(self).__name__}: {error.message}",
                extra={"entity": type(self).__name__, "error_count": len(scratch)}
            )
            raise error

    def _restore(self, previous: dict) -> None:
        for name, value in previous.items():
            setattr(self, name, value)
        self._after_change()


class Entity(Validatable):
    """Validatable object with identity. Two entities are equal when their ids are."""

    def __init__(self, id: str, validator: Optional[ValidatorPort] = None):
        super().__init__(validator)
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))
