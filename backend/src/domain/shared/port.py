"""ValidatorPort interface"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .models import ErrorEntry


T = TypeVar("T")


class ValidatorPort(ABC, Generic[T]):
    """Port interface for entity validators.

    A validator inspects the current field values of one entity kind and
    reports every violation it finds. It never raises for a failing rule;
    turning errors into a NotificationError is the entity's job.
    """

    @abstractmethod
    def validate(self, entity: T) -> list[ErrorEntry]:
        """Validate an entity and return all violations.

        Args:
            entity: Entity to inspect (read-only access)

        Returns:
            List of ErrorEntry objects in rule order (empty when valid)
        """
        pass
