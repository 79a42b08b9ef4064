"""Shared domain kernel.

Notification-based validation: entities delegate to a ValidatorPort,
collect every violation in their Notification and raise a single
NotificationError when anything was recorded.
"""

from .models import (
    ErrorEntry,
    Notification,
    DomainError,
    NotificationError,
    ProductNotFoundError,
    MESSAGE_DELIMITER,
)
from .port import ValidatorPort
from .engine import FieldRule, RuleSetValidator, is_present, is_positive
from .entity import Validatable, Entity

__all__ = [
    "ErrorEntry",
    "Notification",
    "DomainError",
    "NotificationError",
    "ProductNotFoundError",
    "MESSAGE_DELIMITER",
    "ValidatorPort",
    "FieldRule",
    "RuleSetValidator",
    "is_present",
    "is_positive",
    "Validatable",
    "Entity",
]
