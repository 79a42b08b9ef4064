"""RuleSetValidator - evaluates ordered field rules and post-checks"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .models import ErrorEntry
from .port import ValidatorPort


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """A declarative rule over one entity field.

    Attributes:
        field: Name of the checked field (for logging and documentation)
        message: Error message recorded when the rule fails
        predicate: Returns True when the entity satisfies the rule
    """
    field: str
    message: str
    predicate: Callable[[Any], bool]


# A post-check returns an error message, or None when the entity passes
PostCheck = Callable[[Any], Optional[str]]


def is_present(value: Any) -> bool:
    """True for non-None values that are not empty strings."""
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


def is_positive(value: Any) -> bool:
    """True for numbers strictly greater than zero."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


class RuleSetValidator(ValidatorPort):
    """Concrete ValidatorPort driven by a table of FieldRule objects.

    Every field rule is evaluated in declaration order without stopping at
    the first failure, then every post-check runs regardless of the field
    rule results. An exception raised by a predicate propagates.
    """

    def __init__(
        self,
        context: str,
        rules: Sequence[FieldRule],
        post_checks: Sequence[PostCheck] = ()
    ):
        self.context = context
        self.rules = tuple(rules)
        self.post_checks = tuple(post_checks)

    def validate(self, entity: Any) -> list[ErrorEntry]:
        errors = []

        for rule in self.rules:
            if not rule.predicate(entity):
                errors.append(ErrorEntry(context=self.context, message=rule.message))

        for check in self.post_checks:
            message = check(entity)
            if message:
                errors.append(ErrorEntry(context=self.context, message=message))

        logger.debug(
            f"Validated {self.context}: {len(errors)} errors",
            extra={"context": self.context, "error_count": len(errors)}
        )

        return errors
