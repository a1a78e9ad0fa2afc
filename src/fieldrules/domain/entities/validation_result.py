"""Validation result entity.

Holds the ordered errors produced by evaluating a value against a
RuleConfig. A result with no errors is valid; a failed result always
carries at least one error.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from fieldrules.core.exceptions import RuleViolationError
from fieldrules.domain.entities.field_error import FieldError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one evaluation.

    Attributes:
        errors: Violations in rule-declaration order. Empty when valid.
    """

    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when no rule was violated."""
        return not self.errors

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        return ", ".join(str(error) for error in self.errors)

    def messages(self) -> list[str]:
        """Return the error messages in order."""
        return [error.message for error in self.errors]

    def to_map(self) -> dict[str, list[str]]:
        """Group messages by field name.

        Returns:
            Mapping of field name to its messages, in first-seen order.
        """
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def to_details(self) -> list[dict[str, str]]:
        """Render errors in the API error-details shape."""
        return [
            {"field": e.field, "message": e.message, "code": e.code}
            for e in self.errors
        ]

    def raise_for_errors(self) -> None:
        """Raise RuleViolationError if the result is not valid.

        Raises:
            RuleViolationError: If any rule was violated.
        """
        if self.errors:
            raise RuleViolationError(self)
