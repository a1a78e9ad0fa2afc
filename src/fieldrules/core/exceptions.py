"""Exceptions raised by the field rules package.

Validation failures are ordinary return values; these exceptions cover
misconfiguration and the explicit raise helpers only.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fieldrules.domain.entities.field_error import FieldError
    from fieldrules.domain.entities.validation_result import ValidationResult


class FieldRulesError(Exception):
    """Base class for all field rules errors."""
    pass


class RuleConfigurationError(FieldRulesError):
    """Raised when a rule configuration cannot be built (e.g. bad regex)."""

    def __init__(self, message: str, pattern: str | None = None):
        self.pattern = pattern
        super().__init__(f"{message}: {pattern!r}" if pattern is not None else message)


class RuleViolationError(FieldRulesError, ValueError):
    """Raised when a caller asks for violations to be surfaced as an exception.

    Subclasses ValueError so pydantic validators turn it into a regular
    validation error.
    """

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__(str(result))

    @property
    def errors(self) -> tuple["FieldError", ...]:
        return self.result.errors
