"""Core field rules utilities.

Configuration, logging and exceptions shared by the rest of the package.
"""

from fieldrules.core.exceptions import (
    FieldRulesError,
    RuleConfigurationError,
    RuleViolationError,
)
from fieldrules.core.patterns import compile_pattern

__all__ = [
    "FieldRulesError",
    "RuleConfigurationError",
    "RuleViolationError",
    "compile_pattern",
]
