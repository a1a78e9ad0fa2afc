"""fieldrules - configurable string validation rules.

Validates passwords, usernames and similar fields against pattern, length
and character-class rules, reporting every violation in one pass.
"""

__version__ = "0.1.0"

import logging

logging.getLogger("fieldrules").addHandler(logging.NullHandler())

from fieldrules.domain.entities import (
    CharacterTally,
    FieldError,
    RuleConfig,
    ValidationResult,
)
from fieldrules.core.exceptions import (
    FieldRulesError,
    RuleConfigurationError,
    RuleViolationError,
)
from fieldrules.domain.services import (
    RuleValidator,
    describe,
    evaluate,
    get_default_password_validator,
    is_valid,
    tally_characters,
)

__all__ = [
    "CharacterTally",
    "FieldError",
    "FieldRulesError",
    "RuleConfig",
    "RuleConfigurationError",
    "RuleValidator",
    "RuleViolationError",
    "ValidationResult",
    "__version__",
    "describe",
    "evaluate",
    "get_default_password_validator",
    "is_valid",
    "tally_characters",
]
