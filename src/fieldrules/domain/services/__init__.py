"""Domain services for field rules.

Services are pure functions over immutable entities. They hold no state
and perform no I/O beyond debug logging.
"""

from fieldrules.domain.services.rule_describer import (
    describe,
    digits_message,
    length_message,
    letters_message,
    symbols_message,
)
from fieldrules.domain.services.rule_evaluator import (
    BLANK_MESSAGE,
    WHITESPACE_MESSAGE,
    evaluate,
    is_valid,
    tally_characters,
)
from fieldrules.domain.services.rule_validator import (
    RuleValidator,
    get_default_password_validator,
)

__all__ = [
    "BLANK_MESSAGE",
    "RuleValidator",
    "WHITESPACE_MESSAGE",
    "describe",
    "digits_message",
    "evaluate",
    "get_default_password_validator",
    "is_valid",
    "length_message",
    "letters_message",
    "symbols_message",
    "tally_characters",
]
