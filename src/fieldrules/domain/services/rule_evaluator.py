"""Rule evaluation service.

Checks a string against a RuleConfig and reports every violated rule in
one pass. Checks run in a fixed order: pattern, length, letters, digits,
symbols, whitespace. An empty string short-circuits with a single
"Cannot be blank" error.
"""

from fieldrules.core.logging import get_logger
from fieldrules.domain.entities.character_tally import CharacterTally
from fieldrules.domain.entities.field_error import FieldError
from fieldrules.domain.entities.rule_config import RuleConfig
from fieldrules.domain.entities.validation_result import ValidationResult
from fieldrules.domain.services.rule_describer import (
    digits_message,
    length_message,
    letters_message,
    symbols_message,
)

logger = get_logger(__name__)

# isspace() is true for these separator controls; they count as symbols.
_CONTROL_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

BLANK_MESSAGE = "Cannot be blank"
WHITESPACE_MESSAGE = "No whitespace permitted"


def tally_characters(value: str) -> CharacterTally:
    """Classify each character of value into exactly one category.

    Letters are Unicode letters, digits are Unicode decimal digits and
    whitespace is Unicode whitespace other than the
    separator controls U+001C to U+001F. Everything else is a symbol.
    """
    letters = digits = symbols = whitespace = 0
    for char in value:
        if char.isalpha():
            letters += 1
        elif char.isdecimal():
            digits += 1
        elif char.isspace() and char not in _CONTROL_SEPARATORS:
            whitespace += 1
        else:
            symbols += 1
    return CharacterTally(letters, digits, symbols, whitespace)


def evaluate(config: RuleConfig, value: str) -> ValidationResult:
    """Evaluate value against every rule in config.

    Args:
        config: The rule configuration. Never modified.
        value: The string to validate.

    Returns:
        A valid result, or a result listing each violation in rule order.
    """
    field = config.field_name

    if len(value) == 0:
        return ValidationResult((FieldError(field, BLANK_MESSAGE, "blank"),))

    errors: list[FieldError] = []

    if config.match_pattern is not None and config.match_pattern.fullmatch(value) is None:
        errors.append(FieldError(field, config.match_error_message, "pattern_mismatch"))

    length = len(value)
    if (config.min_length > 0 and length < config.min_length) or (
        config.max_length > 0 and length > config.max_length
    ):
        errors.append(FieldError(field, length_message(config) or "", "length"))

    tally = tally_characters(value)
    if tally.letters < config.min_letters:
        errors.append(FieldError(field, letters_message(config) or "", "min_letters"))
    if tally.digits < config.min_digits:
        errors.append(FieldError(field, digits_message(config) or "", "min_digits"))
    if tally.symbols < config.min_symbols:
        errors.append(FieldError(field, symbols_message(config) or "", "min_symbols"))

    if not config.allow_whitespace and tally.whitespace > 0:
        errors.append(FieldError(field, WHITESPACE_MESSAGE, "whitespace"))

    if errors:
        logger.debug(
            "Rule evaluation failed",
            field=field,
            error_count=len(errors),
            codes=[e.code for e in errors],
        )

    return ValidationResult(tuple(errors))


def is_valid(config: RuleConfig, value: str) -> bool:
    """Check whether value satisfies every rule in config."""
    return evaluate(config, value).is_valid
