"""Rule description service.

Renders a RuleConfig as human-readable requirement strings, independent
of any input. The same builders produce the evaluator's messages so a
requirement and its violation always read the same.
"""

from fieldrules.domain.entities.rule_config import RuleConfig


def length_message(config: RuleConfig) -> str | None:
    """Describe the active length bounds, or None if neither is set."""
    if config.min_length > 0 and config.max_length > 0:
        return f"Must be between {config.min_length} and {config.max_length} characters"
    if config.min_length > 0:
        return f"Must be at least {config.min_length} characters"
    if config.max_length > 0:
        return f"Must be at most {config.max_length} characters"
    return None


def _minimum_message(count: int, noun: str) -> str | None:
    if count > 0:
        return f"Must contain at least {count} {noun}"
    return None


def letters_message(config: RuleConfig) -> str | None:
    return _minimum_message(config.min_letters, "letters")


def digits_message(config: RuleConfig) -> str | None:
    return _minimum_message(config.min_digits, "numbers")


def symbols_message(config: RuleConfig) -> str | None:
    return _minimum_message(config.min_symbols, "symbols")


def describe(config: RuleConfig) -> list[str]:
    """List the requirements a value must meet, in evaluation order.

    The whitespace policy is never listed; it only surfaces as a
    violation.

    Args:
        config: The rule configuration to describe.

    Returns:
        Requirement strings. Empty when nothing is configured.
    """
    rules: list[str] = []

    if config.match_pattern is not None:
        rules.append(config.match_error_message)

    for message in (
        length_message(config),
        letters_message(config),
        digits_message(config),
        symbols_message(config),
    ):
        if message is not None:
            rules.append(message)

    return rules
