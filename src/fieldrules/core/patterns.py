"""Regex helpers for rule configuration."""

import re

from fieldrules.core.exceptions import RuleConfigurationError


def compile_pattern(pattern: str | re.Pattern[str], flags: int = 0) -> re.Pattern[str]:
    """Compile a match pattern, reporting bad syntax as a configuration error.

    Args:
        pattern: Regex source or an already compiled pattern.
        flags: re flags for regex source. Ignored for compiled patterns.

    Returns:
        The compiled pattern.

    Raises:
        RuleConfigurationError: If the pattern or flags are invalid.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern, flags)
    except (re.error, ValueError) as e:
        raise RuleConfigurationError(f"Invalid match pattern ({e})", pattern) from e


def explicit_flags(pattern: re.Pattern[str]) -> int:
    """Return the flags a str pattern was compiled with, minus implicit re.UNICODE."""
    return pattern.flags & ~re.UNICODE
