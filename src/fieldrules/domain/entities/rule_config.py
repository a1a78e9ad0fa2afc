"""Rule configuration entity.

A RuleConfig describes what makes a string acceptable for one field.
"""

import dataclasses
import re
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RuleConfig:
    """Immutable validation policy for a single field.

    Attributes:
        field_name: Name used to tag produced errors.
        match_pattern: Optional compiled regex the whole value must match.
        match_error_message: Message reported when match_pattern fails.
        min_length: Minimum length in characters (0 = no bound).
        max_length: Maximum length in characters (0 = no bound).
        min_letters: Minimum number of letters.
        min_digits: Minimum number of decimal digits.
        min_symbols: Minimum number of symbols.
        allow_whitespace: Whether whitespace characters are permitted.

    Bounds are not cross-checked: min_length > max_length is accepted and
    simply can never be satisfied.
    """

    field_name: str = ""
    match_pattern: re.Pattern[str] | None = None
    match_error_message: str = ""
    min_length: int = 0
    max_length: int = 0
    min_letters: int = 0
    min_digits: int = 0
    min_symbols: int = 0
    allow_whitespace: bool = False

    def replace(self, **changes: Any) -> "RuleConfig":
        """Return a copy of this config with the given fields changed."""
        return dataclasses.replace(self, **changes)
