"""Domain entities for field rules.

Entities are immutable value objects with no framework dependencies.
"""

from fieldrules.domain.entities.character_tally import CharacterTally
from fieldrules.domain.entities.field_error import FieldError
from fieldrules.domain.entities.rule_config import RuleConfig
from fieldrules.domain.entities.validation_result import ValidationResult

__all__ = [
    "CharacterTally",
    "FieldError",
    "RuleConfig",
    "ValidationResult",
]
