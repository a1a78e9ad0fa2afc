"""Rule validator service.

Binds a single RuleConfig so callers can keep one validator per field
and reuse it for every request.
"""

from functools import lru_cache

from fieldrules.core.config import get_settings
from fieldrules.domain.entities.rule_config import RuleConfig
from fieldrules.domain.entities.validation_result import ValidationResult
from fieldrules.domain.services import rule_describer, rule_evaluator


class RuleValidator:
    """Validates values for one field against a fixed RuleConfig.

    The config is immutable, so a validator can be shared freely across
    threads and tasks.
    """

    def __init__(self, config: RuleConfig) -> None:
        """Initialize the validator.

        Args:
            config: The rule configuration to enforce.
        """
        self._config = config

    @property
    def config(self) -> RuleConfig:
        return self._config

    @property
    def field_name(self) -> str:
        return self._config.field_name

    def validate(self, value: str) -> ValidationResult:
        """Validate a value against the configured rules.

        Args:
            value: The string to validate.

        Returns:
            The validation result. Valid when no rule is violated.
        """
        return rule_evaluator.evaluate(self._config, value)

    def is_valid(self, value: str) -> bool:
        """Check if a value satisfies every configured rule."""
        return rule_evaluator.is_valid(self._config, value)

    def describe(self) -> list[str]:
        """List the configured requirements for UI hints."""
        return rule_describer.describe(self._config)

    def __repr__(self) -> str:
        return f"RuleValidator({self._config!r})"


@lru_cache
def get_default_password_validator() -> RuleValidator:
    """Get the cached password validator built from settings.

    Returns:
        RuleValidator: Validator for the configured password policy.
    """
    return RuleValidator(get_settings().password_rules())
