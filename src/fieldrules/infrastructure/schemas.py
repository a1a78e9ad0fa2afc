"""Pydantic integration for rule configurations.

Lets request schemas enforce a RuleConfig on string fields and lets rule
configurations be loaded from JSON or YAML-derived dictionaries.
"""

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from fieldrules.core.exceptions import RuleConfigurationError
from fieldrules.core.patterns import compile_pattern, explicit_flags
from fieldrules.domain.entities.rule_config import RuleConfig
from fieldrules.domain.services.rule_evaluator import evaluate

ValueT = TypeVar("ValueT", str, SecretStr)


def rules_validator(config: RuleConfig) -> Callable[[ValueT], ValueT]:
    """Build a pydantic validator that enforces config.

    Use with ``Annotated[str, AfterValidator(rules_validator(config))]`` or
    call it from a ``field_validator``. SecretStr values are unwrapped for
    evaluation and returned as-is.

    Args:
        config: The rule configuration to enforce.

    Returns:
        A callable returning the value unchanged, or raising
        RuleViolationError listing every violation.
    """

    def _validate(value: ValueT) -> ValueT:
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        evaluate(config, raw).raise_for_errors()
        return value

    return _validate


class RuleConfigSchema(BaseModel):
    """Serializable form of a RuleConfig.

    The match pattern is kept as regex source plus its re flags and
    compiled by to_rule_config().
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field_name: str = Field("", description="Field the errors are tagged with")
    match_pattern: str | None = Field(None, description="Regex the whole value must match")
    match_flags: int = Field(0, ge=0, description="re flags for match_pattern (e.g. re.IGNORECASE)")
    match_error_message: str = Field("", description="Message when match_pattern fails")
    min_length: int = Field(0, ge=0, description="Minimum length (0 = no bound)")
    max_length: int = Field(0, ge=0, description="Maximum length (0 = no bound)")
    min_letters: int = Field(0, ge=0)
    min_digits: int = Field(0, ge=0)
    min_symbols: int = Field(0, ge=0)
    allow_whitespace: bool = False

    @model_validator(mode="after")
    def validate_match_pattern(self) -> "RuleConfigSchema":
        """Reject a pattern that does not compile with its flags."""
        if self.match_pattern is None:
            return self
        try:
            compile_pattern(self.match_pattern, self.match_flags)
        except RuleConfigurationError as e:
            raise ValueError(str(e)) from e
        return self

    def to_rule_config(self) -> RuleConfig:
        """Build the immutable RuleConfig."""
        return RuleConfig(
            field_name=self.field_name,
            match_pattern=compile_pattern(self.match_pattern, self.match_flags)
            if self.match_pattern is not None
            else None,
            match_error_message=self.match_error_message,
            min_length=self.min_length,
            max_length=self.max_length,
            min_letters=self.min_letters,
            min_digits=self.min_digits,
            min_symbols=self.min_symbols,
            allow_whitespace=self.allow_whitespace,
        )

    @classmethod
    def from_rule_config(cls, config: RuleConfig) -> "RuleConfigSchema":
        """Build the serializable form of an existing RuleConfig."""
        return cls(
            field_name=config.field_name,
            match_pattern=config.match_pattern.pattern if config.match_pattern is not None else None,
            match_flags=explicit_flags(config.match_pattern) if config.match_pattern is not None else 0,
            match_error_message=config.match_error_message,
            min_length=config.min_length,
            max_length=config.max_length,
            min_letters=config.min_letters,
            min_digits=config.min_digits,
            min_symbols=config.min_symbols,
            allow_whitespace=config.allow_whitespace,
        )
