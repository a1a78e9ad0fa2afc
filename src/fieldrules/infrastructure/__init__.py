"""Framework integrations for field rules."""

from fieldrules.infrastructure.schemas import RuleConfigSchema, rules_validator

__all__ = ["RuleConfigSchema", "rules_validator"]
