"""Configuration management for field rules.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings are loaded once and are
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fieldrules.core.exceptions import RuleConfigurationError
from fieldrules.core.patterns import compile_pattern
from fieldrules.domain.entities.rule_config import RuleConfig


class Settings(BaseSettings):
    """Field rules configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FIELDRULES_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Default Password Policy
    password_field_name: str = "password"
    password_pattern: str | None = Field(
        default=None,
        description="Regex the whole password must match (unset = no pattern rule)",
    )
    password_pattern_message: str = Field(
        default="Does not match the required format",
        description="Message shown when password_pattern does not match",
    )
    password_min_length: int = Field(default=8, ge=0)
    password_max_length: int = Field(default=0, ge=0)  # 0 = unbounded
    password_min_letters: int = Field(default=1, ge=0)
    password_min_digits: int = Field(default=1, ge=0)
    password_min_symbols: int = Field(default=0, ge=0)
    password_allow_whitespace: bool = False

    @field_validator("password_pattern")
    @classmethod
    def validate_password_pattern(cls, v: str | None) -> str | None:
        """Reject a pattern that does not compile."""
        if v is None or v == "":
            return None
        try:
            compile_pattern(v)
        except RuleConfigurationError as e:
            raise ValueError(str(e)) from e
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    def password_rules(self) -> RuleConfig:
        """Build the password RuleConfig described by these settings."""
        return RuleConfig(
            field_name=self.password_field_name,
            match_pattern=compile_pattern(self.password_pattern) if self.password_pattern else None,
            match_error_message=self.password_pattern_message if self.password_pattern else "",
            min_length=self.password_min_length,
            max_length=self.password_max_length,
            min_letters=self.password_min_letters,
            min_digits=self.password_min_digits,
            min_symbols=self.password_min_symbols,
            allow_whitespace=self.password_allow_whitespace,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
