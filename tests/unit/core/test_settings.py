import os
import re
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from fieldrules.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    settings = Settings()

    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.password_field_name == "password"
    assert settings.password_pattern is None
    assert settings.password_min_length == 8
    assert settings.password_max_length == 0
    assert settings.password_allow_whitespace is False
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "FIELDRULES_ENVIRONMENT": "production",
        "FIELDRULES_LOG_LEVEL": "DEBUG",
        "FIELDRULES_PASSWORD_MAX_LENGTH": "64",
        "FIELDRULES_PASSWORD_ALLOW_WHITESPACE": "true",
    }):
        settings = Settings()

        assert settings.is_production is True
        assert settings.log_level == "DEBUG"
        assert settings.password_max_length == 64
        assert settings.password_allow_whitespace is True


def test_invalid_password_pattern_rejected():
    """An uncompilable pattern fails at settings load."""
    with patch.dict(os.environ, {"FIELDRULES_PASSWORD_PATTERN": "([a-z"}):
        with pytest.raises(ValidationError):
            Settings()


def test_negative_bound_rejected():
    with patch.dict(os.environ, {"FIELDRULES_PASSWORD_MIN_LENGTH": "-1"}):
        with pytest.raises(ValidationError):
            Settings()


def test_password_rules():
    settings = Settings(
        password_pattern=r"[\x21-\x7e]+",
        password_pattern_message="Printable ASCII only",
        password_min_symbols=2,
    )
    config = settings.password_rules()

    assert config.field_name == "password"
    assert isinstance(config.match_pattern, re.Pattern)
    assert config.match_pattern.pattern == r"[\x21-\x7e]+"
    assert config.match_error_message == "Printable ASCII only"
    assert config.min_length == 8
    assert config.min_symbols == 2


def test_password_rules_without_pattern():
    config = Settings().password_rules()
    assert config.match_pattern is None
    assert config.match_error_message == ""


def test_get_settings_cached():
    assert get_settings() is get_settings()
