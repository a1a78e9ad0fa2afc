"""Pytest configuration for all tests."""

import pytest

from fieldrules.core.config import get_settings
from fieldrules.domain.services.rule_validator import get_default_password_validator


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    """Drop cached settings and validators so env overrides take effect."""
    get_settings.cache_clear()
    get_default_password_validator.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_password_validator.cache_clear()
