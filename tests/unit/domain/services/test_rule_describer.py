"""Tests for the rule description service."""

import re

from fieldrules.domain.entities import RuleConfig
from fieldrules.domain.services.rule_describer import (
    describe,
    digits_message,
    length_message,
    letters_message,
    symbols_message,
)


class TestMessageBuilders:
    """Test the shared message builders."""

    def test_length_message_variants(self):
        assert length_message(RuleConfig()) is None
        assert length_message(RuleConfig(min_length=8)) == "Must be at least 8 characters"
        assert length_message(RuleConfig(max_length=64)) == "Must be at most 64 characters"
        assert (
            length_message(RuleConfig(min_length=8, max_length=64))
            == "Must be between 8 and 64 characters"
        )

    def test_minimum_messages(self):
        config = RuleConfig(min_letters=2, min_digits=3, min_symbols=1)
        assert letters_message(config) == "Must contain at least 2 letters"
        assert digits_message(config) == "Must contain at least 3 numbers"
        assert symbols_message(config) == "Must contain at least 1 symbols"

    def test_unset_minimums(self):
        config = RuleConfig()
        assert letters_message(config) is None
        assert digits_message(config) is None
        assert symbols_message(config) is None


class TestDescribe:
    """Test describe()."""

    def test_empty_config(self):
        assert describe(RuleConfig()) == []

    def test_full_config_in_order(self):
        config = RuleConfig(
            field_name="password",
            match_pattern=re.compile(r"[^@]+"),
            match_error_message="Must not contain @",
            min_length=8,
            max_length=32,
            min_letters=1,
            min_digits=2,
            min_symbols=3,
        )
        assert describe(config) == [
            "Must not contain @",
            "Must be between 8 and 32 characters",
            "Must contain at least 1 letters",
            "Must contain at least 2 numbers",
            "Must contain at least 3 symbols",
        ]

    def test_whitespace_policy_not_described(self):
        assert describe(RuleConfig(allow_whitespace=False)) == []
        assert describe(RuleConfig(allow_whitespace=True)) == []

    def test_match_message_requires_pattern(self):
        """A message without a pattern is not a rule."""
        assert describe(RuleConfig(match_error_message="ignored")) == []

    def test_pure(self):
        config = RuleConfig(min_length=8, min_digits=1)
        assert describe(config) == describe(config)
