from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies type coercion, fallback injection and strict-mode failures.
"""

import pytest

from shellkit.core.validator import validate_config
from shellkit.domain.config import get_default_config


def test_defaults_pass_unchanged():
    clean, warnings = validate_config(get_default_config())

    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_falls_back_to_defaults():
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert "Invalid config type" in warnings[0]


def test_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_missing_keys_are_filled():
    clean, _ = validate_config({"tree_max_depth": 3})

    assert clean["tree_max_depth"] == 3
    assert clean["encoding"] == "utf-8"


def test_unknown_keys_are_dropped_with_warning():
    clean, warnings = validate_config({"colour": "blue"})

    assert "colour" not in clean
    assert any("colour" in w for w in warnings)


def test_log_level_normalized():
    clean, _ = validate_config({"log_level": " debug "})
    assert clean["log_level"] == "DEBUG"


def test_invalid_log_level_uses_fallback():
    clean, warnings = validate_config({"log_level": "LOUD"})

    assert clean["log_level"] == "WARNING"
    assert warnings


def test_depth_string_is_coerced():
    clean, warnings = validate_config({"tree_max_depth": "2"})

    assert clean["tree_max_depth"] == 2
    assert "converted" in warnings[0]


@pytest.mark.parametrize("value", [True, 1.5, "deep"])
def test_invalid_depth_uses_fallback(value):
    clean, warnings = validate_config({"tree_max_depth": value})

    assert clean["tree_max_depth"] == -1
    assert warnings


def test_depth_policy_normalized():
    clean, _ = validate_config({"tree_depth_policy": "TRUNCATE_LEVEL"})
    assert clean["tree_depth_policy"] == "truncate_level"


def test_invalid_depth_policy_strict_raises():
    with pytest.raises(ValueError, match="tree_depth_policy"):
        validate_config({"tree_depth_policy": "sideways"}, strict=True)


def test_unknown_encoding_uses_fallback():
    clean, warnings = validate_config({"encoding": "klingon-8"})

    assert clean["encoding"] == "utf-8"
    assert any("klingon-8" in w for w in warnings)


def test_blank_log_file_becomes_none():
    clean, _ = validate_config({"log_file": "   "})
    assert clean["log_file"] is None


def test_locale_lowercased():
    clean, _ = validate_config({"locale": "ES"})
    assert clean["locale"] == "es"
