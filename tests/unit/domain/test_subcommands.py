from __future__ import annotations

"""
Unit tests for the Subcommand catalog.

Verifies name resolution and the usage errors for missing or unknown names.
"""

import pytest

from shellkit.domain.commands import Subcommand
from shellkit.domain.errors import UsageError


@pytest.mark.parametrize("name", ["echo", "cat", "ls", "tree", "grep"])
def test_known_names_resolve(name):
    assert Subcommand.from_name(name).value == name


def test_unknown_name_is_usage_error():
    with pytest.raises(UsageError) as exc:
        Subcommand.from_name("rm")

    assert "Unknown subcommand: 'rm'" in str(exc.value)
    assert exc.value.exit_code == 2


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_is_usage_error(name):
    with pytest.raises(UsageError, match="No subcommand found"):
        Subcommand.from_name(name)


def test_names_are_case_sensitive():
    with pytest.raises(UsageError):
        Subcommand.from_name("ECHO")


def test_names_lists_catalog():
    assert Subcommand.names() == ["echo", "cat", "ls", "tree", "grep"]
