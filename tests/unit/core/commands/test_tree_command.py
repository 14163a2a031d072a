from __future__ import annotations

"""
Unit tests for the tree subcommand wrapper.

Covers argument handling, the default root and configuration-driven
depth limits.
"""

import pytest

from shellkit.core.commands.registry import HANDLERS, dispatch
from shellkit.core.commands.tree import run_tree
from shellkit.domain.commands import Subcommand
from shellkit.domain.config import get_default_config
from shellkit.domain.errors import FileAccessError, UsageError


@pytest.fixture
def config():
    return get_default_config()


def test_tree_output_is_joined_lines(sample_tree, listing, config):
    out = run_tree([str(sample_tree)], config)

    assert out.endswith("\n")
    assert sorted(out.splitlines()) == sorted(["└──a.txt", "└──sub", "   └──b.txt"])
    first_level = [line[3:] for line in out.splitlines() if not line.startswith(" ")]
    assert first_level == listing(sample_tree)


def test_tree_defaults_to_working_directory(sample_tree, monkeypatch, config):
    monkeypatch.chdir(sample_tree)
    assert run_tree([], config) == run_tree([str(sample_tree)], config)


def test_tree_default_path_from_config(sample_tree, config):
    config["tree_default_path"] = str(sample_tree / "sub")
    assert run_tree([], config) == "└──b.txt\n"


def test_tree_respects_configured_depth(deep_tree, config):
    config["tree_max_depth"] = 0
    assert all(not line.startswith(" ") for line in run_tree([str(deep_tree)], config).splitlines())

    config["tree_depth_policy"] = "truncate_level"
    assert run_tree([str(deep_tree)], config) == ""


def test_tree_rejects_extra_arguments(config):
    with pytest.raises(UsageError, match="tree accepts at most 1 argument. 2 provided."):
        run_tree(["a", "b"], config)


def test_tree_missing_root_is_fatal(tmp_path, config):
    with pytest.raises(FileAccessError):
        run_tree([str(tmp_path / "missing")], config)


def test_registry_covers_every_subcommand():
    assert set(HANDLERS) == set(Subcommand)


def test_dispatch_routes_to_handler(config):
    assert dispatch(Subcommand.ECHO, ["a", "b"], config) == "a b"
