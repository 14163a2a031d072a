from __future__ import annotations

"""
Unit tests for the grep subcommand.

Verifies capture extraction, the debug dump and the fatal error paths.
"""

import pytest

from shellkit.core.commands.grep import (
    Capture,
    compile_pattern,
    find_captures,
    format_captures,
    run_grep,
)
from shellkit.domain.config import get_default_config
from shellkit.domain.errors import FileAccessError, PatternError, UsageError


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text(
        "main.py:10:error one\n"
        "util.py:22:all good\n"
        "main.py:31:error two\n",
        encoding="utf-8",
    )
    return path


def test_find_captures_records_groups_and_spans():
    regex = compile_pattern(r"(?P<key>\w+)=(\d+)")
    captures = find_captures(regex, "a=1 b=22")

    assert captures == [
        Capture(span=(0, 3), match="a=1", groups=("a", "1"), named={"key": "a"}),
        Capture(span=(4, 8), match="b=22", groups=("b", "22"), named={"key": "b"}),
    ]


def test_find_captures_unmatched_optional_group_is_none():
    captures = find_captures(compile_pattern(r"x(y)?"), "x")
    assert captures[0].groups == (None,)


def test_run_grep_dumps_all_matches_in_file_order(log_file, config):
    out = run_grep([r"(\w+\.py):(\d+):error (\w+)", str(log_file)], config)

    assert out.startswith("[")
    assert "Capture(" in out
    assert out.index("'one'") < out.index("'two'")
    assert "all good" not in out
    assert "groups=('main.py', '10', 'one')" in out


def test_run_grep_without_match_prints_empty_list(log_file, config):
    assert run_grep(["nothing-here", str(log_file)], config) == "[]"


def test_format_captures_is_deterministic():
    captures = [Capture(span=(0, 1), match="a", groups=(), named={})]
    assert format_captures(captures) == format_captures(list(captures))


def test_invalid_pattern_is_fatal(log_file, config):
    with pytest.raises(PatternError) as exc:
        run_grep(["(unclosed", str(log_file)], config)

    assert exc.value.pattern == "(unclosed"
    assert "Invalid pattern '(unclosed'" in str(exc.value)
    assert exc.value.exit_code == 1


def test_missing_file_is_fatal(tmp_path, config):
    with pytest.raises(FileAccessError):
        run_grep(["x", str(tmp_path / "missing.txt")], config)


@pytest.mark.parametrize("args", [[], ["only-pattern"], ["a", "b", "c"]])
def test_grep_requires_two_arguments(args, config):
    with pytest.raises(UsageError) as exc:
        run_grep(args, config)

    assert f"grep expects 2 args. {len(args)} given." in str(exc.value)
    assert "Usage: grep <pattern> <filepath>" in str(exc.value)
