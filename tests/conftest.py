from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation from the real user configuration file and logging state.
3. Shared filesystem fixtures for the tree/ls tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, List
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from shellkit.infra.logging import shutdown_logging  # noqa: E402
from shellkit.utils.i18n import DEFAULT_LOCALE, i18n  # noqa: E402


# -----------------------------------------------------------------------------
# Isolation Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_config_file(tmp_path: Path):
    """Point the config loader at a file inside tmp_path (absent by default)."""
    config_file = tmp_path / "shellkit_home" / "config.json"
    with patch("shellkit.domain.config.CONFIG_FILE", str(config_file)):
        yield config_file


@pytest.fixture(autouse=True)
def reset_logging():
    """Tear down shellkit handlers and the queue listener around each test."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture(autouse=True)
def reset_locale():
    """Restore the default message catalog after tests that switch it."""
    yield
    if i18n.locale != DEFAULT_LOCALE:
        i18n.load_locale(DEFAULT_LOCALE)


# -----------------------------------------------------------------------------
# Filesystem Fixtures
# -----------------------------------------------------------------------------
def _os_listing(path: Path) -> List[str]:
    with os.scandir(path) as it:
        return [entry.name for entry in it]


@pytest.fixture
def listing() -> Callable[[Path], List[str]]:
    """Entry names in the order the OS enumerates them (never sorted)."""
    return _os_listing


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Structure:
    /root
      a.txt
      /sub
        b.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("alpha\n", encoding="utf-8")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("beta\n", encoding="utf-8")
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """
    Structure:
    /deep
      top.txt
      /l1
        one.txt
        /l2
          two.txt
          /l3
            three.txt
    """
    root = tmp_path / "deep"
    level = root / "l1" / "l2" / "l3"
    level.mkdir(parents=True)
    (root / "top.txt").write_text("0", encoding="utf-8")
    (root / "l1" / "one.txt").write_text("1", encoding="utf-8")
    (root / "l1" / "l2" / "two.txt").write_text("2", encoding="utf-8")
    (level / "three.txt").write_text("3", encoding="utf-8")
    return root
