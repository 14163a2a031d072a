from __future__ import annotations

"""
Logging Settings.

Level names accepted by shellkit and the frozen settings object that
configure_logging consumes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Level names accepted in config.json and by --debug
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Diagnostics always go to stderr (or the log file) so they never mix
    with command output on stdout.

    Attributes:
        level: Minimum level name, one of the _LEVEL_MAP keys.
        console: Emit records on stderr.
        log_file: Optional rotating log file (the --log-file option).
        max_bytes: Rollover size of the log file.
        backup_count: Rotated files kept next to the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, config: Dict[str, Any]) -> "LoggingConfig":
        """Build from a validated shellkit configuration dict."""
        return cls(level=config.get("log_level") or "WARNING", log_file=config.get("log_file"))
