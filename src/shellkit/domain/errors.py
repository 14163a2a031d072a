from __future__ import annotations

"""
Domain Error Taxonomy.

Every fatal condition raised by a subcommand derives from ShellkitError.
The CLI controller maps each class to its process exit code.
"""

from typing import Optional


class ShellkitError(Exception):
    """Base class for fatal toolkit errors."""

    exit_code: int = 1


class UsageError(ShellkitError):
    """Unknown or missing subcommand, or wrong argument count."""

    exit_code = 2


class FileAccessError(ShellkitError):
    """
    The primary file or directory of a subcommand could not be read.

    Attributes:
        path: The path that failed.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class PatternError(ShellkitError):
    """
    A regular expression failed to compile.

    Attributes:
        pattern: The raw pattern string.
    """

    def __init__(self, message: str, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern
