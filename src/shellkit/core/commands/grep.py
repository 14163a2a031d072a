from __future__ import annotations

"""
Grep Subcommand.

Applies a regular expression to a whole file and dumps the raw capture
matches. The output is a debug representation, not matching lines.
"""

import logging
import pprint
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from shellkit.domain.errors import PatternError, UsageError
from shellkit.infra.fs import DEFAULT_ENCODING, read_text_file
from shellkit.utils.i18n import i18n

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Capture:
    """
    One non-overlapping match of the pattern.

    Attributes:
        span: Start and end offsets of the whole match.
        match: Text of the whole match.
        groups: Positional capture groups (None for groups that did not participate).
        named: Named capture groups.
    """
    span: Tuple[int, int]
    match: str
    groups: Tuple[Optional[str], ...]
    named: Dict[str, Optional[str]]


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a user pattern.

    Raises:
        PatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(i18n.t("cli.errors.bad_pattern", pattern=pattern, error=e), pattern) from e


def find_captures(regex: re.Pattern, text: str) -> List[Capture]:
    return [
        Capture(span=m.span(), match=m.group(0), groups=m.groups(), named=m.groupdict())
        for m in regex.finditer(text)
    ]


def format_captures(captures: List[Capture]) -> str:
    return pprint.pformat(captures, width=120, sort_dicts=False)


def run_grep(args: List[str], config: Dict[str, Any]) -> str:
    """
    Run a pattern over one file and return the capture dump.

    The file is read before the pattern is compiled, so a missing file is
    reported even when the pattern is also invalid.

    Raises:
        UsageError: If the argument count is not exactly two.
        FileAccessError: If the file cannot be read.
        PatternError: If the pattern fails to compile.
    """
    if len(args) != 2:
        raise UsageError(i18n.t("cli.errors.grep_arg_count", count=len(args)))

    pattern, file_path = args
    text = read_text_file(file_path, encoding=config.get("encoding", DEFAULT_ENCODING))
    regex = compile_pattern(pattern)

    captures = find_captures(regex, text)
    logger.debug(f"grep: {len(captures)} matches for {pattern!r} in '{file_path}'")
    return format_captures(captures)
