from __future__ import annotations

"""
Pass-through Subcommands.

echo, cat and ls map directly onto string joining, file reading and a
single-level directory listing.
"""

import logging
from typing import Any, Dict, List

from shellkit.domain.errors import UsageError
from shellkit.infra.fs import DEFAULT_ENCODING, list_entry_names, read_text_file
from shellkit.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run_echo(args: List[str], config: Dict[str, Any]) -> str:
    """Join all tokens with single spaces."""
    return " ".join(args)


def run_cat(args: List[str], config: Dict[str, Any]) -> str:
    """
    Concatenate the contents of every file, with no separator.

    All files are read before anything is returned, so a failure on any
    file produces no partial output.

    Raises:
        UsageError: If no file path is given.
        FileAccessError: If any file cannot be read or decoded.
    """
    if not args:
        raise UsageError(i18n.t("cli.errors.cat_arg_count"))

    encoding = config.get("encoding", DEFAULT_ENCODING)
    contents = []
    for file_path in args:
        logger.debug(f"cat: reading '{file_path}'")
        contents.append(read_text_file(file_path, encoding=encoding))
    return "".join(contents)


def run_ls(args: List[str], config: Dict[str, Any]) -> str:
    """
    Concatenate the entry names of exactly one directory, with no separator.

    Raises:
        UsageError: If the argument count is not exactly one.
        FileAccessError: If the directory cannot be opened.
    """
    if len(args) != 1:
        raise UsageError(i18n.t("cli.errors.ls_arg_count", count=len(args)))

    names = list_entry_names(args[0])
    logger.debug(f"ls: {len(names)} entries in '{args[0]}'")
    return "".join(names)
