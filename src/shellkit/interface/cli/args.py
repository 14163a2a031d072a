from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Global options precede the subcommand name; everything after it is handed
to the subcommand untouched, so tokens that look like flags (`echo -n`)
reach the subcommand as plain arguments.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional, Tuple

from shellkit import __version__
from shellkit.domain.commands import Subcommand
from shellkit.utils.i18n import i18n

# Global options that consume the following token as their value
_VALUE_OPTIONS = ("--log-file",)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the shellkit CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="shellkit",
        allow_abbrev=False,
        description=i18n.t("app.description"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    # --- Configuration ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # --- Dispatch ---
    # No `choices` here: unknown names are reported by Subcommand.from_name
    p.add_argument(
        "command",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.command", available=", ".join(Subcommand.names())),
    )
    p.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help=i18n.t("cli.args.args"),
    )

    return p


def split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate the global options and subcommand name from the subcommand's own arguments.

    argparse would still consume a `--` found after the subcommand, so the
    tail is cut off before parsing and handed over unchanged.

    Args:
        argv: Raw command line without the program name.

    Returns:
        Tuple[List[str], List[str]]: Tokens up to and including the
        subcommand name, and every token after it.
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            return argv[:i + 2], argv[i + 2:]
        if not token.startswith("-") or token == "-":
            return argv[:i + 1], argv[i + 1:]
        if token in _VALUE_OPTIONS:
            i += 1
        i += 1
    return list(argv), []


def parse_cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse the command line, passing subcommand arguments through verbatim.

    Args:
        argv: Optional argument list. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed global options, `command` and `args`.
    """
    raw = sys.argv[1:] if argv is None else list(argv)
    head, tail = split_argv(raw)

    args = build_parser().parse_args(head)
    args.args = tail
    return args

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file:
        overrides["log_file"] = args.log_file

    return overrides
