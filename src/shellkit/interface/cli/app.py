from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates one invocation: argument parsing, configuration resolution
(defaults, user file, CLI overrides), logging bootstrap, subcommand
dispatch and error reporting.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

from shellkit.core.commands.registry import dispatch
from shellkit.core.validator import validate_config
from shellkit.domain.commands import Subcommand
from shellkit.domain.config import get_default_config, load_config
from shellkit.domain.errors import ShellkitError
from shellkit.infra.logging import LoggingConfig, configure_logging
from shellkit.interface.cli import args as cli_args
from shellkit.utils.i18n import i18n

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute one CLI invocation.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 I/O or pattern error,
             2 usage error, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing (subcommand arguments are not touched by argparse)
    args = cli_args.parse_cli(argv)

    # 2. Configuration resolution; problems are held until logging is up
    file_warnings: List[str] = []
    base_conf = get_default_config() if args.use_defaults else load_config(file_warnings)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.from_settings(config))

    for w in file_warnings:
        logger.warning(w)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if config["locale"] != i18n.locale:
        i18n.load_locale(config["locale"])

    logger.debug(f"Dispatching '{args.command}' with {len(args.args)} argument(s).")

    # 4. Dispatch
    try:
        command = Subcommand.from_name(args.command)
        output = dispatch(command, list(args.args), config)
    except ShellkitError as e:
        logger.debug(f"{type(e).__name__}: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return EXIT_INTERRUPTED

    # 5. Output
    print(output)
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only keys known to the default schema are merged.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
