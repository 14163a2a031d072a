from __future__ import annotations

"""Tree subcommand: render a directory hierarchy rooted at one path."""

import logging
from typing import Any, Dict, List

from shellkit.core.analysis.tree_generator import UNLIMITED, generate_directory_tree
from shellkit.domain.config import DEFAULT_TREE_PATH
from shellkit.domain.errors import UsageError
from shellkit.domain.tree_models import DepthPolicy
from shellkit.infra.fs import normalize_path
from shellkit.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run_tree(args: List[str], config: Dict[str, Any]) -> str:
    """
    Render the tree for zero or one path argument.

    Without an argument the configured default path (the current working
    directory unless overridden) is used.

    Raises:
        UsageError: If more than one argument is given.
        FileAccessError: If the root path cannot be opened as a directory.
    """
    if len(args) > 1:
        raise UsageError(i18n.t("cli.errors.tree_arg_count", count=len(args)))

    if args:
        root = args[0]
    else:
        root = normalize_path(config.get("tree_default_path"), fallback=DEFAULT_TREE_PATH)
        logger.debug(f"tree: no path given, using '{root}'")

    lines = generate_directory_tree(
        root,
        max_depth=config.get("tree_max_depth", UNLIMITED),
        policy=DepthPolicy(config.get("tree_depth_policy", DepthPolicy.SKIP_RECURSION.value)),
    )
    return "".join(lines)
