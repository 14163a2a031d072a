from __future__ import annotations

"""
Directory Tree Generator.

Walks a directory recursively into an ordered DirNode hierarchy and hands it
to the renderer. Entries keep the order the operating system enumerates
them in; nothing is sorted.
"""

import logging
import os
from typing import Iterator, List, Optional

from shellkit.core.analysis.tree_renderer import render_tree_structure
from shellkit.domain.tree_models import DepthPolicy, DirNode
from shellkit.infra.fs import to_access_error

logger = logging.getLogger(__name__)

UNLIMITED = -1

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        input_path: str,
        max_depth: int = UNLIMITED,
        policy: DepthPolicy = DepthPolicy.SKIP_RECURSION,
) -> List[str]:
    """
    Build and render the directory tree rooted at input_path.

    Args:
        input_path: Directory to scan.
        max_depth: Depth budget. Negative means unlimited.
        policy: Behavior once the budget reaches zero.

    Returns:
        List[str]: Rendered lines, each ending with a line terminator.

    Raises:
        FileAccessError: If input_path cannot be opened as a directory.
    """
    logger.info(f"Generating directory tree for: {input_path}")

    nodes = build_tree(input_path, max_depth=max_depth, policy=policy)
    lines = render_tree_structure(nodes, indent_level=1)

    logger.debug(f"Tree built with {sum(n.count() for n in nodes)} nodes ({len(lines)} lines).")
    return lines


def build_tree(
        path: str,
        max_depth: int = UNLIMITED,
        policy: DepthPolicy = DepthPolicy.SKIP_RECURSION,
) -> List[DirNode]:
    """
    Enumerate the entries of path, recursing into subdirectories.

    Only the starting directory is fatal: an entry whose metadata cannot be
    read, or a subdirectory that cannot be opened, is dropped from the
    result. Symlinks are not followed.

    Args:
        path: Directory to enumerate.
        max_depth: Depth budget. Negative means unlimited, 0 means the
            budget is exhausted at this level.
        policy: SKIP_RECURSION keeps listing the current level without
            descending; TRUNCATE_LEVEL abandons the current level entirely.

    Returns:
        List[DirNode]: Nodes for the direct entries of path.

    Raises:
        FileAccessError: If path itself cannot be opened or read.
    """
    try:
        with os.scandir(path) as it:
            return _collect_entries(it, path, max_depth, policy)
    except OSError as e:
        raise to_access_error(path, e) from e

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCANNING)
# -----------------------------------------------------------------------------

def _collect_entries(
        entries: Iterator[os.DirEntry],
        dir_path: str,
        max_depth: int,
        policy: DepthPolicy,
) -> List[DirNode]:
    """Turn one directory's entries into nodes, descending where the budget allows."""
    nodes: List[DirNode] = []

    for entry in entries:
        try:
            is_directory = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Skipping unreadable entry '{entry.path}': {e}")
            continue

        if max_depth == 0:
            if policy is DepthPolicy.TRUNCATE_LEVEL:
                logger.debug(f"Depth budget exhausted in '{dir_path}'. Level truncated.")
                return nodes
            nodes.append(DirNode(name=entry.name, is_directory=is_directory))
            continue

        children: Optional[List[DirNode]] = []
        if is_directory:
            next_depth = max_depth - 1 if max_depth > 0 else max_depth
            children = _walk_subdirectory(os.path.join(dir_path, entry.name), next_depth, policy)
            if children is None:
                continue

        nodes.append(DirNode(name=entry.name, is_directory=is_directory, children=tuple(children)))

    return nodes


def _walk_subdirectory(path: str, max_depth: int, policy: DepthPolicy) -> Optional[List[DirNode]]:
    """Children of path, or None when the directory cannot be read."""
    try:
        with os.scandir(path) as it:
            return _collect_entries(it, path, max_depth, policy)
    except OSError as e:
        logger.debug(f"Skipping unreadable directory '{path}': {e}")
        return None
