from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type used by the tree builder and consumed by
the tree renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirNode:
    """
    Represents one filesystem entry (file or directory) in the tree.

    Attributes:
        name: Base name of the entry.
        is_directory: Whether the entry is a directory (symlinks not followed).
        children: Ordered child nodes, in filesystem enumeration order.
    """
    name: str
    is_directory: bool = False
    children: Tuple["DirNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.children and not self.is_directory:
            raise ValueError(f"File entry '{self.name}' cannot own children.")

    def count(self) -> int:
        """Number of nodes in this subtree, including the node itself."""
        return 1 + sum(child.count() for child in self.children)


class DepthPolicy(Enum):
    """
    Behavior of the builder once the depth budget reaches zero.

    SKIP_RECURSION lists the entry and its siblings but does not descend.
    TRUNCATE_LEVEL abandons the rest of the current directory entirely.
    """
    SKIP_RECURSION = "skip_recursion"
    TRUNCATE_LEVEL = "truncate_level"
