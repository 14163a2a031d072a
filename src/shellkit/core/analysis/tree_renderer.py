from __future__ import annotations

"""
Tree Renderer.

Converts a DirNode hierarchy into indented text lines. Every entry uses the
same branch glyph; depth is expressed only through repeated indent units.
"""

from typing import List, Sequence

from shellkit.domain.tree_models import DirNode

INDENT_UNIT = "   "
BRANCH_GLYPH = "└──"
LINE_TERMINATOR = "\n"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(nodes: Sequence[DirNode], indent_level: int = 1) -> List[str]:
    """
    Render nodes in pre-order into a flat list of lines.

    A node at indent level `n` is prefixed by `n - 1` indent units, then the
    branch glyph. Each line carries its own trailing line terminator, so the
    caller joins them with an empty separator.

    Args:
        nodes: Sibling nodes in builder order.
        indent_level: Nesting level of these nodes (1 for the root's entries).

    Returns:
        List[str]: Rendered lines.

    Raises:
        ValueError: If indent_level is lower than 1.
    """
    if indent_level < 1:
        raise ValueError(f"indent_level must be >= 1, got {indent_level}")

    lines: List[str] = []
    _render_level(nodes, lines, indent_level)
    return lines


def format_line(name: str, indent_level: int) -> str:
    """Format a single entry label at the given indent level."""
    return f"{INDENT_UNIT * (indent_level - 1)}{BRANCH_GLYPH}{name}{LINE_TERMINATOR}"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_level(nodes: Sequence[DirNode], lines: List[str], indent_level: int) -> None:
    for node in nodes:
        lines.append(format_line(node.name, indent_level))
        if node.children:
            _render_level(node.children, lines, indent_level + 1)
