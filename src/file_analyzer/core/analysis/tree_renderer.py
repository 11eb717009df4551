from __future__ import annotations

"""
Tree Renderer.

Converts a size tree into a visual ASCII representation with the size of
every node next to its name.
"""

from typing import List, Tuple

from file_analyzer.domain.tree_models import SizeTreeNode

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_size(size: float) -> str:
    """
    Convert a byte count into a human-readable string.

    Examples:
        >>> format_size(512)
        '512 B'
        >>> format_size(1536)
        '1.50 KB'
    """
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    if unit == 0:
        return f"{int(value)} B"
    return f"{value:.2f} {_SIZE_UNITS[unit]}"


def render_size_tree(tree: SizeTreeNode, root_label: str = ".") -> List[str]:
    """
    Render a size tree into display lines, headed by the root label.

    Args:
        tree: Root of the size tree.
        root_label: Text shown on the first line (usually the root path).

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines = [f"{root_label} ({format_size(tree.total_size)})"]
    render_tree_structure(tree, lines)
    return lines


def render_tree_structure(
        node: SizeTreeNode,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Append the children of node to lines.

    Uses standard ASCII connectors (├──, └──). Siblings are sorted by name.
    Implemented with an explicit stack so deep trees do not hit the
    recursion limit.

    Args:
        node: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix of the first level.
    """
    stack: List[Tuple[SizeTreeNode, str, bool]] = []
    _push_children(stack, node, prefix)

    while stack:
        current, current_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(
            f"{current_prefix}{connector}{current.name} ({format_size(current.total_size)})"
        )
        if not current.is_leaf:
            _push_children(stack, current, current_prefix + ("    " if is_last else "│   "))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _push_children(
        stack: List[Tuple[SizeTreeNode, str, bool]],
        node: SizeTreeNode,
        prefix: str,
) -> None:
    names = sorted(node.children)
    total = len(names)
    # Reversed so the first name is popped first
    for i in range(total - 1, -1, -1):
        stack.append((node.children[names[i]], prefix, i == total - 1))
