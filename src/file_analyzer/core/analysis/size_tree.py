from __future__ import annotations

"""
Size Tree Builder.

Folds the flat list of file records into a hierarchical size-attribution
tree. Every node's total_size equals its own_size plus the total_size of its
children, so the root total always matches the sum of the leaf sizes.
"""

import logging
import os
from typing import Iterable, List, Optional

from file_analyzer.domain.analysis_models import FileRecord
from file_analyzer.domain.tree_models import SizeTreeNode
from file_analyzer.infra.fs import to_slash_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_size_tree(
        records: Iterable[FileRecord],
        base_path: Optional[str] = None,
) -> SizeTreeNode:
    """
    Build a size tree from file records.

    Args:
        records: Accepted file records (any order).
        base_path: If given, record paths are made relative to it first.

    Returns:
        SizeTreeNode: Root node (empty name) of the tree.
    """
    root = SizeTreeNode(name="")

    for record in records:
        segments = split_path(record.path, base_path)
        if not segments:
            logger.debug(f"Skipping record without path segments: {record.path}")
            continue
        _insert(root, segments, record.size, record.path)

    logger.debug(f"Size tree built: {len(root.children)} top-level entries, {root.total_size} bytes")
    return root


def split_path(path: str, base_path: Optional[str] = None) -> List[str]:
    """
    Split a record path into tree segments.

    Only the host separators (os.sep, os.altsep) split; elsewhere a
    backslash is an ordinary file name character. Empty and "." segments
    are dropped.
    """
    if base_path:
        try:
            path = os.path.relpath(path, base_path)
        except ValueError:
            # Different drives on Windows
            pass
    return [s for s in to_slash_path(path).split("/") if s and s != "."]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _insert(root: SizeTreeNode, segments: List[str], size: int, source: str) -> None:
    """Place one leaf and propagate the size change to every ancestor."""
    chain: List[SizeTreeNode] = [root]
    node = root
    for name in segments:
        child = node.children.get(name)
        if child is None:
            child = SizeTreeNode(name=name)
            node.children[name] = child
        chain.append(child)
        node = child

    leaf = chain[-1]
    delta = size - leaf.own_size
    if leaf.own_size:
        logger.debug(
            f"Path collision at {source}: replacing {leaf.own_size} bytes with {size} bytes"
        )

    # Last write wins; the delta keeps every ancestor total consistent
    leaf.own_size = size
    for ancestor in chain:
        ancestor.total_size += delta
