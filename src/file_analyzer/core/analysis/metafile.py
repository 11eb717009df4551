from __future__ import annotations

"""
Metafile Serializer.

Converts a size tree into the bundler-style metafile document: one input per
tree node (keyed by its slash path from the root) with containment edges to
its direct children, plus a single synthetic output summarizing the tree.
"""

import logging
from typing import Dict, List, Optional, Tuple

from file_analyzer.domain.constants import METAFILE_OUTPUT_KEY
from file_analyzer.domain.tree_models import (
    Metafile,
    MetafileNode,
    MetafileOutput,
    SizeTreeNode,
)

logger = logging.getLogger(__name__)


def serialize_tree(
        tree: SizeTreeNode,
        output_key: str = METAFILE_OUTPUT_KEY,
        entry_point: Optional[str] = None,
) -> Metafile:
    """
    Serialize a size tree into a Metafile.

    The walk uses an explicit stack, so arbitrarily deep trees are safe.
    The root itself is not an input; the output entry stands for it.

    Args:
        tree: Root of the size tree.
        output_key: Key of the synthetic output entry.
        entry_point: Optional label (usually the analyzed root path).

    Returns:
        Metafile: Document model; call as_dict() for the JSON shape.
    """
    inputs: Dict[str, MetafileNode] = {}

    stack: List[Tuple[str, SizeTreeNode]] = [
        (name, child) for name, child in sorted(tree.children.items(), reverse=True)
    ]
    while stack:
        path, node = stack.pop()
        child_paths = [f"{path}/{name}" for name in sorted(node.children)]
        inputs[path] = MetafileNode(bytes=node.total_size, imports=child_paths)

        for name in sorted(node.children, reverse=True):
            stack.append((f"{path}/{name}", node.children[name]))

    output = MetafileOutput(
        bytes=tree.total_size,
        inputs={name: tree.children[name].total_size for name in sorted(tree.children)},
        entry_point=entry_point,
    )

    logger.debug(f"Metafile serialized: {len(inputs)} inputs, {tree.total_size} bytes")
    return Metafile(inputs=inputs, outputs={output_key: output})
