from __future__ import annotations

"""
Size Tree and Metafile Data Models.

Provides the recursive size-attribution node used by the tree builder and
the document model of the bundler-style metafile emitted by the serializer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class SizeTreeNode:
    """
    One path segment of the size tree.

    Attributes:
        name: Segment name ("" for the root).
        own_size: Bytes of the file at this path (0 for directories).
        total_size: own_size plus the total_size of every child.
        children: Child nodes keyed by segment name.
    """
    name: str
    own_size: int = 0
    total_size: int = 0
    children: Dict[str, "SizeTreeNode"] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children


# -----------------------------------------------------------------------------
# METAFILE DOCUMENT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MetafileNode:
    """
    Input entry of the metafile.

    Attributes:
        bytes: Size attributed to the node (subtree total).
        imports: Full slash paths of the direct children.
    """
    bytes: int
    imports: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MetafileOutput:
    """
    Synthetic aggregate entry summarizing the whole tree.

    Attributes:
        bytes: Total bytes of the analyzed tree.
        inputs: Top-level entry path to its byte contribution.
        entry_point: Optional label of the analyzed root.
    """
    bytes: int
    inputs: Dict[str, int] = field(default_factory=dict)
    entry_point: Optional[str] = None


@dataclass(frozen=True)
class Metafile:
    """Complete metafile document: node map plus keyed outputs."""
    inputs: Dict[str, MetafileNode]
    outputs: Dict[str, MetafileOutput]

    def as_dict(self) -> Dict[str, Any]:
        """Render the document using the bundler field names."""
        inputs = {
            path: {
                "bytes": node.bytes,
                "imports": [{"path": p} for p in node.imports],
            }
            for path, node in self.inputs.items()
        }

        outputs: Dict[str, Any] = {}
        for key, out in self.outputs.items():
            entry: Dict[str, Any] = {
                "bytes": out.bytes,
                "inputs": {p: {"bytesInOutput": b} for p, b in out.inputs.items()},
            }
            if out.entry_point is not None:
                entry["entryPoint"] = out.entry_point
            outputs[key] = entry

        return {"inputs": inputs, "outputs": outputs}
