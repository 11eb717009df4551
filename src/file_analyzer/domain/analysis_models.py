from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the immutable records produced by the traversal engine and the
final result object handed to formatters and callers.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileRecord:
    """
    One accepted file discovered during traversal.

    Attributes:
        path: Filesystem path of the file (or of the symlink itself).
        size: Size in bytes of the resolved file.
        depth: Distance from the analysis root (root children are depth 1).
        is_symlink: Whether the path is a symbolic link.
        target: Raw link text, only present for readable symlinks.
    """
    path: str
    size: int
    depth: int
    is_symlink: bool = False
    target: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    """
    Finalized outcome of one analysis run.

    Invariants: total_size is the sum of entry sizes, file_count equals the
    number of entries, incomplete is set only when the file-count limit cut
    the walk short.

    Attributes:
        total_size: Sum of all record sizes in bytes.
        file_count: Number of accepted records.
        directory_count: Number of directories visited.
        symlink_count: Number of accepted records that are symlinks.
        entries: Accepted records in traversal order.
        warnings: Non-fatal problems met during traversal.
        incomplete: True when a limit truncated the walk.
    """
    total_size: int = 0
    file_count: int = 0
    directory_count: int = 0
    symlink_count: int = 0
    entries: Tuple[FileRecord, ...] = field(default_factory=tuple)
    warnings: Tuple[str, ...] = field(default_factory=tuple)
    incomplete: bool = False

    def as_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (tuples become lists)."""
        data = asdict(self)
        data["entries"] = [asdict(e) for e in self.entries]
        data["warnings"] = list(self.warnings)
        return data
