from __future__ import annotations

"""
Directory Entry Reader.

Lists the immediate children of one directory with their symlink-aware
metadata and depth annotation. This is the only place where the depth
limit is enforced.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntry:
    """
    A child discovered by the walker.

    Attributes:
        path: Full path of the child.
        metadata: lstat result of the child.
        depth: Depth of the child relative to the analysis root.
    """
    path: str
    metadata: os.stat_result
    depth: int


class DirectoryWalker:
    """Reads single directories on behalf of the traversal strategies."""

    def list_children(
            self,
            dir_path: str,
            current_depth: int,
            max_depth: Optional[int] = None,
    ) -> List[DirEntry]:
        """
        List the immediate children of a directory.

        Args:
            dir_path: Directory to read.
            current_depth: Depth at which the listed children sit.
            max_depth: Optional deepest allowed depth.

        Returns:
            List[DirEntry]: Children sorted by name. Empty, without touching
                            the filesystem, when current_depth > max_depth.

        Raises:
            OSError: If the directory itself cannot be opened.
        """
        if not self.should_traverse_depth(current_depth, max_depth):
            return []

        entries: List[DirEntry] = []
        with os.scandir(dir_path) as it:
            for dir_entry in it:
                try:
                    metadata = dir_entry.stat(follow_symlinks=False)
                except OSError:
                    # Vanished or unreadable child: below the warning threshold
                    logger.debug(f"Skipping unreadable entry: {dir_entry.path}")
                    continue
                entries.append(DirEntry(path=dir_entry.path, metadata=metadata, depth=current_depth))

        entries.sort(key=lambda e: os.path.basename(e.path))
        return entries

    @staticmethod
    def should_traverse_depth(current_depth: int, max_depth: Optional[int]) -> bool:
        """True if entries at current_depth are within the depth limit."""
        if max_depth is None:
            return True
        return current_depth <= max_depth
