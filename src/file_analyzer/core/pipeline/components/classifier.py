from __future__ import annotations

"""
Entry Classifier.

Turns the metadata of one non-directory path into an optional FileRecord,
applying the size filter, symlink target resolution and duplicate
suppression by file identity.
"""

import logging
import os
import stat
from typing import Optional

from file_analyzer.core.services.link_guard import LinkGuard
from file_analyzer.domain.analysis_models import FileRecord

logger = logging.getLogger(__name__)


class FileClassifier:
    """
    Decides whether a file or symlink becomes a record.

    A symlink's own identity and its target's identity are tracked
    independently: links are de-duplicated on the link inode, regular files
    on the file inode. A symlink and the file it points to may therefore
    both be counted once.
    """

    def __init__(self, guard: LinkGuard, min_file_size: int = 0) -> None:
        self._guard = guard
        self._min_file_size = min_file_size

    def classify(
            self,
            path: str,
            depth: int,
            link_metadata: Optional[os.stat_result] = None,
    ) -> Optional[FileRecord]:
        """
        Build the record for a path, or None if it must not be counted.

        Args:
            path: File or symlink path.
            depth: Depth relative to the analysis root.
            link_metadata: lstat result already read by the walker, if any.

        Returns:
            Optional[FileRecord]: The accepted record, or None.

        Raises:
            OSError: On IO failures other than the file having vanished.
        """
        # 1. Symlink-aware metadata and link-level duplicate check
        if link_metadata is None:
            try:
                link_metadata = os.lstat(path)
            except FileNotFoundError:
                return None

        is_symlink = stat.S_ISLNK(link_metadata.st_mode)
        if is_symlink and self._guard.is_duplicate(link_metadata):
            logger.debug(f"Duplicate symlink skipped: {path}")
            return None

        # 2. Followed-through metadata; directories belong to the traversal
        try:
            metadata = os.stat(path)
        except OSError:
            logger.debug(f"Broken or inaccessible target skipped: {path}")
            return None

        if not stat.S_ISREG(metadata.st_mode):
            return None

        # 3. Size filter
        size = metadata.st_size
        if not self.should_include(size):
            return None

        # 4. Hard link suppression
        if not is_symlink and self._guard.is_duplicate(metadata):
            logger.debug(f"Duplicate hard link skipped: {path}")
            return None

        # 5. Link text, optional
        target: Optional[str] = None
        if is_symlink:
            try:
                target = os.readlink(path)
            except OSError:
                target = None

        return FileRecord(
            path=path,
            size=size,
            depth=depth,
            is_symlink=is_symlink,
            target=target,
        )

    def should_include(self, size: int) -> bool:
        """Apply the minimum size filter."""
        return size >= self._min_file_size
