from __future__ import annotations

"""
Cycle and Duplicate Guard.

Tracks canonical directory paths already entered (cycle detection for
symbolic links) and physical file identities already counted (hard link and
symlink duplicate suppression). Both sets live for one analysis run and are
guarded by their own locks so several producers can share one guard.
"""

import logging
import os
import threading
from typing import Set

from file_analyzer.domain.errors import PathResolutionError
from file_analyzer.infra.fs import FileIdentity, identity_of

logger = logging.getLogger(__name__)


def canonicalize(path: str) -> str:
    """
    Resolve every symlink and '..' component of a path.

    Raises:
        PathResolutionError: If the path is broken, loops or is unreadable.
    """
    try:
        return os.path.realpath(path, strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(path, f"Failed to canonicalize path {path}: {e}") from e


class LinkGuard:
    """
    Shared visited-state for one traversal.

    Directory paths are inserted before their children are listed, so a
    symlink that resolves back into an ancestor is recognized as circular.
    File identities are inserted at first sight; later sights are duplicates.
    """

    def __init__(self) -> None:
        self._visited_paths: Set[str] = set()
        self._visited_identities: Set[FileIdentity] = set()
        self._paths_lock = threading.Lock()
        self._identities_lock = threading.Lock()

    # -------------------------------------------------------------------------
    # CYCLE DETECTION
    # -------------------------------------------------------------------------

    def is_circular(self, path: str) -> bool:
        """
        Check whether a path resolves into an already-visited directory.

        Args:
            path: Path to test, typically a symbolic link.

        Returns:
            bool: True if the canonical path was visited before.

        Raises:
            PathResolutionError: If canonicalization fails.
        """
        canonical = canonicalize(path)
        with self._paths_lock:
            return canonical in self._visited_paths

    def mark_visited(self, path: str) -> None:
        """
        Record the canonical form of a directory path. Idempotent.

        Raises:
            PathResolutionError: If canonicalization fails.
        """
        canonical = canonicalize(path)
        with self._paths_lock:
            self._visited_paths.add(canonical)

    # -------------------------------------------------------------------------
    # DUPLICATE DETECTION
    # -------------------------------------------------------------------------

    def is_duplicate(self, metadata: os.stat_result) -> bool:
        """
        Insert-if-absent on the file identity.

        Without an identity (unsupported platform) every file counts as
        unique and False is returned.

        Args:
            metadata: stat or lstat result of the file.

        Returns:
            bool: True if the identity was already seen (skip the file).
        """
        identity = identity_of(metadata)
        if identity is None:
            return False

        with self._identities_lock:
            if identity in self._visited_identities:
                return True
            self._visited_identities.add(identity)
            return False

    @property
    def visited_directory_count(self) -> int:
        with self._paths_lock:
            return len(self._visited_paths)
