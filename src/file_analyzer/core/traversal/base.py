from __future__ import annotations

"""
Base Definitions for Traversal Strategies.

Provides the abstract traversal contract and the per-node processing shared
by every strategy. Concrete strategies only decide the order in which
pending nodes are expanded.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from file_analyzer.core.pipeline.components.classifier import FileClassifier
from file_analyzer.core.pipeline.components.filters import should_ignore
from file_analyzer.core.pipeline.components.walker import DirectoryWalker, DirEntry
from file_analyzer.core.services.collector import ResultCollector
from file_analyzer.core.services.link_guard import LinkGuard
from file_analyzer.domain.config import AnalyzerConfig
from file_analyzer.domain.errors import PathResolutionError

logger = logging.getLogger(__name__)

ROOT_DEPTH = 0


@dataclass(frozen=True)
class PendingNode:
    """A node waiting to be visited. Metadata is None for the root."""
    path: str
    depth: int
    metadata: Optional[os.stat_result] = None

    @classmethod
    def from_entry(cls, entry: DirEntry) -> "PendingNode":
        return cls(path=entry.path, depth=entry.depth, metadata=entry.metadata)


class TraversalStrategy(ABC):
    """
    Abstract base class for directory traversal algorithms.

    Implementations must visit the same set of nodes for a given tree and
    configuration; only the visiting order may differ.
    """

    name: str = ""

    @abstractmethod
    def traverse(
            self,
            root: str,
            config: AnalyzerConfig,
            walker: DirectoryWalker,
            guard: LinkGuard,
            collector: ResultCollector,
    ) -> None:
        """
        Walk the tree under root and leave every finding in the collector.

        Filesystem failures are recorded as warnings; the walk itself never
        aborts.

        Args:
            root: Absolute path of the analysis root.
            config: Validated analysis settings.
            walker: Directory reader enforcing the depth limit.
            guard: Shared cycle/duplicate state.
            collector: Result sink.
        """

    # -------------------------------------------------------------------------
    # SHARED NODE PROCESSING
    # -------------------------------------------------------------------------

    @staticmethod
    def is_ignored(node: PendingNode, root: str, config: AnalyzerConfig) -> bool:
        return should_ignore(node.path, root, config.ignore_rx)

    @staticmethod
    def limit_reached(config: AnalyzerConfig, collector: ResultCollector) -> bool:
        """Check max_files and flag the result incomplete when it is hit."""
        if config.max_files is None:
            return False
        if collector.file_count() >= config.max_files:
            collector.set_incomplete(True)
            return True
        return False

    @staticmethod
    def visit(
            node: PendingNode,
            config: AnalyzerConfig,
            walker: DirectoryWalker,
            guard: LinkGuard,
            classifier: FileClassifier,
            collector: ResultCollector,
    ) -> List[DirEntry]:
        """
        Process one node and return the children still to be visited.

        Args:
            node: The node to process.
            config: Validated analysis settings.
            walker: Directory reader.
            guard: Shared cycle/duplicate state.
            classifier: Record builder for files and symlinks.
            collector: Result sink.

        Returns:
            List[DirEntry]: Children of a directory node, otherwise empty.
        """
        path = node.path
        metadata = node.metadata

        # The root is validated as a directory, so a symlinked root is followed
        if metadata is None:
            try:
                metadata = os.stat(path) if node.depth == ROOT_DEPTH else os.lstat(path)
            except OSError as e:
                collector.add_warning(f"Cannot access {path}: {e}")
                return []

        mode = metadata.st_mode

        if stat.S_ISLNK(mode):
            try:
                circular = guard.is_circular(path)
            except PathResolutionError as e:
                collector.add_warning(f"Cannot resolve symlink {path}: {e}")
                return []
            if circular:
                collector.add_warning(f"Circular symlink detected: {path}")
                return []

        if stat.S_ISDIR(mode):
            try:
                guard.mark_visited(path)
            except PathResolutionError as e:
                collector.add_warning(f"Failed to mark visited {path}: {e}")
            collector.increment_directory_count()

            try:
                return walker.list_children(path, node.depth + 1, config.max_depth)
            except OSError as e:
                collector.add_warning(f"Cannot read directory {path}: {e}")
                return []

        if stat.S_ISREG(mode) or stat.S_ISLNK(mode):
            try:
                record = classifier.classify(path, node.depth, metadata)
            except OSError as e:
                collector.add_warning(f"Cannot read file {path}: {e}")
                return []
            if record is not None:
                collector.add_entry(record)

        return []
