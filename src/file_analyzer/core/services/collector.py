from __future__ import annotations

"""
Thread-Safe Result Aggregation Service.

Accumulates accepted file records, counters and warnings produced by the
traversal. Writers may call it concurrently; every mutation is serialized
behind a single lock and no lock is ever held across filesystem I/O.
"""

import logging
import threading
from typing import List

from file_analyzer.domain.analysis_models import AnalysisResult, FileRecord

logger = logging.getLogger(__name__)


class ResultCollector:
    """
    Single-use sink that turns a traversal into an AnalysisResult.

    Once finalize() has been called the collector is spent: further writes
    or a second finalize raise RuntimeError.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[FileRecord] = []
        self._warnings: List[str] = []
        self._total_size = 0
        self._file_count = 0
        self._directory_count = 0
        self._symlink_count = 0
        self._incomplete = False
        self._finalized = False

    # -------------------------------------------------------------------------
    # WRITERS
    # -------------------------------------------------------------------------

    def add_entry(self, entry: FileRecord) -> None:
        """Append an accepted record and update the size/count totals."""
        with self._lock:
            self._ensure_open()
            self._entries.append(entry)
            self._total_size += entry.size
            self._file_count += 1
            if entry.is_symlink:
                self._symlink_count += 1

    def add_warning(self, warning: str) -> None:
        """Record a non-fatal traversal problem."""
        with self._lock:
            self._ensure_open()
            self._warnings.append(warning)
        logger.warning(warning)

    def increment_directory_count(self) -> None:
        with self._lock:
            self._ensure_open()
            self._directory_count += 1

    def set_incomplete(self, incomplete: bool = True) -> None:
        with self._lock:
            self._ensure_open()
            self._incomplete = incomplete

    # -------------------------------------------------------------------------
    # READERS
    # -------------------------------------------------------------------------

    def file_count(self) -> int:
        """Number of records added so far (used for max_files checks)."""
        with self._lock:
            return self._file_count

    def finalize(self) -> AnalysisResult:
        """
        Consume the collector and build the immutable result.

        Returns:
            AnalysisResult: Totals, records and warnings of the run.

        Raises:
            RuntimeError: If the collector was already finalized.
        """
        with self._lock:
            self._ensure_open()
            self._finalized = True
            result = AnalysisResult(
                total_size=self._total_size,
                file_count=self._file_count,
                directory_count=self._directory_count,
                symlink_count=self._symlink_count,
                entries=tuple(self._entries),
                warnings=tuple(self._warnings),
                incomplete=self._incomplete,
            )
            self._entries = []
            self._warnings = []

        logger.debug(
            f"Collector finalized: {result.file_count} files, "
            f"{result.directory_count} dirs, {result.total_size} bytes"
        )
        return result

    def _ensure_open(self) -> None:
        if self._finalized:
            raise RuntimeError("ResultCollector has already been finalized.")
