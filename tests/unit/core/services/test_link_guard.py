from __future__ import annotations

"""
Unit tests for the Cycle and Duplicate Guard.

Verifies:
1. Canonical path tracking for cycle detection.
2. Identity-based duplicate suppression (insert-if-absent).
3. Resolution failures surface as PathResolutionError.
"""

import os
import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from file_analyzer.core.services.link_guard import LinkGuard, canonicalize
from file_analyzer.domain.errors import PathResolutionError

requires_symlinks = pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt",
                                       reason="Symlinks need POSIX semantics")


def test_mark_visited_then_circular(tmp_path: Path) -> None:
    guard = LinkGuard()
    d = tmp_path / "dir"
    d.mkdir()

    assert guard.is_circular(str(d)) is False
    guard.mark_visited(str(d))
    assert guard.is_circular(str(d)) is True


def test_mark_visited_is_idempotent(tmp_path: Path) -> None:
    guard = LinkGuard()
    guard.mark_visited(str(tmp_path))
    guard.mark_visited(str(tmp_path))
    assert guard.visited_directory_count == 1


@requires_symlinks
def test_symlink_to_visited_directory_is_circular(tmp_path: Path) -> None:
    """A link resolving back to a visited ancestor is a cycle."""
    guard = LinkGuard()
    guard.mark_visited(str(tmp_path))

    link = tmp_path / "loop"
    os.symlink(str(tmp_path), str(link))

    assert guard.is_circular(str(link)) is True


@requires_symlinks
def test_broken_link_raises_resolution_error(tmp_path: Path) -> None:
    guard = LinkGuard()
    link = tmp_path / "dangling"
    os.symlink(str(tmp_path / "missing"), str(link))

    with pytest.raises(PathResolutionError) as exc_info:
        guard.is_circular(str(link))
    assert exc_info.value.path == str(link)

    with pytest.raises(PathResolutionError):
        guard.mark_visited(str(link))


def test_canonicalize_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(PathResolutionError):
        canonicalize(str(tmp_path / "nope"))


def test_is_duplicate_insert_if_absent(tmp_path: Path) -> None:
    f = tmp_path / "f.txt"
    f.write_text("data", encoding="utf-8")
    guard = LinkGuard()
    meta = os.stat(f)

    assert guard.is_duplicate(meta) is False
    assert guard.is_duplicate(meta) is True


def test_is_duplicate_without_identity_is_never_duplicate() -> None:
    """An inode of 0 means no identity; duplicate suppression is disabled."""
    guard = LinkGuard()
    meta = MagicMock(st_dev=1, st_ino=0)

    assert guard.is_duplicate(meta) is False
    assert guard.is_duplicate(meta) is False


def test_is_duplicate_concurrent_first_wins() -> None:
    """Exactly one of many concurrent callers sees the identity as new."""
    guard = LinkGuard()
    meta = MagicMock(st_dev=7, st_ino=42)
    results = []
    results_lock = threading.Lock()

    def worker() -> None:
        r = guard.is_duplicate(meta)
        with results_lock:
            results.append(r)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(False) == 1
    assert results.count(True) == 15
