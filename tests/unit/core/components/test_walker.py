from __future__ import annotations

"""
Unit tests for the Directory Walker.

Verifies:
1. Children are listed with depth annotations and sorted by name.
2. The depth limit short-circuits before any filesystem access.
3. Errors opening the directory propagate.
"""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from file_analyzer.core.pipeline.components.walker import DirectoryWalker


def test_list_children_sorted_with_depth(sample_tree: Path) -> None:
    entries = DirectoryWalker().list_children(str(sample_tree), current_depth=1)

    assert [os.path.basename(e.path) for e in entries] == ["a", "d.txt"]
    assert all(e.depth == 1 for e in entries)
    assert entries[1].metadata.st_size == 5


def test_depth_limit_does_not_touch_filesystem(tmp_path: Path) -> None:
    """Beyond max_depth the walker returns [] even for unreadable paths."""
    walker = DirectoryWalker()
    with patch("os.scandir") as mock_scandir:
        result = walker.list_children(str(tmp_path / "does-not-exist"), current_depth=3, max_depth=2)

    assert result == []
    mock_scandir.assert_not_called()


def test_depth_at_limit_is_listed(sample_tree: Path) -> None:
    entries = DirectoryWalker().list_children(str(sample_tree), current_depth=2, max_depth=2)
    assert len(entries) == 2


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        DirectoryWalker().list_children(str(tmp_path / "missing"), current_depth=1)


def test_should_traverse_depth() -> None:
    assert DirectoryWalker.should_traverse_depth(10, None) is True
    assert DirectoryWalker.should_traverse_depth(2, 2) is True
    assert DirectoryWalker.should_traverse_depth(3, 2) is False


@pytest.mark.skipif(os.name == "nt", reason="Symlinks need POSIX semantics")
def test_children_metadata_is_symlink_aware(tmp_path: Path) -> None:
    target = tmp_path / "real.txt"
    target.write_text("hello", encoding="utf-8")
    os.symlink(str(target), str(tmp_path / "link.txt"))

    entries = {os.path.basename(e.path): e for e in DirectoryWalker().list_children(str(tmp_path), 1)}

    assert stat.S_ISLNK(entries["link.txt"].metadata.st_mode)
    assert stat.S_ISREG(entries["real.txt"].metadata.st_mode)
