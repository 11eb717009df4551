from __future__ import annotations

"""
Unit tests for the Entry Classifier.

Verifies:
1. Regular files become records with size and depth.
2. Minimum size filtering.
3. Hard link de-duplication (first one wins).
4. Symlink handling: target text, broken links, links to directories.
"""

import os
from pathlib import Path

import pytest

from file_analyzer.core.pipeline.components.classifier import FileClassifier
from file_analyzer.core.services.link_guard import LinkGuard

posix_only = pytest.mark.skipif(os.name == "nt", reason="Requires POSIX links")


def test_regular_file_record(tmp_path: Path) -> None:
    f = tmp_path / "file.bin"
    f.write_bytes(b"1234567")

    record = FileClassifier(LinkGuard()).classify(str(f), depth=1)

    assert record is not None
    assert record.path == str(f)
    assert record.size == 7
    assert record.depth == 1
    assert record.is_symlink is False
    assert record.target is None


def test_min_file_size_filters_small_files(tmp_path: Path) -> None:
    small = tmp_path / "small"
    small.write_bytes(b"x" * 99)
    exact = tmp_path / "exact"
    exact.write_bytes(b"x" * 100)

    classifier = FileClassifier(LinkGuard(), min_file_size=100)

    assert classifier.classify(str(small), depth=1) is None
    assert classifier.classify(str(exact), depth=1) is not None


def test_vanished_file_returns_none(tmp_path: Path) -> None:
    assert FileClassifier(LinkGuard()).classify(str(tmp_path / "gone"), depth=1) is None


@posix_only
def test_hard_links_counted_once(tmp_path: Path) -> None:
    original = tmp_path / "a.txt"
    original.write_bytes(b"x" * 64)
    os.link(str(original), str(tmp_path / "b.txt"))

    classifier = FileClassifier(LinkGuard())
    first = classifier.classify(str(original), depth=1)
    second = classifier.classify(str(tmp_path / "b.txt"), depth=1)

    assert first is not None
    assert second is None


def test_identical_content_in_separate_files_both_count(tmp_path: Path) -> None:
    """Only shared inodes are de-duplicated, never equal bytes."""
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"same payload")
    second.write_bytes(b"same payload")

    classifier = FileClassifier(LinkGuard())
    a = classifier.classify(str(first), depth=1)
    b = classifier.classify(str(second), depth=1)

    assert a is not None and b is not None
    assert a.path != b.path
    assert a.size == b.size == 12


@posix_only
def test_symlink_record_carries_target(tmp_path: Path) -> None:
    real = tmp_path / "real.txt"
    real.write_bytes(b"x" * 12)
    link = tmp_path / "link.txt"
    os.symlink("real.txt", str(link))

    record = FileClassifier(LinkGuard()).classify(str(link), depth=2)

    assert record is not None
    assert record.is_symlink is True
    assert record.target == "real.txt"
    assert record.size == 12
    assert record.depth == 2


@posix_only
def test_symlink_and_target_are_tracked_independently(tmp_path: Path) -> None:
    """A link and the file it points to are de-duplicated on different identities."""
    real = tmp_path / "real.txt"
    real.write_bytes(b"x" * 3)
    link = tmp_path / "link.txt"
    os.symlink(str(real), str(link))

    classifier = FileClassifier(LinkGuard())
    assert classifier.classify(str(real), depth=1) is not None
    assert classifier.classify(str(link), depth=1) is not None
    # Seen again: both are duplicates now
    assert classifier.classify(str(real), depth=1) is None
    assert classifier.classify(str(link), depth=1) is None


@posix_only
def test_broken_symlink_returns_none(tmp_path: Path) -> None:
    link = tmp_path / "dangling"
    os.symlink(str(tmp_path / "missing"), str(link))

    assert FileClassifier(LinkGuard()).classify(str(link), depth=1) is None


@posix_only
def test_symlink_to_directory_returns_none(tmp_path: Path) -> None:
    d = tmp_path / "dir"
    d.mkdir()
    link = tmp_path / "dirlink"
    os.symlink(str(d), str(link))

    assert FileClassifier(LinkGuard()).classify(str(link), depth=1) is None


def test_uses_supplied_link_metadata(tmp_path: Path) -> None:
    f = tmp_path / "file.bin"
    f.write_bytes(b"abc")
    meta = os.lstat(f)

    record = FileClassifier(LinkGuard()).classify(str(f), depth=3, link_metadata=meta)

    assert record is not None
    assert record.size == 3
