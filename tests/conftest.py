from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample directory trees and configuration dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def write_bytes(path: Path, size: int) -> Path:
    """Create a file of exactly `size` bytes, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small tree with known sizes.

    Structure:
        root/
            a/
                b.txt   (10 bytes)
                c.txt   (20 bytes)
            d.txt       (5 bytes)
    """
    root = tmp_path / "root"
    write_bytes(root / "a" / "b.txt", 10)
    write_bytes(root / "a" / "c.txt", 20)
    write_bytes(root / "d.txt", 5)
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """
    Create a tree three levels deep plus a few ignorable entries.

    Structure:
        root/
            top.bin         (100 bytes)  depth 1
            skip.tmp        (7 bytes)    depth 1
            l1/
                mid.bin     (50 bytes)   depth 2
                cache.tmp/
                    x.bin   (3 bytes)    depth 3
                l2/
                    low.bin (25 bytes)   depth 3
    """
    root = tmp_path / "deep"
    write_bytes(root / "top.bin", 100)
    write_bytes(root / "skip.tmp", 7)
    write_bytes(root / "l1" / "mid.bin", 50)
    write_bytes(root / "l1" / "cache.tmp" / "x.bin", 3)
    write_bytes(root / "l1" / "l2" / "low.bin", 25)
    return root


@pytest.fixture
def mock_config_dict(sample_tree: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys of 'file_analyzer.domain.config.get_default_config'.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "root_path": str(sample_tree),

        # Limits
        "max_depth": None,
        "max_files": None,
        "min_file_size": 0,

        # Traversal
        "strategy": "depth-first",
        "ignore_patterns": [],
        "thread_count": 1,
    }
