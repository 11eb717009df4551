from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path normalization, file identity resolution and
result persistence. Acts as an abstraction over the 'os' module so that
platform differences (inode availability, separators) stay in one place.
"""

import os
import sys
from typing import NamedTuple, Optional, Tuple

# -----------------------------------------------------------------------------
# FILE IDENTITY
# -----------------------------------------------------------------------------

class FileIdentity(NamedTuple):
    """Physical identity of a file: device plus inode (or file index)."""
    device: int
    inode: int


def identity_of(metadata: os.stat_result) -> Optional[FileIdentity]:
    """
    Compute the platform file identity from stat metadata.

    Filesystems without a stable cheap index report an inode of 0 (e.g.
    Windows directory-entry stats). In that case no identity is returned and
    duplicate suppression is disabled for the file.

    Args:
        metadata: Result of os.stat or os.lstat.

    Returns:
        Optional[FileIdentity]: The identity, or None when unavailable.
    """
    inode = getattr(metadata, "st_ino", 0)
    if not inode:
        return None
    return FileIdentity(device=int(metadata.st_dev), inode=int(inode))

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_slash_path(path: str) -> str:
    """Convert host separators (os.sep, os.altsep) to '/'; other characters are kept."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    if os.altsep and os.altsep != "/":
        path = path.replace(os.altsep, "/")
    return path

# -----------------------------------------------------------------------------
# OUTPUT PERSISTENCE API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def write_output(content: str, output_path: Optional[str] = None) -> None:
    """
    Write rendered output to a file, or to stdout when no path is given.

    Args:
        content: Fully rendered document.
        output_path: Destination file. Parent directories are created.

    Raises:
        OSError: If the destination cannot be created or written.
    """
    if not output_path:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        return

    parent = os.path.dirname(os.path.abspath(output_path))
    ok, err = safe_mkdir(parent)
    if not ok:
        raise OSError(f"Cannot create output directory '{parent}': {err}")

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)
