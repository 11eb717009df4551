from __future__ import annotations

"""
Ignore Pattern Engine.

Translates shell-style glob patterns into compiled regular expressions and
decides whether a traversal node must be skipped together with its whole
subtree.
"""

import fnmatch
import os
import re
from typing import Iterable, List, Sequence

from file_analyzer.domain.errors import ConfigurationError
from file_analyzer.infra.fs import to_slash_path

# -----------------------------------------------------------------------------
# PATTERN COMPILATION
# -----------------------------------------------------------------------------

def compile_ignore_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Compile glob patterns into regex objects.

    Unlike a best-effort filter, an ignore set the user typed wrong would
    silently change the analysis, so malformed globs are rejected.

    Args:
        patterns: Glob strings such as '*.tmp' or 'node_modules'.

    Returns:
        List[re.Pattern]: One compiled regex per pattern.

    Raises:
        ConfigurationError: If a pattern is empty or malformed.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        _check_glob(p)
        try:
            compiled.append(re.compile(fnmatch.translate(p)))
        except re.error as e:
            raise ConfigurationError(f"Invalid glob pattern '{p}': {e}") from e
    return compiled


def _check_glob(pattern: str) -> None:
    """Reject empty globs and unclosed character classes."""
    if not pattern or not pattern.strip():
        raise ConfigurationError("Invalid glob pattern '': pattern is empty")

    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            # A ']' right after the opening bracket is a literal member
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise ConfigurationError(
                    f"Invalid glob pattern '{pattern}': unclosed character class"
                )
            i = close
        i += 1

# -----------------------------------------------------------------------------
# MATCHING
# -----------------------------------------------------------------------------

def matches_any(name: str, compiled_patterns: Sequence[re.Pattern]) -> bool:
    """
    Verify if a string matches at least one compiled pattern.

    Args:
        name: Path or file name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found.
    """
    return any(rx.match(name) for rx in compiled_patterns)


def should_ignore(path: str, root: str, compiled_patterns: Sequence[re.Pattern]) -> bool:
    """
    Decide whether a node is excluded by the ignore set.

    Each pattern is tried against the slash-separated path relative to the
    analysis root and against the base name, so both '*.tmp' and
    'build/cache' behave as users expect. The root itself is never ignored.

    Args:
        path: Node path as produced by the traversal.
        root: Analysis root.
        compiled_patterns: Output of compile_ignore_patterns.

    Returns:
        bool: True if the node and its subtree must be skipped.
    """
    if not compiled_patterns:
        return False

    rel_path = os.path.relpath(path, root)
    if rel_path == os.curdir:
        return False

    rel_path = to_slash_path(rel_path)
    name = os.path.basename(path)
    return matches_any(rel_path, compiled_patterns) or matches_any(name, compiled_patterns)
