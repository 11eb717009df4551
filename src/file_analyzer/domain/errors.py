from __future__ import annotations

"""
Analyzer Error Taxonomy.

Defines the exception hierarchy shared by the configuration, traversal and
output layers. Only configuration and serialization errors are fatal;
path resolution failures are downgraded to warnings by the traversal.
"""


class AnalyzerError(Exception):
    """Base class for every error raised by the analyzer."""


class ConfigurationError(AnalyzerError):
    """Invalid root path, limits, strategy or ignore glob. Aborts before traversal."""


class PathResolutionError(AnalyzerError):
    """
    Canonicalization of a path failed (broken link, loop, permission denied).

    Attributes:
        path: The path that could not be resolved.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class SerializationError(AnalyzerError):
    """The analysis result could not be encoded for output."""
