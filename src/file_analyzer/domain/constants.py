from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide identifiers, default limits and the
vocabulary accepted for traversal strategies and output formats.
"""

from typing import Dict

APP_NAME = "file-analyzer"
APP_VERSION = "0.1.0"

DEFAULT_MIN_FILE_SIZE = 0
DEFAULT_STRATEGY = "depth-first"
DEFAULT_OUTPUT_FORMAT = "metafile"

# Key of the synthetic aggregate entry in the metafile "outputs" map
METAFILE_OUTPUT_KEY = "analysis"

BYTES_PER_MB = 1_048_576

# -----------------------------------------------------------------------------
# STRATEGY ALIASES
# -----------------------------------------------------------------------------
STRATEGY_ALIASES: Dict[str, str] = {
    "depth-first": "depth-first",
    "dfs": "depth-first",
    "depth": "depth-first",
    "breadth-first": "breadth-first",
    "bfs": "breadth-first",
    "breadth": "breadth-first",
}

OUTPUT_FORMAT_ALIASES: Dict[str, str] = {
    "text": "text",
    "json": "json",
    "metafile": "metafile",
    "meta": "metafile",
    "tree": "tree",
}
