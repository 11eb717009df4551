from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from file_analyzer.domain.constants import APP_NAME, APP_VERSION, DEFAULT_OUTPUT_FORMAT

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the analyzer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Walk a directory tree, attribute sizes to files and directories, "
            "and emit a summary or a bundler-style metafile."
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Target ---
    p.add_argument(
        "root_path",
        metavar="PATH",
        nargs="?",
        default=None,
        help="Directory to analyze (default: current directory).",
    )

    # --- Traversal Limits ---
    p.add_argument(
        "-d", "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Deepest level to report (root children are depth 1).",
    )
    p.add_argument(
        "-n", "--max-files",
        dest="max_files",
        type=int,
        default=None,
        help="Stop after this many files; the result is marked incomplete.",
    )
    p.add_argument(
        "-m", "--min-size",
        dest="min_file_size",
        type=int,
        default=None,
        help="Ignore files smaller than this many bytes.",
    )

    # --- Traversal Behavior ---
    p.add_argument(
        "-s", "--strategy",
        dest="strategy",
        default=None,
        help="depth-first (dfs) or breadth-first (bfs).",
    )
    p.add_argument(
        "-t", "--threads",
        dest="thread_count",
        type=int,
        default=None,
        help="Worker pool size (default: number of CPUs).",
    )
    p.add_argument(
        "-i", "--ignore",
        dest="ignore_patterns",
        action="append",
        default=None,
        help="Glob of names or relative paths to skip. Repeatable, CSV accepted.",
    )

    # --- Output ---
    p.add_argument(
        "-f", "--format",
        dest="output_format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="text, json, metafile or tree (default: %(default)s).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the result to this file instead of stdout.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values (overridden by flags).",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the validated configuration and exit.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress at INFO level.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Options left unset map to None and do not override lower layers.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path
    overrides["max_depth"] = args.max_depth
    overrides["max_files"] = args.max_files
    overrides["min_file_size"] = args.min_file_size
    overrides["strategy"] = args.strategy
    overrides["thread_count"] = args.thread_count

    if args.ignore_patterns:
        patterns: List[str] = []
        for raw in args.ignore_patterns:
            patterns.extend(_split_csv(raw) or [])
        overrides["ignore_patterns"] = patterns

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
