from __future__ import annotations

"""
Output Formatters.

Renders an AnalysisResult into one of the supported document formats:
- text: human-readable summary, warnings and file list.
- json: the raw result as pretty-printed JSON.
- metafile: size tree serialized into the bundler metafile schema.
- tree: ASCII tree with per-node sizes.
"""

import json
import logging
from enum import Enum
from typing import Any, List, Optional

from file_analyzer.core.analysis.metafile import serialize_tree
from file_analyzer.core.analysis.size_tree import build_size_tree
from file_analyzer.core.analysis.tree_renderer import render_size_tree
from file_analyzer.domain.analysis_models import AnalysisResult
from file_analyzer.domain.constants import BYTES_PER_MB, OUTPUT_FORMAT_ALIASES
from file_analyzer.domain.errors import SerializationError
from file_analyzer.infra.fs import to_slash_path

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    METAFILE = "metafile"
    TREE = "tree"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        """
        Resolve a format name or alias.

        Raises:
            ValueError: If the name is not recognized.
        """
        canonical = OUTPUT_FORMAT_ALIASES.get(str(value).strip().lower())
        if canonical is None:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid output format '{value}'. Use: {choices}")
        return cls(canonical)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(
        result: AnalysisResult,
        fmt: OutputFormat = OutputFormat.METAFILE,
        root_path: Optional[str] = None,
) -> str:
    """
    Render a result in the requested format.

    Args:
        result: Finalized analysis result.
        fmt: Target format.
        root_path: Analyzed root; record paths are made relative to it in
                   the metafile and tree formats.

    Returns:
        str: The rendered document.

    Raises:
        SerializationError: If JSON encoding fails.
    """
    logger.debug(f"Rendering result as {fmt.value}")
    if fmt == OutputFormat.TEXT:
        return format_text(result)
    if fmt == OutputFormat.JSON:
        return format_json(result)
    if fmt == OutputFormat.TREE:
        return format_tree(result, root_path)
    return format_metafile(result, root_path)


def format_text(result: AnalysisResult) -> str:
    lines: List[str] = [
        "=== File Analysis Results ===",
        "",
        f"Total Size: {result.total_size} bytes ({result.total_size / BYTES_PER_MB:.2f} MB)",
        f"File Count: {result.file_count}",
        f"Directory Count: {result.directory_count}",
        f"Symlink Count: {result.symlink_count}",
    ]

    if result.incomplete:
        lines.extend(["", "WARNING: Analysis incomplete (limits reached)"])

    if result.warnings:
        lines.extend(["", f"=== Warnings ({len(result.warnings)}) ==="])
        lines.extend(f"  - {w}" for w in result.warnings)

    if result.entries:
        lines.extend(["", f"=== Files ({len(result.entries)}) ==="])
        for entry in result.entries:
            target = f" -> {entry.target}" if entry.is_symlink and entry.target else ""
            lines.append(f"  [Depth {entry.depth}] {entry.size} bytes: {entry.path}{target}")

    return "\n".join(lines) + "\n"


def format_json(result: AnalysisResult) -> str:
    return _dump_json(result.as_dict())


def format_metafile(result: AnalysisResult, root_path: Optional[str] = None) -> str:
    """Build the size tree and emit it as a metafile document."""
    tree = build_size_tree(result.entries, base_path=root_path)
    metafile = serialize_tree(
        tree,
        entry_point=to_slash_path(root_path) if root_path else None,
    )
    return _dump_json(metafile.as_dict())


def format_tree(result: AnalysisResult, root_path: Optional[str] = None) -> str:
    tree = build_size_tree(result.entries, base_path=root_path)
    lines = render_size_tree(tree, root_label=root_path or ".")
    if result.incomplete:
        lines.append("(incomplete: file limit reached)")
    return "\n".join(lines) + "\n"


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _dump_json(data: Any) -> str:
    try:
        return json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode output as JSON: {e}") from e
