from __future__ import annotations

"""
Unit tests for the Output Formatters.

Verifies:
1. Format name and alias parsing.
2. Text summary layout (summary, incomplete notice, warnings, files).
3. JSON and metafile documents are valid JSON with the expected shape.
4. Encoding failures raise SerializationError.
"""

import json
import os
from unittest.mock import patch

import pytest

from file_analyzer.core.output.formatters import (
    OutputFormat,
    format_json,
    format_metafile,
    format_text,
    format_tree,
    render,
)
from file_analyzer.domain.analysis_models import AnalysisResult, FileRecord
from file_analyzer.domain.errors import SerializationError

ROOT = os.path.join(os.sep, "srv", "root")


@pytest.fixture
def result() -> AnalysisResult:
    entries = (
        FileRecord(path=os.path.join(ROOT, "a", "b.txt"), size=10, depth=2),
        FileRecord(path=os.path.join(ROOT, "a", "c.txt"), size=20, depth=2),
        FileRecord(path=os.path.join(ROOT, "d.txt"), size=5, depth=1, is_symlink=True, target="a/b.txt"),
    )
    return AnalysisResult(
        total_size=35,
        file_count=3,
        directory_count=2,
        symlink_count=1,
        entries=entries,
        warnings=("Cannot read directory /srv/root/x: denied",),
        incomplete=True,
    )


def test_output_format_parse() -> None:
    assert OutputFormat.parse("TEXT") is OutputFormat.TEXT
    assert OutputFormat.parse("meta") is OutputFormat.METAFILE
    assert OutputFormat.parse(" tree ") is OutputFormat.TREE
    with pytest.raises(ValueError):
        OutputFormat.parse("xml")


def test_format_text(result: AnalysisResult) -> None:
    text = format_text(result)

    assert "=== File Analysis Results ===" in text
    assert "Total Size: 35 bytes (0.00 MB)" in text
    assert "File Count: 3" in text
    assert "Directory Count: 2" in text
    assert "Symlink Count: 1" in text
    assert "Analysis incomplete" in text
    assert "=== Warnings (1) ===" in text
    assert "  - Cannot read directory /srv/root/x: denied" in text
    assert f"  [Depth 2] 10 bytes: {os.path.join(ROOT, 'a', 'b.txt')}" in text
    assert f"  [Depth 1] 5 bytes: {os.path.join(ROOT, 'd.txt')} -> a/b.txt" in text


def test_format_text_complete_run_has_no_notice() -> None:
    text = format_text(AnalysisResult())
    assert "incomplete" not in text
    assert "Warnings" not in text
    assert "Files (" not in text


def test_format_json(result: AnalysisResult) -> None:
    data = json.loads(format_json(result))

    assert data["total_size"] == 35
    assert data["incomplete"] is True
    assert data["entries"][2]["target"] == "a/b.txt"
    assert data["warnings"] == ["Cannot read directory /srv/root/x: denied"]


def test_format_metafile_relative_to_root(result: AnalysisResult) -> None:
    data = json.loads(format_metafile(result, ROOT))

    assert set(data["inputs"]) == {"a", "a/b.txt", "a/c.txt", "d.txt"}
    assert data["inputs"]["a"]["bytes"] == 30
    out = data["outputs"]["analysis"]
    assert out["bytes"] == 35
    assert out["entryPoint"] == ROOT.replace(os.sep, "/")


def test_format_tree(result: AnalysisResult) -> None:
    text = format_tree(result, ROOT)
    assert text.splitlines()[0] == f"{ROOT} (35 B)"
    assert "├── a (30 B)" in text
    assert "└── d.txt (5 B)" in text
    assert "incomplete" in text


def test_render_dispatch(result: AnalysisResult) -> None:
    assert render(result, OutputFormat.TEXT).startswith("=== File Analysis Results ===")
    assert "inputs" in json.loads(render(result, OutputFormat.METAFILE, ROOT))


def test_json_encoding_failure_raises_serialization_error(result: AnalysisResult) -> None:
    with patch("file_analyzer.core.output.formatters.json.dumps", side_effect=TypeError("boom")):
        with pytest.raises(SerializationError):
            format_json(result)
