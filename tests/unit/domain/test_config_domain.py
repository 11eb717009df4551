from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. JSON config file loading and resilience against bad files.
3. Merging of override layers.
4. Strategy selector parsing.
"""

import json
from pathlib import Path

import pytest

from file_analyzer.domain.config import (
    CONFIG_KEYS,
    TraversalStrategyKind,
    get_default_config,
    load_config_file,
    merge_config,
)
from file_analyzer.domain.errors import ConfigurationError


def test_default_config_keys() -> None:
    defaults = get_default_config()

    assert set(defaults) == set(CONFIG_KEYS)
    assert defaults["strategy"] == "depth-first"
    assert defaults["max_depth"] is None
    assert defaults["thread_count"] >= 1


def test_load_config_file_drops_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"max_depth": 2, "colour": "blue"}), encoding="utf-8")

    assert load_config_file(str(path)) == {"max_depth": 2}


def test_load_config_file_corrupt_json(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text("{ not json", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_config_file(str(path))


def test_load_config_file_requires_object(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="JSON object"):
        load_config_file(str(path))


def test_load_config_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read config file"):
        load_config_file(str(tmp_path / "absent.json"))


def test_merge_config_skips_none_and_unknown() -> None:
    base = {"max_depth": 3, "strategy": "dfs"}
    merged = merge_config(base, {"max_depth": None, "strategy": "bfs", "bogus": 1})

    assert merged == {"max_depth": 3, "strategy": "bfs"}
    assert base["strategy"] == "dfs"


def test_strategy_parse_rejects_unknown() -> None:
    assert TraversalStrategyKind.parse(" BFS ") is TraversalStrategyKind.BREADTH_FIRST
    with pytest.raises(ConfigurationError):
        TraversalStrategyKind.parse("sideways")
