from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration (a plain dictionary, as consumed
by the CLI and the validator), the validated AnalyzerConfig model and the
loader for optional JSON configuration files.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from file_analyzer.domain.constants import (
    DEFAULT_MIN_FILE_SIZE,
    DEFAULT_STRATEGY,
    STRATEGY_ALIASES,
)
from file_analyzer.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# STRATEGY SELECTOR
# -----------------------------------------------------------------------------

class TraversalStrategyKind(str, Enum):
    """Selector for the traversal algorithm."""

    DEPTH_FIRST = "depth-first"
    BREADTH_FIRST = "breadth-first"

    @classmethod
    def parse(cls, value: str) -> "TraversalStrategyKind":
        """
        Resolve a strategy name or alias (dfs, bfs, depth, breadth).

        Raises:
            ConfigurationError: If the name is not recognized.
        """
        key = str(value).strip().lower()
        canonical = STRATEGY_ALIASES.get(key)
        if canonical is None:
            raise ConfigurationError(f"Invalid traversal strategy: {value}")
        return cls(canonical)


# -----------------------------------------------------------------------------
# CONFIGURATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Validated, immutable configuration for a single analysis run.

    Attributes:
        root_path: Absolute path of the directory to analyze.
        max_depth: Deepest record depth to report (root children are depth 1).
        max_files: Maximum number of accepted records before stopping.
        min_file_size: Files smaller than this (in bytes) are ignored.
        strategy: Traversal algorithm selector.
        ignore_patterns: Raw glob patterns as provided by the user.
        ignore_rx: Compiled form of ignore_patterns.
        thread_count: Worker pool size, within [1, available CPUs].
    """
    root_path: str
    max_depth: Optional[int] = None
    max_files: Optional[int] = None
    min_file_size: int = DEFAULT_MIN_FILE_SIZE
    strategy: TraversalStrategyKind = TraversalStrategyKind.DEPTH_FIRST
    ignore_patterns: Tuple[str, ...] = ()
    ignore_rx: Tuple[re.Pattern, ...] = field(default=(), compare=False, repr=False)
    thread_count: int = 1

    def as_dict(self) -> Dict[str, Any]:
        """Plain representation suitable for --dump-config."""
        return {
            "root_path": self.root_path,
            "max_depth": self.max_depth,
            "max_files": self.max_files,
            "min_file_size": self.min_file_size,
            "strategy": self.strategy.value,
            "ignore_patterns": list(self.ignore_patterns),
            "thread_count": self.thread_count,
        }


def available_cpu_count() -> int:
    """Number of CPUs usable by the worker pool (never less than 1)."""
    return os.cpu_count() or 1


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "root_path": os.getcwd(),

        # Limits
        "max_depth": None,
        "max_files": None,
        "min_file_size": DEFAULT_MIN_FILE_SIZE,

        # Traversal
        "strategy": DEFAULT_STRATEGY,
        "ignore_patterns": [],
        "thread_count": available_cpu_count(),
    }


CONFIG_KEYS: List[str] = list(get_default_config().keys())


# -----------------------------------------------------------------------------
# FILE LOADING
# -----------------------------------------------------------------------------

def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Unknown keys are discarded with a warning so that a stale file cannot
    pollute the schema.

    Args:
        path: Path to a JSON file holding a flat object.

    Returns:
        Dict[str, Any]: Known keys found in the file.

    Raises:
        ConfigurationError: If the file cannot be read or is not a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file '{path}' is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{path}' must contain a JSON object.")

    out: Dict[str, Any] = {}
    for key, value in data.items():
        if key in CONFIG_KEYS:
            out[key] = value
        else:
            logger.warning(f"Ignoring unknown config key '{key}' in {path}")

    logger.debug(f"Loaded {len(out)} config keys from {path}")
    return out


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
