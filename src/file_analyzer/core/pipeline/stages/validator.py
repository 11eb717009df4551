from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted configuration sources (CLI, JSON
files, library callers) and the traversal engine. Coerces loosely typed
values with warnings, injects defaults, and raises ConfigurationError for
anything that would make the analysis meaningless.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from file_analyzer.core.pipeline.components.filters import compile_ignore_patterns
from file_analyzer.domain.config import (
    AnalyzerConfig,
    TraversalStrategyKind,
    available_cpu_count,
    get_default_config,
)
from file_analyzer.domain.errors import ConfigurationError
from file_analyzer.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[AnalyzerConfig, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Missing keys are filled from the defaults. In non-strict mode numeric
    strings, CSV strings and out-of-range thread counts are corrected and
    reported as warnings; in strict mode they raise.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on any value that would need coercion.

    Returns:
        Tuple[AnalyzerConfig, List[str]]: The validated configuration and
                                          the list of coercion warnings.

    Raises:
        ConfigurationError: On an invalid root path, limit, strategy or glob.
    """
    warnings: List[str] = []

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid config type: expected dict, received {type(config).__name__}."
        )

    defaults = get_default_config()
    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 1. Root path
    root_path = _validate_root(merged.get("root_path"), defaults["root_path"])

    # 2. Limits
    max_depth = _as_optional_int(merged.get("max_depth"), "max_depth", warnings, strict)
    if max_depth is not None and max_depth < 1:
        raise ConfigurationError("Maximum depth must be at least 1")

    max_files = _as_optional_int(merged.get("max_files"), "max_files", warnings, strict)
    if max_files is not None and max_files < 1:
        raise ConfigurationError("Maximum file count must be at least 1")

    min_file_size = _as_optional_int(merged.get("min_file_size"), "min_file_size", warnings, strict)
    if min_file_size is None:
        min_file_size = defaults["min_file_size"]
    if min_file_size < 0:
        raise ConfigurationError("Minimum file size cannot be negative")

    # 3. Strategy
    strategy = TraversalStrategyKind.parse(merged.get("strategy") or defaults["strategy"])

    # 4. Ignore globs
    patterns = _as_list_str(merged.get("ignore_patterns"), "ignore_patterns", warnings, strict)
    ignore_rx = compile_ignore_patterns(patterns)

    # 5. Worker pool size
    thread_count = _as_optional_int(merged.get("thread_count"), "thread_count", warnings, strict)
    thread_count = _clamp_thread_count(thread_count, warnings, strict)

    cfg = AnalyzerConfig(
        root_path=root_path,
        max_depth=max_depth,
        max_files=max_files,
        min_file_size=min_file_size,
        strategy=strategy,
        ignore_patterns=tuple(patterns),
        ignore_rx=tuple(ignore_rx),
        thread_count=thread_count,
    )
    logger.debug(f"Validated configuration: {cfg.as_dict()}")
    return cfg, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN RULES
# -----------------------------------------------------------------------------

def _validate_root(value: Any, fallback: str) -> str:
    """Normalize the root path and require an existing directory."""
    if value is not None and not isinstance(value, (str, os.PathLike)):
        raise ConfigurationError(
            f"Invalid field 'root_path': expected str, received {type(value).__name__}."
        )

    root = normalize_path(os.fspath(value) if value is not None else None, fallback)
    if not os.path.exists(root):
        raise ConfigurationError(f"Root path does not exist: {root}")
    if not os.path.isdir(root):
        raise ConfigurationError(f"Root path is not a directory: {root}")
    return root


def _clamp_thread_count(value: Optional[int], warnings: List[str], strict: bool) -> int:
    """Keep the worker pool size within [1, available CPUs]."""
    cpu_count = available_cpu_count()
    if value is None:
        return cpu_count

    clamped = max(1, min(value, cpu_count))
    if clamped != value:
        msg = f"Thread count {value} outside [1, {cpu_count}]"
        if strict:
            raise ConfigurationError(msg)
        warnings.append(f"{msg}; clamped to {clamped}.")
    return clamped


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_optional_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept ints, None, and (non-strict) numeric strings."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid field '{field}': expected int, received bool.")
    if isinstance(value, int):
        return value

    if isinstance(value, str) and not strict:
        s = value.strip()
        if not s:
            return None
        try:
            out = int(s)
        except ValueError:
            raise ConfigurationError(f"Invalid field '{field}': '{value}' is not an integer.") from None
        warnings.append(f"Field '{field}' converted from '{value}' to {out}.")
        return out

    raise ConfigurationError(
        f"Invalid field '{field}': expected int, received {type(value).__name__}."
    )


def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of strings, supporting CSV parsing."""
    if value is None:
        return []

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if not isinstance(item, str):
                raise ConfigurationError(f"Invalid item in '{field}[{i}]': expected str.")
            out.append(item.strip())
        return out

    raise ConfigurationError(
        f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    )
