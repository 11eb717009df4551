from __future__ import annotations

"""
Core analysis orchestration.

This module coordinates one analysis run:
1. Validates the configuration (fatal on error).
2. Builds the shared guard, walker and collector.
3. Selects the traversal strategy.
4. Runs the traversal, inline or inside a worker pool.
5. Finalizes the collector into an AnalysisResult.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional

from file_analyzer.core.pipeline.components.walker import DirectoryWalker
from file_analyzer.core.pipeline.stages.validator import validate_config
from file_analyzer.core.services.collector import ResultCollector
from file_analyzer.core.services.link_guard import LinkGuard
from file_analyzer.core.traversal import create_strategy
from file_analyzer.domain.analysis_models import AnalysisResult
from file_analyzer.domain.config import AnalyzerConfig

logger = logging.getLogger(__name__)


def analyze(config: AnalyzerConfig) -> AnalysisResult:
    """
    Run the traversal described by a validated configuration.

    The worker pool only hosts the single traversal; one thread walks at a
    time. The pool exists so the collector and guard are already exercised
    from a worker thread.

    Args:
        config: Output of validate_config.

    Returns:
        AnalysisResult: Finalized findings. Filesystem problems appear as
                        warnings, never as exceptions.
    """
    logger.info(
        f"Analyzing {config.root_path} "
        f"(strategy={config.strategy.value}, threads={config.thread_count})"
    )
    started = time.perf_counter()

    if config.thread_count <= 1:
        result = _analyze_single_threaded(config)
    else:
        with ThreadPoolExecutor(
                max_workers=config.thread_count,
                thread_name_prefix="TraversalWorker",
        ) as executor:
            result = executor.submit(_analyze_single_threaded, config).result()

    elapsed = time.perf_counter() - started
    logger.info(
        f"Analysis finished in {elapsed:.2f}s: {result.file_count} files, "
        f"{result.directory_count} directories, {result.total_size} bytes, "
        f"{len(result.warnings)} warnings"
        + (" (incomplete)" if result.incomplete else "")
    )
    return result


def run_analysis(raw_config: Optional[Dict[str, Any]], *, strict: bool = False) -> AnalysisResult:
    """
    Validate a raw configuration dictionary and analyze it.

    Args:
        raw_config: Configuration keys (see get_default_config).
        strict: Reject values that would otherwise be coerced.

    Returns:
        AnalysisResult: Finalized findings.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    cfg, warnings = validate_config(raw_config if raw_config is not None else {}, strict=strict)
    for w in warnings:
        logger.warning(f"Configuration Warning: {w}")
    return analyze(cfg)


def _analyze_single_threaded(config: AnalyzerConfig) -> AnalysisResult:
    guard = LinkGuard()
    walker = DirectoryWalker()
    collector = ResultCollector()
    strategy = create_strategy(config.strategy)

    strategy.traverse(config.root_path, config, walker, guard, collector)

    return collector.finalize()
