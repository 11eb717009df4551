from __future__ import annotations

"""
Depth-First Traversal Strategy.

Explores each child subtree completely before moving to the next sibling.
Uses an explicit stack instead of recursion, so very deep trees cannot
exhaust the interpreter's recursion limit; memory grows with tree depth
times directory width.
"""

import logging
from typing import List

from file_analyzer.core.pipeline.components.classifier import FileClassifier
from file_analyzer.core.pipeline.components.walker import DirectoryWalker
from file_analyzer.core.services.collector import ResultCollector
from file_analyzer.core.services.link_guard import LinkGuard
from file_analyzer.core.traversal.base import ROOT_DEPTH, PendingNode, TraversalStrategy
from file_analyzer.domain.config import AnalyzerConfig

logger = logging.getLogger(__name__)


class DepthFirstTraversal(TraversalStrategy):

    name = "depth-first"

    def traverse(
            self,
            root: str,
            config: AnalyzerConfig,
            walker: DirectoryWalker,
            guard: LinkGuard,
            collector: ResultCollector,
    ) -> None:
        classifier = FileClassifier(guard, config.min_file_size)
        stack: List[PendingNode] = [PendingNode(path=root, depth=ROOT_DEPTH)]

        while stack:
            node = stack.pop()

            if self.is_ignored(node, root, config):
                logger.debug(f"Ignored: {node.path}")
                continue

            if self.limit_reached(config, collector):
                logger.info(f"File limit of {config.max_files} reached; stopping traversal.")
                return

            children = self.visit(node, config, walker, guard, classifier, collector)

            # Reversed so the first child (by name) is expanded first
            for entry in reversed(children):
                stack.append(PendingNode.from_entry(entry))
