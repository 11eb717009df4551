from __future__ import annotations

"""
Breadth-First Traversal Strategy.

Visits the tree level by level from a FIFO queue seeded with the root.
Memory grows with the widest level of the tree.
"""

import logging
from collections import deque
from typing import Deque

from file_analyzer.core.pipeline.components.classifier import FileClassifier
from file_analyzer.core.pipeline.components.walker import DirectoryWalker
from file_analyzer.core.services.collector import ResultCollector
from file_analyzer.core.services.link_guard import LinkGuard
from file_analyzer.core.traversal.base import ROOT_DEPTH, PendingNode, TraversalStrategy
from file_analyzer.domain.config import AnalyzerConfig

logger = logging.getLogger(__name__)


class BreadthFirstTraversal(TraversalStrategy):

    name = "breadth-first"

    def traverse(
            self,
            root: str,
            config: AnalyzerConfig,
            walker: DirectoryWalker,
            guard: LinkGuard,
            collector: ResultCollector,
    ) -> None:
        classifier = FileClassifier(guard, config.min_file_size)
        queue: Deque[PendingNode] = deque([PendingNode(path=root, depth=ROOT_DEPTH)])

        while queue:
            node = queue.popleft()

            if self.is_ignored(node, root, config):
                logger.debug(f"Ignored: {node.path}")
                continue

            if self.limit_reached(config, collector):
                logger.info(f"File limit of {config.max_files} reached; stopping traversal.")
                break

            for entry in self.visit(node, config, walker, guard, classifier, collector):
                queue.append(PendingNode.from_entry(entry))
