from __future__ import annotations

from file_analyzer.domain.config import TraversalStrategyKind

from .base import ROOT_DEPTH, PendingNode, TraversalStrategy
from .breadth_first import BreadthFirstTraversal
from .depth_first import DepthFirstTraversal


def create_strategy(kind: TraversalStrategyKind) -> TraversalStrategy:
    """Instantiate the traversal implementation for a selector."""
    if kind == TraversalStrategyKind.BREADTH_FIRST:
        return BreadthFirstTraversal()
    return DepthFirstTraversal()


__all__ = [
    "TraversalStrategy",
    "PendingNode",
    "ROOT_DEPTH",
    "DepthFirstTraversal",
    "BreadthFirstTraversal",
    "create_strategy",
]
