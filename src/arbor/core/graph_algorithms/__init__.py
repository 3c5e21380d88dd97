"""Spanning tree and shortest path algorithms over an arbor Graph."""

import random
from typing import Any, Optional

from ..constants import DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL
from ..graph import Graph
from .base import GraphAlgorithm
from .shortest_path import PathWeights, ShortestPathFinder
from .spanning_tree import SpanningTreeBuilder
from .utils import PriorityQueue

__all__ = [
    "GraphAlgorithm",
    "GraphAlgorithms",
    "PathWeights",
    "PriorityQueue",
    "ShortestPathFinder",
    "SpanningTreeBuilder",
]


class GraphAlgorithms:
    """Static interface for the graph algorithms."""

    @staticmethod
    def spanning_tree(
        graph: Graph,
        start: Optional[str] = None,
        seed: Any = None,
        rng: Optional[random.Random] = None,
    ) -> Optional[Graph]:
        """
        Build the smallest spanning tree of ``graph``.

        ``seed`` makes the random choice of the starting node reproducible;
        an explicit ``rng`` takes precedence over it and ``start`` bypasses
        the random choice entirely.
        """
        if rng is None and seed is not None:
            rng = random.Random(seed)
        builder = SpanningTreeBuilder(graph, rng=rng)
        return builder.build(start=start)

    @staticmethod
    def shortest_path(
        graph: Graph,
        source: str = DEFAULT_SOURCE_LABEL,
        target: str = DEFAULT_TARGET_LABEL,
    ) -> Optional[PathWeights]:
        """Find the shortest path between two labels."""
        return ShortestPathFinder(graph).find(source, target)
