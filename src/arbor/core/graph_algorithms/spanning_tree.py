"""
Minimum spanning tree construction with Prim's algorithm.

Every edge is treated as directed and weighted: the tree grows only along
edges leaving nodes already in the tree, so a directed graph may have no
spanning tree from some starting nodes.
"""

import logging
import random
from copy import deepcopy
from typing import Dict, Optional

from arbor.core.exceptions import NodeNotFoundError
from arbor.core.graph import Graph
from arbor.core.graph_algorithms.base import GraphAlgorithm
from arbor.core.models import Edge, Node

logger = logging.getLogger(__name__)


class SpanningTreeBuilder(GraphAlgorithm[Graph]):
    """Builds the smallest spanning tree reachable from a seed node."""

    def __init__(self, graph: Graph, rng: Optional[random.Random] = None):
        """
        Initialize builder.

        Args:
            graph: Graph to span
            rng: Random generator used to pick the seed node when no start
                label is given. A fresh unseeded generator is used if omitted.
        """
        super().__init__(graph)
        self.rng = rng if rng is not None else random.Random()

    def run(self, **kwargs) -> Optional[Graph]:
        return self.build(start=kwargs.get("start"))

    def build(self, start: Optional[str] = None) -> Optional[Graph]:
        """
        Build the spanning tree.

        Args:
            start: Label of the seed node; chosen at random when omitted

        Returns:
            A new Graph holding the tree, or None when the graph is empty or
            some node cannot be reached from the seed.

        Raises:
            NodeNotFoundError: If ``start`` is given but not in the graph
        """
        labels = self.graph.get_nodes()
        if not labels:
            return None

        if start is None:
            start = labels[self.rng.randrange(len(labels))]
        elif not self.graph.has_node(start):
            raise NodeNotFoundError(f"Start node '{start}' not found")
        logger.debug(f"Building spanning tree from seed {start}")

        tree = Graph()
        seed = self.graph.get_node(start)
        tree.add_node(deepcopy(seed.payload), seed.label)
        included: Dict[str, Node] = {seed.label: seed}

        while True:
            smallest = self._smallest_outgoing_edge(included)

            if smallest is None:
                if len(included) == len(labels):
                    return tree
                logger.debug(
                    f"No spanning tree from {start}: "
                    f"{len(labels) - len(included)} nodes unreachable"
                )
                return None

            target = smallest.to_node
            tree.add_node(deepcopy(target.payload), target.label)
            if self._has_equal_reverse(smallest):
                tree.add_undirected_edge(smallest.weight, smallest.from_label, target.label)
            else:
                tree.add_directed_edge(smallest.weight, smallest.from_label, target.label)
            logger.debug(
                f"Added {smallest.from_label} -> {target.label} (weight {smallest.weight})"
            )
            included[target.label] = target

    @staticmethod
    def _smallest_outgoing_edge(included: Dict[str, Node]) -> Optional[Edge]:
        """
        Find the lightest numeric edge leaving the tree.

        Edges are scanned in inclusion order, then edge order; the first edge
        seen with the minimum weight wins.
        """
        smallest = None
        for node in included.values():
            for edge in node.edges:
                if not edge.is_numeric or edge.to_label in included:
                    continue
                if smallest is None or edge.weight < smallest.weight:
                    smallest = edge
        return smallest

    @staticmethod
    def _has_equal_reverse(edge: Edge) -> bool:
        """Check whether the source graph links the edge's ends both ways at one weight."""
        return any(candidate.is_reverse_of(edge) for candidate in edge.to_node.edges)
