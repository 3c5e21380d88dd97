"""
Shortest path search with Dijkstra's algorithm.

Only numeric edges are followed. The result maps every label on the path, in
order, to the weight of the edge used to reach it.
"""

import logging
from typing import Any, Dict, Optional, Set

from arbor.core.constants import DEFAULT_SOURCE_LABEL, DEFAULT_TARGET_LABEL
from arbor.core.exceptions import NegativeWeightError
from arbor.core.graph_algorithms.base import GraphAlgorithm
from arbor.core.graph_algorithms.utils import PriorityQueue
from arbor.core.models import Edge

logger = logging.getLogger(__name__)

PathWeights = Dict[str, Any]


class ShortestPathFinder(GraphAlgorithm[PathWeights]):
    """Dijkstra shortest path between two labels."""

    def run(self, **kwargs) -> Optional[PathWeights]:
        return self.find(
            source=kwargs.get("source", DEFAULT_SOURCE_LABEL),
            target=kwargs.get("target", DEFAULT_TARGET_LABEL),
        )

    def find(
        self,
        source: str = DEFAULT_SOURCE_LABEL,
        target: str = DEFAULT_TARGET_LABEL,
    ) -> Optional[PathWeights]:
        """
        Find the shortest path from ``source`` to ``target``.

        Returns:
            Ordered mapping label -> weight of the edge used to reach it (the
            source maps to 0), or None when an endpoint is missing or the
            target is unreachable.

        Raises:
            NegativeWeightError: If a negative numeric weight is relaxed
        """
        if not self.graph.has_node(source) or not self.graph.has_node(target):
            logger.debug(f"Endpoint missing: {source} -> {target}")
            return None

        logger.debug(f"Starting Dijkstra's algorithm from {source} to {target}")
        order = {label: index for index, label in enumerate(self.graph.get_nodes())}
        distances: Dict[str, Any] = {source: 0}
        predecessors: Dict[str, Edge] = {}
        finalized: Set[str] = {source}
        pq = PriorityQueue()

        current = source
        while current != target:
            self._relax(current, distances, predecessors, finalized, order, pq)

            if len(finalized) == len(order):
                break
            popped = pq.pop()
            if popped is None:
                logger.debug(f"No path exists between {source} and {target}")
                return None
            _, current = popped
            finalized.add(current)
            logger.debug(f"Finalized {current} at distance {distances[current]}")

        if target not in finalized:
            return None
        return self._reconstruct(source, target, predecessors)

    def _relax(self, current, distances, predecessors, finalized, order, pq) -> None:
        """Relax every numeric edge leaving ``current``."""
        for edge in self.graph.get_edges(current):
            if not edge.is_numeric or edge.to_label in finalized:
                continue
            if edge.weight < 0:
                raise NegativeWeightError(
                    f"Negative weight {edge.weight} found on edge "
                    f"{edge.from_label} -> {edge.to_label}"
                )

            candidate = distances[current] + edge.weight
            neighbor = edge.to_label
            if neighbor not in distances or candidate < distances[neighbor]:
                logger.debug(f"  Updating distance to {neighbor}: {candidate}")
                distances[neighbor] = candidate
                predecessors[neighbor] = edge
                pq.add_or_update(neighbor, candidate, order[neighbor])

    @staticmethod
    def _reconstruct(source: str, target: str, predecessors: Dict[str, Edge]) -> PathWeights:
        """Walk predecessor edges back from the target and emit the path in order."""
        steps = []
        label = target
        while label != source:
            edge = predecessors.get(label)
            if edge is None:
                break
            steps.append((label, edge.weight if edge.is_numeric else 0))
            label = edge.from_label

        path: PathWeights = {source: 0}
        for label, weight in reversed(steps):
            path[label] = weight
        return path
