"""
Core graph data structure with labeled nodes and owned, weighted edges.

This module provides the Graph class. Nodes are kept in a dictionary keyed by
label, preserving insertion order. Every edge is stored on its origin node;
an undirected connection is represented as two paired directed edges of equal
weight that reference each other.

Mutations report failure through their boolean result and never leave the
graph partially modified: every check happens before the first change.
"""

import logging
from numbers import Real
from typing import Any, Dict, Iterator, List, Optional, Set

from .constants import FIRST_LABEL, MAX_MATRIX_NODES
from .exceptions import ConfigurationError, EdgeNotFoundError, NodeNotFoundError
from .models import Edge, Node
from .types import is_numeric_weight

logger = logging.getLogger(__name__)

_ANY_WEIGHT = object()


class Graph:
    """
    Labeled, weighted graph with directed edges and paired undirected edges.

    Attributes:
        _nodes (Dict[str, Node]): Nodes keyed by label, in insertion order
    """

    def __init__(self):
        """Create an empty graph."""
        self._nodes: Dict[str, Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._nodes))

    def __str__(self) -> str:
        return self.render_adjacency_matrix()

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.get_edge_count()})"

    # Nodes

    def add_node(self, payload: Any, label: str) -> bool:
        """
        Add a node unless the label is already taken.

        Args:
            payload: Data carried by the node
            label: Unique label of the node

        Returns:
            bool: True if the node was added, False if the label exists
        """
        if label in self._nodes:
            return False
        self._nodes[label] = Node(label=label, payload=payload)
        return True

    def remove_node(self, label: str) -> bool:
        """
        Remove a node and every edge pointing at it.

        Args:
            label: Label of the node to remove

        Returns:
            bool: True if the node was removed, False if it does not exist
        """
        node = self._nodes.pop(label, None)
        if node is None:
            return False

        removed = 0
        for other in self._nodes.values():
            incoming = [edge for edge in other.edges if edge.to_node is node]
            for edge in incoming:
                edge.unlink()
                other.remove_edge(edge)
            removed += len(incoming)
        logger.debug(f"Removed node {label} and {removed} incoming edges")
        return True

    def has_node(self, label: str) -> bool:
        """Check if a node exists."""
        return label in self._nodes

    def get_node(self, label: str) -> Optional[Node]:
        """Get a node by label, or None."""
        return self._nodes.get(label)

    def get_node_safe(self, label: str) -> Node:
        """Get a node by label, raising if it does not exist."""
        node = self._nodes.get(label)
        if node is None:
            raise NodeNotFoundError(f"Node '{label}' not found in the graph")
        return node

    def get_payload(self, label: str) -> Any:
        """Get the payload of a node, raising if it does not exist."""
        return self.get_node_safe(label).payload

    def get_nodes(self) -> List[str]:
        """Get all labels in insertion order."""
        return list(self._nodes)

    # Edges

    def add_directed_edge(
        self, weight: Any, from_label: str, to_label: str, paired: bool = False
    ) -> bool:
        """
        Add a directed edge between two existing nodes.

        If an edge already runs the opposite way with an equal weight, the two
        edges are linked as an undirected pair and both are marked paired.

        Args:
            weight: Edge weight
            from_label: Label of the origin node
            to_label: Label of the destination node
            paired: Whether the edge is meant as half of an undirected pair

        Returns:
            bool: True if the edge was added, False if a label is unknown
        """
        from_node = self._nodes.get(from_label)
        to_node = self._nodes.get(to_label)
        if from_node is None or to_node is None:
            return False

        edge = Edge(weight=weight, from_node=from_node, to_node=to_node, paired=paired)
        reverse = self._find_reverse(edge, prefer_unlinked=True)
        if reverse is not None:
            if reverse.partner is None:
                edge.link(reverse)
            else:
                # Every reverse match is taken; record the pairing on the first
                reverse.paired = True
                edge.paired = True
        from_node.add_edge(edge)
        return True

    def add_undirected_edge(self, weight: Any, label_a: str, label_b: str) -> bool:
        """
        Add an undirected edge as two paired directed edges.

        Returns:
            bool: True only if both directions were added
        """
        if label_a not in self._nodes or label_b not in self._nodes:
            return False
        forward = self.add_directed_edge(weight, label_a, label_b, paired=True)
        backward = self.add_directed_edge(weight, label_b, label_a, paired=True)
        return forward and backward

    def remove_directed_edge(self, weight: Any, from_label: str, to_label: str) -> bool:
        """
        Remove the first edge matching ``(weight, from, to)``.

        When the edge is paired its counterpart becomes a lone directed edge:
        the linked partner if there is one, else the first unlinked reverse
        match in the destination node's edge order.

        Returns:
            bool: True if an edge was removed, False if none matched
        """
        edge = self.find_edge(weight, from_label, to_label)
        if edge is None:
            return False

        if edge.paired:
            if edge.partner is not None:
                edge.unlink()
            else:
                reverse = self._find_reverse(edge, prefer_unlinked=True)
                if reverse is not None and reverse.partner is None:
                    reverse.paired = False
                edge.paired = False
        edge.from_node.remove_edge(edge)
        return True

    def remove_undirected_edge(self, weight: Any, label_a: str, label_b: str) -> bool:
        """
        Remove both directions of an undirected edge.

        The reverse direction is removed first; both removals are always
        attempted.

        Returns:
            bool: True only if both directions were removed
        """
        backward = self.remove_directed_edge(weight, label_b, label_a)
        forward = self.remove_directed_edge(weight, label_a, label_b)
        return backward and forward

    def find_edge(self, weight: Any, from_label: str, to_label: str) -> Optional[Edge]:
        """Get the first edge matching ``(weight, from, to)``, or None."""
        node = self._nodes.get(from_label)
        if node is None:
            return None
        for edge in node.edges:
            if edge.matches(weight, from_label, to_label):
                return edge
        return None

    def get_edge_safe(self, weight: Any, from_label: str, to_label: str) -> Edge:
        """Get the first matching edge, raising if nodes or edge are missing."""
        if from_label not in self._nodes:
            raise NodeNotFoundError(f"Source node '{from_label}' not found in the graph")
        if to_label not in self._nodes:
            raise NodeNotFoundError(f"Target node '{to_label}' not found in the graph")
        edge = self.find_edge(weight, from_label, to_label)
        if edge is None:
            raise EdgeNotFoundError(
                f"No edge with weight {weight!r} exists from '{from_label}' to '{to_label}'"
            )
        return edge

    def has_edge(self, from_label: str, to_label: str, weight: Any = _ANY_WEIGHT) -> bool:
        """Check if an edge exists, optionally with a specific weight."""
        node = self._nodes.get(from_label)
        if node is None:
            return False
        for edge in node.edges:
            if edge.to_label == to_label and (weight is _ANY_WEIGHT or edge.weight == weight):
                return True
        return False

    def get_edges(self, label: Optional[str] = None) -> Iterator[Edge]:
        """Iterate over all edges, or over the edges leaving ``label``."""
        if label is not None:
            node = self._nodes.get(label)
            if node is not None:
                yield from list(node.edges)
            return
        for node in self._nodes.values():
            yield from list(node.edges)

    def get_neighbors(self, label: str) -> Set[str]:
        """Get the labels reachable through one outgoing edge."""
        node = self._nodes.get(label)
        if node is None:
            return set()
        return {edge.to_label for edge in node.edges}

    def get_edge_count(self) -> int:
        """Get the number of directed edges."""
        return sum(len(node.edges) for node in self._nodes.values())

    def _find_reverse(self, edge: Edge, prefer_unlinked: bool = False) -> Optional[Edge]:
        """
        Find an edge running opposite to ``edge`` with an equal weight.

        Only the destination node can own such an edge. With
        ``prefer_unlinked`` the first reverse match without a partner wins,
        falling back to the first match.
        """
        first = None
        for candidate in edge.to_node.edges:
            if candidate is edge or not candidate.is_reverse_of(edge):
                continue
            if not prefer_unlinked or candidate.partner is None:
                return candidate
            if first is None:
                first = candidate
        return first

    # Derived values

    def cost(self) -> Real:
        """
        Get the total weight of all numeric edges.

        An undirected pair is counted once; every other edge is counted once.
        Non-numeric weights are ignored.
        """
        counted: Set[int] = set()
        total = 0
        for node in self._nodes.values():
            for edge in node.edges:
                if not is_numeric_weight(edge.weight):
                    continue
                if edge.paired and edge.partner is not None and id(edge.partner) in counted:
                    continue
                counted.add(id(edge))
                total += edge.weight
        return total

    def render_adjacency_matrix(self) -> str:
        """
        Render the weighted adjacency matrix as text.

        Rows and columns follow the labels ``"a"``, ``"b"``, ... Each cell
        holds the smallest numeric weight from the row node to the column
        node, or 0. Cells are separated by a space and each row ends with a
        newline.

        Raises:
            ConfigurationError: If the labels are not exactly the first n
                lowercase letters
        """
        size = len(self._nodes)
        if size > MAX_MATRIX_NODES:
            raise ConfigurationError(
                f"too many nodes to render: {size} (maximum is {MAX_MATRIX_NODES})"
            )
        labels = [chr(ord(FIRST_LABEL) + i) for i in range(size)]
        missing = [label for label in labels if label not in self._nodes]
        if missing:
            raise ConfigurationError(
                f"adjacency matrix needs labels {labels[0]}..{labels[-1]}; missing {missing}"
            )

        rows = []
        for from_label in labels:
            cells = []
            for to_label in labels:
                weights = [
                    edge.weight
                    for edge in self._nodes[from_label].edges_to(to_label)
                    if is_numeric_weight(edge.weight)
                ]
                cells.append(str(min(weights)) if weights else "0")
            rows.append(" ".join(cells) + "\n")
        return "".join(rows)
