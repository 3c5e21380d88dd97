"""
Node model for the arbor graph.

A node is a labeled vertex holding an opaque payload. It owns the list of
edges leaving it and has no knowledge of the edges pointing at it.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from .edge import Edge


@dataclass(eq=False)
class Node:
    """
    Labeled vertex of the graph.

    Nodes compare equal when their labels are equal: labels are unique within
    a graph, so two nodes sharing a label stand for the same vertex.

    Attributes:
        label (str): Unique identifier of the node
        payload (Any): Opaque data carried by the node
        edges (List[Edge]): Outgoing edges in insertion order
    """

    label: str
    payload: Any = None
    edges: List["Edge"] = field(default_factory=list, repr=False)

    def __post_init__(self):
        """Validate node after initialization."""
        if not isinstance(self.label, str):
            raise TypeError("label must be a string")
        if not self.label.strip():
            raise ValueError("label must be a non-empty string")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)

    def add_edge(self, edge: "Edge") -> None:
        """Append an outgoing edge."""
        if edge.from_node is not self:
            raise ValueError(f"edge does not originate at node '{self.label}'")
        self.edges.append(edge)

    def remove_edge(self, edge: "Edge") -> bool:
        """
        Remove this exact edge object.

        Identity is used rather than equality so that one of several parallel
        edges with equal weights can be removed without touching the others.
        """
        for index, candidate in enumerate(self.edges):
            if candidate is edge:
                del self.edges[index]
                return True
        return False

    def edges_to(self, label: str) -> List["Edge"]:
        """Get the outgoing edges pointing at ``label``."""
        return [edge for edge in self.edges if edge.to_node.label == label]
