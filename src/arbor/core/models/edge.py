"""
Edge model for the arbor graph.

An edge is a weighted, directed connection owned by its origin node. An
undirected connection is two edges of equal weight pointing in opposite
directions; both carry ``paired = True`` and reference each other through
``partner``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..types import is_numeric_weight
from .node import Node


@dataclass(eq=False)
class Edge:
    """
    Weighted directed edge between two nodes.

    Equality is defined by ``(weight, from label, to label)``. The ``paired``
    flag is bookkeeping kept up to date by the graph operations; it can go
    stale when edges are modified directly.

    Attributes:
        weight (Any): Edge weight; numeric weights take part in algorithms
        from_node (Node): Origin node, owner of the edge
        to_node (Node): Destination node
        paired (bool): Whether the edge is half of an undirected connection
        partner (Optional[Edge]): The counterpart edge when one is linked
    """

    weight: Any
    from_node: Node
    to_node: Node
    paired: bool = False
    partner: Optional["Edge"] = field(default=None, repr=False)

    def __post_init__(self):
        """Validate edge after initialization."""
        if not isinstance(self.from_node, Node) or not isinstance(self.to_node, Node):
            raise TypeError("edge endpoints must be Node instances")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.weight == other.weight
            and self.from_label == other.from_label
            and self.to_label == other.to_label
        )

    def __hash__(self) -> int:
        # Weights need not be hashable; equal edges always share endpoints
        return hash((self.from_label, self.to_label))

    def __repr__(self) -> str:
        return (
            f"Edge({self.from_label!r} -> {self.to_label!r}, weight={self.weight!r}, "
            f"paired={self.paired})"
        )

    @property
    def from_label(self) -> str:
        """Label of the origin node."""
        return self.from_node.label

    @property
    def to_label(self) -> str:
        """Label of the destination node."""
        return self.to_node.label

    @property
    def is_numeric(self) -> bool:
        """Whether the weight takes part in costs and algorithms."""
        return is_numeric_weight(self.weight)

    def matches(self, weight: Any, from_label: str, to_label: str) -> bool:
        """Check the edge against a ``(weight, from, to)`` triple."""
        return self.from_label == from_label and self.to_label == to_label and self.weight == weight

    def is_reverse_of(self, other: "Edge") -> bool:
        """Check whether this edge runs opposite to ``other`` with an equal weight."""
        return self.matches(other.weight, other.to_label, other.from_label)

    def link(self, other: "Edge") -> None:
        """Pair this edge with ``other`` in both directions."""
        self.partner = other
        other.partner = self
        self.paired = True
        other.paired = True

    def unlink(self) -> Optional["Edge"]:
        """
        Dissolve the pairing of this edge.

        The former partner becomes a lone directed edge. Returns the former
        partner, if any.
        """
        partner = self.partner
        if partner is not None:
            partner.partner = None
            partner.paired = False
        self.partner = None
        self.paired = False
        return partner
