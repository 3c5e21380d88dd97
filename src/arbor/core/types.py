"""
Core type definitions and protocols.

Weights are generic: any value supporting equality may label an edge. Only
numeric weights take part in costs and in the graph algorithms; see
``is_numeric_weight`` for the exact rule.
"""

import math
from numbers import Real
from typing import Any, Iterator, List, Optional, Protocol


def is_numeric_weight(weight: Any) -> bool:
    """
    Check whether a weight participates in numeric computations.

    A weight is numeric when it is a real number, not a bool, and finite.
    Everything else is kept on the edge but ignored by ``cost()``, the
    adjacency matrix and both algorithms.
    """
    if isinstance(weight, bool) or not isinstance(weight, Real):
        return False
    return not (math.isnan(weight) or math.isinf(weight))


class GraphProtocol(Protocol):
    """Protocol defining the graph operations the algorithms rely on."""

    def has_node(self, label: str) -> bool:
        """Check if a node exists."""
        ...

    def get_nodes(self) -> List[str]:
        """Get all labels in insertion order."""
        ...

    def get_node(self, label: str) -> Optional[Any]:
        """Get a node by label."""
        ...

    def get_edges(self, label: Optional[str] = None) -> Iterator[Any]:
        """Iterate over edges, optionally only those leaving ``label``."""
        ...
