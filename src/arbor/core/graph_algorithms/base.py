"""
Base class for the algorithms computed over an arbor graph.

Each algorithm runs to completion on a single thread and reports a missing
result as None rather than raising.
"""

from abc import ABC, abstractmethod
from typing import Optional

from arbor.core.types import GraphProtocol


class GraphAlgorithm[T](ABC):
    """Abstract base class for algorithms computed over a graph."""

    def __init__(self, graph: GraphProtocol):
        """Initialize algorithm with the graph it reads."""
        self.graph = graph

    @abstractmethod
    def run(self, **kwargs) -> Optional[T]:
        """Compute the result, or None when it does not exist."""
        pass
