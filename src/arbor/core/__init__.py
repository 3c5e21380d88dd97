"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    NegativeWeightError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Edge, Node
from .types import GraphProtocol, is_numeric_weight
from .graph import Graph
from .graph_algorithms import GraphAlgorithms, ShortestPathFinder, SpanningTreeBuilder

__all__ = [
    "ConfigurationError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphAlgorithms",
    "GraphOperationError",
    "GraphProtocol",
    "NegativeWeightError",
    "Node",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "ShortestPathFinder",
    "SpanningTreeBuilder",
    "ValidationError",
    "is_numeric_weight",
]
