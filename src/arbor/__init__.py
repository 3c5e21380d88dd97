"""
arbor - Weighted graphs with spanning trees and shortest paths

This package provides a labeled, weighted graph whose undirected connections
are modeled as paired directed edges, together with:

- Prim's algorithm for the smallest spanning tree of the graph
- Dijkstra's algorithm for the shortest path between two labels
- Loading graphs from adjacency matrix files or JSON documents
- Plain-text reporting and a command line interface
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("arbor requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.graph_algorithms import GraphAlgorithms, ShortestPathFinder, SpanningTreeBuilder
from .core.models import Edge, Node

__all__ = [
    "Edge",
    "Graph",
    "GraphAlgorithms",
    "Node",
    "ShortestPathFinder",
    "SpanningTreeBuilder",
]
