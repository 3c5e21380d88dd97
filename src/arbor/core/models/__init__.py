"""
Core domain models package for the arbor graph.

This package provides the vertex and edge structures the graph is built
from.
"""

from .edge import Edge
from .node import Node

__all__ = [
    "Edge",
    "Node",
]
