"""
Configuration constants for the arbor graph package.

This module defines the values shared by the core, the loader and the
command line:
- Node labelling scheme used by adjacency matrices
- Default shortest-path endpoints
- Matrix input conventions
"""

# Labelling scheme: nodes are named "a", "b", ... in matrix order
FIRST_LABEL = "a"
MAX_MATRIX_NODES = 26

# Shortest path endpoints
DEFAULT_SOURCE_LABEL = "a"
DEFAULT_TARGET_LABEL = "f"

# Matrix input
MATRIX_FILE_SUFFIX = ".txt"
DEFAULT_NODE_PAYLOAD = True

# Reporting
PATH_SEPARATOR = "->"
