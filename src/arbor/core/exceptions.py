"""
Custom exceptions for the arbor graph package.

Most graph operations report failure through return values (``False`` for a
mutation that found nothing to act on, ``None`` for an algorithm without a
result). The exceptions below cover the remaining cases: malformed input,
explicit lookups of missing resources and violated preconditions.
"""


class ValidationError(Exception):
    """
    Raised when input data validation fails.

    Examples:
        * Graph document not matching its JSON schema
        * Matrix file that is not a ``.txt`` file
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * Algorithm applied to a graph it does not support
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NegativeWeightError(GraphOperationError):
    """Raised when Dijkstra's algorithm meets a negative edge weight."""


class ConfigurationError(Exception):
    """
    Raised when a precondition of the surrounding configuration is violated.

    Examples:
        * Fixed shortest-path endpoints missing from the graph
        * More nodes than the alphabetic labelling scheme can address
        * Labels that are not a contiguous run starting at ``"a"``
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Only explicit lookups raise this; mutation operations return ``False``.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * ``Graph.get_node_safe`` with an unknown label
        * Spanning tree started from an unknown label
        * Graph document edge referencing an undeclared node
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * ``Graph.get_edge_safe`` without a matching edge
    """
