"""
Exception types raised by the weighted graph.
"""


class GraphError(Exception):
    """Base class for all weightedgraph errors."""


class InvalidReference(GraphError, ValueError):
    """
    Raised when an edge operation names a vertex that is not in the graph,
    or supplies a weight outside the accepted domain.
    """


class InvariantViolation(GraphError, AssertionError):
    """Raised when the internal representation is found to be inconsistent."""
