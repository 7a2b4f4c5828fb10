"""
Core graph data structure and its error types.
"""

from .exceptions import GraphError, InvalidReference, InvariantViolation
from .graph import WeightedDirectedGraph

__all__ = [
    'WeightedDirectedGraph',
    'GraphError',
    'InvalidReference',
    'InvariantViolation',
]
