"""
weightedgraph - Mutable Directed Weighted Graph

A small Python library providing a directed graph over string vertex labels
with positive integer edge weights. Vertices can be added and removed, edge
weights set and cleared, and the incoming/outgoing edges of any vertex
queried as independent snapshots.

Main Classes:
    WeightedDirectedGraph: The graph container
    Vertex: Internal vertex record (label + outgoing edges)

Exceptions:
    InvalidReference: Edge operation on a missing vertex or a negative weight
    InvariantViolation: Internal representation found inconsistent

Example:
    >>> from weightedgraph import WeightedDirectedGraph
    >>> graph = WeightedDirectedGraph()
    >>> graph.add_vertex("A")
    True
    >>> graph.add_vertex("B")
    True
    >>> graph.set_edge_weight("A", "B", 5)
    0
    >>> graph.get_incoming_edges("B")
    {'A': 5}
"""

__version__ = "0.1.0"
__author__ = "Chang Liao"

from weightedgraph.classes.vertex import Vertex
from weightedgraph.core.exceptions import GraphError, InvalidReference, InvariantViolation
from weightedgraph.core.graph import WeightedDirectedGraph

__all__ = [
    'WeightedDirectedGraph',
    'Vertex',
    'GraphError',
    'InvalidReference',
    'InvariantViolation',
]
