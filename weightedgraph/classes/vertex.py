"""
Vertex record used by the weighted directed graph.

A vertex owns its outgoing edges as a mapping from target label to weight.
Incoming edges are never stored here; the graph derives them by scanning.
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)


class Vertex:
    """
    A labeled vertex and its outgoing weighted edges.

    The label is fixed at construction. Weights are stored as plain ints and
    a stored weight is always positive; removing an edge deletes the key.
    """

    __slots__ = ('_label', '_edges')

    def __init__(self, label: str):
        """
        Initialize a vertex with no outgoing edges.

        Args:
            label: Unique label of the vertex within its graph
        """
        self._label = label
        self._edges: Dict[str, int] = {}

    @property
    def label(self) -> str:
        return self._label

    def add_edge(self, target: str, weight: int) -> None:
        """Set the weight of the outgoing edge to target, replacing any old weight."""
        self._edges[target] = weight

    def remove_edge(self, target: str) -> int:
        """
        Remove the outgoing edge to target.

        Args:
            target: Label of the target vertex

        Returns:
            The weight the edge had, or 0 if there was no such edge
        """
        return self._edges.pop(target, 0)

    def get_edge_weight(self, target: str) -> int:
        return self._edges.get(target, 0)

    def has_edge(self, target: str) -> bool:
        return target in self._edges

    def get_edges(self) -> Dict[str, int]:
        """Return a copy of the outgoing edge map (target label -> weight)."""
        return dict(self._edges)

    def get_edge_count(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Vertex(label={self._label!r}, edges={self._edges!r})"
