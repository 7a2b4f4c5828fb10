"""
Core graph data structure: a mutable directed graph with positive integer
edge weights over string vertex labels.

This module provides the fundamental graph structure without any traversal
or path algorithms.
"""

import logging
import numbers
from typing import Dict, List, Optional, Sequence, Set

import numpy as np

from ..classes.vertex import Vertex
from ..classes.utils import (
    build_weight_matrix,
    calculate_in_degree,
    find_incoming_edges,
    format_adjacency,
)
from .exceptions import InvalidReference, InvariantViolation

logger = logging.getLogger(__name__)


class WeightedDirectedGraph:
    """
    Mutable directed graph with weighted edges.

    Vertices are kept in an insertion-ordered dict keyed by label. Each vertex
    owns its outgoing edges; incoming edges are found by scanning every vertex.
    An edge with weight 0 does not exist, so setting a weight of 0 deletes it.

    Every query returns a fresh copy that the caller may keep or mutate freely.
    """

    def __init__(self, check_rep: bool = __debug__):
        """
        Initialize an empty graph.

        Args:
            check_rep: Verify the representation invariant after every
                mutation. Follows Python's debug mode by default.
        """
        self._vertices: Dict[str, Vertex] = {}
        self.check_rep = check_rep

        logger.debug(f"Initializing WeightedDirectedGraph (check_rep={check_rep})")

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, label: str) -> bool:
        """
        Add a vertex with no edges.

        Args:
            label: Label of the new vertex

        Returns:
            True if the vertex was added, False if the label was already present

        Raises:
            TypeError: If label is not a string
        """
        self._require_label(label)
        if label in self._vertices:
            return False

        self._vertices[label] = Vertex(label)
        logger.debug(f"Added vertex {label!r}")
        self._check_rep()
        return True

    def remove_vertex(self, label: str) -> bool:
        """
        Remove a vertex together with every edge that starts or ends at it.

        Args:
            label: Label of the vertex to remove

        Returns:
            True if a vertex was removed, False if no such vertex existed
        """
        vertex = self._vertices.pop(label, None)
        if vertex is None:
            return False

        nEdge_removed = vertex.get_edge_count()
        for other in self._vertices.values():
            if other.remove_edge(label):
                nEdge_removed += 1

        logger.debug(f"Removed vertex {label!r} and {nEdge_removed} attached edge(s)")
        self._check_rep()
        return True

    def set_edge_weight(self, source: str, target: str, weight: int) -> int:
        """
        Create, update or delete the edge source -> target.

        A positive weight creates the edge or replaces its weight. A weight of
        0 deletes the edge; deleting a missing edge is not an error.

        Args:
            source: Label of the source vertex
            target: Label of the target vertex
            weight: New weight, 0 to delete

        Returns:
            The weight the edge had before this call, or 0 if it did not exist

        Raises:
            InvalidReference: If source or target is not in the graph, or
                weight is negative. The graph is left unchanged.
            TypeError: If weight is not an integer
        """
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise TypeError(f"Edge weight must be an integer, got {type(weight).__name__}")

        pVertex_source = self._vertices.get(source)
        if pVertex_source is None or target not in self._vertices:
            missing = source if pVertex_source is None else target
            logger.debug(f"Rejected edge {source!r} -> {target!r}: no vertex {missing!r}")
            raise InvalidReference(f"Vertex not found: {missing!r}")

        if weight < 0:
            logger.debug(f"Rejected edge {source!r} -> {target!r}: negative weight {weight}")
            raise InvalidReference(f"Edge weight must not be negative, got {weight}")

        weight = int(weight)
        if weight == 0:
            previous = pVertex_source.remove_edge(target)
            if previous:
                logger.debug(f"Deleted edge {source!r} -> {target!r} (was {previous})")
        else:
            previous = pVertex_source.get_edge_weight(target)
            pVertex_source.add_edge(target, weight)
            logger.debug(f"Set edge {source!r} -> {target!r} to {weight} (was {previous})")

        self._check_rep()
        return previous

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_vertex_labels(self) -> Set[str]:
        """Return a snapshot set of all vertex labels."""
        return set(self._vertices)

    def get_incoming_edges(self, target: str) -> Dict[str, int]:
        """
        Get every edge that ends at target.

        Args:
            target: Label of the target vertex

        Returns:
            New dictionary mapping source label -> weight; empty if target is
            absent or has no incoming edges
        """
        return find_incoming_edges(self._adjacency(), target)

    def get_outgoing_edges(self, source: str) -> Dict[str, int]:
        """
        Get every edge that starts at source.

        Args:
            source: Label of the source vertex

        Returns:
            New dictionary mapping target label -> weight; empty if source is
            absent or has no outgoing edges
        """
        pVertex = self._vertices.get(source)
        if pVertex is None:
            return {}
        return pVertex.get_edges()

    def has_vertex(self, label: str) -> bool:
        return label in self._vertices

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        return len(self._vertices)

    def get_edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return sum(pVertex.get_edge_count() for pVertex in self._vertices.values())

    def get_edge_weight(self, source: str, target: str) -> int:
        """Get the weight of source -> target, or 0 if there is no such edge."""
        pVertex = self._vertices.get(source)
        if pVertex is None:
            return 0
        return pVertex.get_edge_weight(target)

    def get_sources(self) -> List[str]:
        """Get labels of vertices with no incoming edges, in insertion order."""
        in_degree = calculate_in_degree(self._adjacency())
        return [label for label in self._vertices if in_degree[label] == 0]

    def get_sinks(self) -> List[str]:
        """Get labels of vertices with no outgoing edges, in insertion order."""
        return [label for label, pVertex in self._vertices.items() if pVertex.get_edge_count() == 0]

    def to_weight_matrix(self, labels: Optional[Sequence[str]] = None) -> np.ndarray:
        """
        Export the edge weights as a dense matrix.

        Args:
            labels: Row/column order. Defaults to the labels in sorted order.

        Returns:
            int64 array where entry [i, j] is the weight of labels[i] -> labels[j]

        Raises:
            InvalidReference: If labels names a vertex that is not in the graph
            ValueError: If labels contains duplicates
        """
        try:
            return build_weight_matrix(self._adjacency(), labels)
        except KeyError as error:
            raise InvalidReference(f"Vertex not found: {error.args[0]!r}") from error

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _adjacency(self) -> Dict[str, Dict[str, int]]:
        """Copy the graph into a plain source -> {target: weight} mapping."""
        return {label: pVertex.get_edges() for label, pVertex in self._vertices.items()}

    @staticmethod
    def _require_label(label: str) -> None:
        if not isinstance(label, str):
            raise TypeError(f"Vertex label must be a str, got {type(label).__name__}")

    def _check_rep(self) -> None:
        """
        Verify the representation invariant.

        Each vertex is stored under its own label, every edge target is a
        vertex of this graph, and every stored weight is positive.
        """
        if not self.check_rep:
            return

        for label, pVertex in self._vertices.items():
            if pVertex.label != label:
                raise InvariantViolation(f"Vertex {pVertex.label!r} stored under label {label!r}")
            for target, weight in pVertex.get_edges().items():
                if target not in self._vertices:
                    raise InvariantViolation(f"Edge {label!r} -> {target!r} references a missing vertex")
                if weight <= 0:
                    raise InvariantViolation(f"Edge {label!r} -> {target!r} has non-positive weight {weight}")

    # ========================================================================
    # PYTHON PROTOCOL
    # ========================================================================

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __str__(self) -> str:
        header = f"WeightedDirectedGraph: {self.get_vertex_count()} vertices, {self.get_edge_count()} edges"
        body = format_adjacency(self._adjacency())
        return f"{header}\n{body}" if body else header

    def __repr__(self) -> str:
        return f"WeightedDirectedGraph(vertices={list(self._vertices.values())!r})"
