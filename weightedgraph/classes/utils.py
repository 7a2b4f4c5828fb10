"""
Utility functions for weightedgraph.

This module provides shared helpers that operate on a plain adjacency mapping
(source label -> {target label -> weight}), so they can be used both by the
graph class and on its snapshots.
"""

import numpy as np
from typing import Dict, List, Optional, Sequence
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)


def find_incoming_edges(adjacency_dict: Dict[str, Dict[str, int]], target: str) -> Dict[str, int]:
    """
    Collect every edge pointing at a target by scanning all outgoing maps.

    Args:
        adjacency_dict: Dictionary mapping source label -> {target label: weight}
        target: Label of the target vertex

    Returns:
        New dictionary mapping source label -> weight
    """
    incoming = {}
    for source, edges in adjacency_dict.items():
        weight = edges.get(target, 0)
        if weight:
            incoming[source] = weight
    return incoming


def calculate_in_degree(adjacency_dict: Dict[str, Dict[str, int]]) -> Dict[str, int]:
    """
    Count incoming edges for every source vertex in the mapping.

    Args:
        adjacency_dict: Dictionary mapping source label -> {target label: weight}

    Returns:
        Dictionary mapping label -> number of incoming edges. Every key of
        adjacency_dict is present, with 0 when nothing points at it.
    """
    in_degree = defaultdict(int)
    for node in adjacency_dict:
        in_degree[node] += 0
        for neighbor in adjacency_dict[node]:
            in_degree[neighbor] += 1
    return dict(in_degree)


def build_weight_matrix(adjacency_dict: Dict[str, Dict[str, int]],
                        labels: Optional[Sequence[str]] = None) -> np.ndarray:
    """
    Build a dense weight matrix from an adjacency mapping.

    Args:
        adjacency_dict: Dictionary mapping source label -> {target label: weight}
        labels: Row/column order. Defaults to the sorted labels of adjacency_dict.

    Returns:
        int64 array where entry [i, j] is the weight of labels[i] -> labels[j],
        0 where there is no edge

    Raises:
        KeyError: If a label is not a key of adjacency_dict
        ValueError: If labels contains duplicates
    """
    if labels is None:
        labels = sorted(adjacency_dict)

    index = {}
    for i, label in enumerate(labels):
        if label in index:
            raise ValueError(f"Duplicate label in matrix order: {label!r}")
        if label not in adjacency_dict:
            raise KeyError(label)
        index[label] = i

    matrix = np.zeros((len(index), len(index)), dtype=np.int64)
    for source, i in index.items():
        for target, weight in adjacency_dict[source].items():
            j = index.get(target)
            if j is not None:
                matrix[i, j] = weight

    logger.debug(f"Built {matrix.shape[0]}x{matrix.shape[1]} weight matrix")
    return matrix


def format_adjacency(adjacency_dict: Dict[str, Dict[str, int]]) -> str:
    """
    Render an adjacency mapping as text, one vertex per line.

    Intended for diagnostics only; the layout is not stable.
    """
    lines: List[str] = []
    for source, edges in adjacency_dict.items():
        if edges:
            targets = ", ".join(f"{target}({weight})" for target, weight in edges.items())
            lines.append(f"  {source} -> {targets}")
        else:
            lines.append(f"  {source}")
    return "\n".join(lines)
