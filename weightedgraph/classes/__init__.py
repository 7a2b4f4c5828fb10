"""
Data classes used by the graph representation.

This module contains the vertex record and the helpers that operate on
plain adjacency mappings.
"""

from .vertex import Vertex

__all__ = [
    'Vertex',
]
