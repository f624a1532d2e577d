"""
Core data classes for graph representation.

This module contains the link type and the adjacency storage used
throughout the linkgraph library.
"""

from .link import Link
from .adjacency import AdjacencyRecord, AdjacencyStore

__all__ = [
    'Link',
    'AdjacencyRecord',
    'AdjacencyStore',
]
