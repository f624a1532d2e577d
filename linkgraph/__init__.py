"""
linkgraph - Generic In-Memory Directed Graph Library

A Python library for storing directed graphs of arbitrary hashable nodes
with payload-carrying links. Every link is visible from both endpoints,
and the graph offers reachability and shortest path analysis.

Main Classes:
    LinkGraph: Main class holding the graph (facade)
    Link: Directed link between two nodes
    ShortestPath: Result of a shortest path search

Example:
    >>> from linkgraph import LinkGraph
    >>> graph = LinkGraph(lambda cost: cost)
    >>> graph.add_dual(0, 1, 5)
    >>> graph.shortest_path(0, 1).cost
    5
"""

__version__ = "0.1.0"

from linkgraph.classes.link import Link
from linkgraph.core.linkgraph import LinkGraph
from linkgraph.analysis.pathfinding import ShortestPath
from linkgraph.exceptions import (
    GraphError,
    NodeNotFoundError,
    AlreadyExistsError,
    LinkExistsError,
    LinkNotFoundError,
    LoopbackNotAllowedError,
    CorruptedStateError,
    CostFunctionMissingError,
)

__all__ = [
    'LinkGraph',
    'Link',
    'ShortestPath',
    'GraphError',
    'NodeNotFoundError',
    'AlreadyExistsError',
    'LinkExistsError',
    'LinkNotFoundError',
    'LoopbackNotAllowedError',
    'CorruptedStateError',
    'CostFunctionMissingError',
]
