"""
Main facade class for the link graph.

This module provides the LinkGraph class, which owns the core graph and
delegates to the traversal and path finding components.
"""

import logging
from typing import Any, Callable, Hashable, List, Optional, Set, Tuple

from ..classes.link import Link
from .graph import Graph
from ..analysis.traversal import NetworkTraversal
from ..analysis.pathfinding import PathFinder, ShortestPath

logger = logging.getLogger(__name__)


class LinkGraph:
    """
    Directed graph of generic nodes and link payloads.

    Some operations are described as 'open' or 'closed'. Open operations
    follow links in their direction, so the relation between the nodes
    involved is not symmetric. Closed operations only cross bidirectional
    links and are symmetric.
    """

    def __init__(self, cost_func: Optional[Callable[[Any], int]] = None):
        """
        Initialize an empty graph.

        Args:
            cost_func: Maps a link payload to a non-negative integer cost.
                Only needed for shortest_path and diameter.
        """
        self._graph = Graph()

        self._traversal = NetworkTraversal(self._graph)
        self._pathfinder = PathFinder(self._graph, cost_func)

    @property
    def cost_func(self) -> Optional[Callable[[Any], int]]:
        return self._pathfinder.cost_func

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_node(self, node: Hashable):
        """Add the given node to the graph as a disconnected node."""
        self._graph.add_node(node)

    def add_link(self, start: Hashable, end: Hashable, link_data: Any = None):
        """Add a directed link, adding missing endpoints to the graph."""
        self._graph.add_link(start, end, link_data)

    def add_dual(self, left: Hashable, right: Hashable, link_data: Any = None):
        """Add links in both directions between two distinct nodes."""
        self._graph.add_dual(left, right, link_data)

    def remove_link(self, start: Hashable, end: Hashable):
        """Remove the link from start to end."""
        self._graph.remove_link(start, end)

    def set_link_data(self, start: Hashable, end: Hashable, link_data: Any):
        """Replace the payload of the link from start to end."""
        self._graph.set_link_data(start, end, link_data)

    def disconnect(self, node: Hashable):
        """Remove all links of the given node, keeping the node."""
        self._graph.disconnect(node)

    def disconnect_all(self):
        """Remove all links, keeping every node."""
        self._graph.disconnect_all()

    def remove(self, node: Hashable):
        """Disconnect and remove the given node."""
        self._graph.remove(node)

    def remove_all(self):
        """Remove every node, leaving an empty graph."""
        self._graph.remove_all()

    # ========================================================================
    # QUERIES
    # ========================================================================

    def outlinks(self, node: Hashable) -> List[Link]:
        return self._graph.outlinks(node)

    def inlinks(self, node: Hashable) -> List[Link]:
        return self._graph.inlinks(node)

    def nodes(self) -> List[Hashable]:
        return self._graph.nodes()

    def link_data(self, start: Hashable, end: Hashable) -> Any:
        return self._graph.link_data(start, end)

    def try_link_data(self, start: Hashable, end: Hashable) -> Tuple[bool, Optional[Any]]:
        return self._graph.try_link_data(start, end)

    def has_node(self, node: Hashable) -> bool:
        return self._graph.has_node(node)

    def has_link(self, start: Hashable, end: Hashable) -> bool:
        return self._graph.has_link(start, end)

    def neighbors(self, node: Hashable) -> List[Hashable]:
        """Get the nodes linked to the given node in both directions."""
        return self._graph.neighbors(node)

    def __contains__(self, node) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return len(self._graph)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def closed_network(self, start: Hashable) -> Set[Hashable]:
        """Get the nodes reachable from start over bidirectional links only."""
        return self._traversal.closed_network(start)

    def open_network(self, start: Hashable) -> Set[Hashable]:
        """Get the nodes reachable from start along directed links."""
        return self._traversal.open_network(start)

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_path(self, start: Hashable, end: Hashable) -> ShortestPath:
        """Find the cheapest directed path from start to end."""
        return self._pathfinder.shortest_path(start, end)

    def diameter(self) -> int:
        """Get the node count of the longest shortest path in the graph."""
        return self._pathfinder.diameter()
