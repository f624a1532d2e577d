"""
Reachability analysis over the link graph.

Two notions of reachability are provided. The open network of a node follows
links in their direction only and is not symmetric. The closed network only
crosses pairs of nodes linked in both directions, which makes it symmetric:
every member of a closed network has the same closed network.
"""

import logging
from typing import Hashable, Set
from collections import deque

from ..core.graph import Graph

logger = logging.getLogger(__name__)


class NetworkTraversal:
    """
    Breadth-first reachability queries.

    This class provides methods for:
    - Finding the nodes reachable through bidirectional links only
    - Finding the nodes reachable along directed links
    """

    def __init__(self, graph: Graph):
        """
        Initialize the traversal engine.

        Args:
            graph: Graph instance to traverse
        """
        self.graph = graph

    def closed_network(self, start: Hashable) -> Set[Hashable]:
        """
        Find every node reachable from start by crossing bidirectional links.

        Args:
            start: Node to start from

        Returns:
            Set of nodes in the closed network, including start

        Raises:
            NodeNotFoundError: If start is not in the graph
        """
        # Fails early for an unknown start node
        self.graph.outlinks(start)

        seen = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()

            for link in self.graph.outlinks(current):
                peer = link.end_node
                if peer in seen:
                    continue

                # Only cross when the peer links back
                if self.graph.has_link(peer, current):
                    seen.add(peer)
                    queue.append(peer)

        logger.debug(f"Closed network of {start!r} has {len(seen)} nodes")
        return seen

    def open_network(self, start: Hashable) -> Set[Hashable]:
        """
        Find every node reachable from start by following links forward.

        Args:
            start: Node to start from

        Returns:
            Set of nodes in the open network, including start

        Raises:
            NodeNotFoundError: If start is not in the graph
        """
        self.graph.outlinks(start)

        seen = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()

            for link in self.graph.outlinks(current):
                if link.end_node not in seen:
                    seen.add(link.end_node)
                    queue.append(link.end_node)

        logger.debug(f"Open network of {start!r} has {len(seen)} nodes")
        return seen
