"""
Shortest paths and diameter for the link graph.

This module provides an array-based Dijkstra search and the graph diameter
built on top of it.
"""

import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional

import numpy as np

from ..core.graph import Graph
from ..exceptions import CostFunctionMissingError

logger = logging.getLogger(__name__)

# Largest path cost the distance array can hold
MAX_COST = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class ShortestPath:
    """
    Outcome of a shortest path search.

    found is False when no directed path leads from the start to the end
    node; cost is then None and path is empty. A found path may still have
    a cost of zero.
    """

    found: bool
    cost: Optional[int] = None
    path: List[Hashable] = field(default_factory=list)


class PathFinder:
    """
    Path finding algorithms for the link graph.

    This class provides methods for:
    - Finding the cheapest directed path between two nodes
    - Measuring the graph diameter
    """

    def __init__(self, graph: Graph, cost_func: Optional[Callable[[Any], int]] = None):
        """
        Initialize the path finder.

        Args:
            graph: Graph instance to search
            cost_func: Maps a link payload to a non-negative integer cost
        """
        self.graph = graph
        self.cost_func = cost_func

    def shortest_path(self, start: Hashable, end: Hashable) -> ShortestPath:
        """
        Find the cheapest directed path from start to end.

        Args:
            start: Node the path starts at
            end: Node the path ends at

        Returns:
            ShortestPath with the total cost and the nodes from start to end
            inclusive, or found=False when end cannot be reached

        Raises:
            NodeNotFoundError: If either node is not in the graph
            CostFunctionMissingError: If the graph has no cost function
        """
        self._require_cost_func()
        self.graph.outlinks(start)
        self.graph.outlinks(end)

        nodes = self.graph.nodes()
        index = {node: i for i, node in enumerate(nodes)}

        return self._search(nodes, index, index[start], index[end])

    def diameter(self) -> int:
        """
        Get the largest node count among the shortest paths of all node pairs.

        Every unordered pair of distinct nodes is searched in both directions.
        A pair linked in only one direction still counts, through the direction
        that has a path. Pairs without a path either way are ignored. The
        result counts nodes, not links, so two nodes joined by one link have
        diameter 2.

        Returns:
            The diameter, or 0 when no pair of nodes is connected
        """
        self._require_cost_func()

        nodes = self.graph.nodes()
        index = {node: i for i, node in enumerate(nodes)}
        count = len(nodes)
        longest = 0

        for i in range(count):
            for j in range(i + 1, count):
                for a, b in ((i, j), (j, i)):
                    result = self._search(nodes, index, a, b)
                    if result.found and len(result.path) > longest:
                        longest = len(result.path)

        logger.debug(f"Diameter of graph with {count} nodes is {longest}")
        return longest

    def _require_cost_func(self):
        if self.cost_func is None:
            raise CostFunctionMissingError()

    def _link_cost(self, link_data: Any) -> int:
        # Non-integer costs raise TypeError instead of being truncated
        cost = operator.index(self.cost_func(link_data))
        if cost < 0:
            raise ValueError(f"Link cost must be non-negative, got {cost} for {link_data!r}")
        return cost

    def _search(self, nodes: List[Hashable], index: Dict[Hashable, int],
                start_idx: int, end_idx: int) -> ShortestPath:
        """
        Dijkstra search with linear minimum selection.

        The unvisited node with the lowest tentative distance is picked on each
        round, the first one in node order on ties. The search stops as soon
        as the end node is picked.
        """
        count = len(nodes)
        distance = np.zeros(count, dtype=np.int64)
        reached = np.zeros(count, dtype=bool)
        previous = np.full(count, -1, dtype=np.int64)
        visited = np.zeros(count, dtype=bool)

        reached[start_idx] = True

        while True:
            # Unreached nodes have no distance yet and are never picked
            remaining = np.flatnonzero(reached & ~visited)
            if remaining.size == 0:
                break

            current = int(remaining[np.argmin(distance[remaining])])
            if current == end_idx:
                break

            visited[current] = True
            base = int(distance[current])

            for link in self.graph.outlinks(nodes[current]):
                target = index[link.end_node]
                if visited[target]:
                    continue

                candidate = base + self._link_cost(link.link_data)
                if candidate > MAX_COST:
                    raise OverflowError(
                        f"Path cost to {link.end_node!r} exceeds {MAX_COST}, got {candidate}"
                    )

                if not reached[target] or candidate < distance[target]:
                    reached[target] = True
                    distance[target] = candidate
                    previous[target] = current

        if not reached[end_idx]:
            return ShortestPath(found=False)

        path = []
        step = end_idx
        while step != -1:
            path.append(nodes[step])
            step = int(previous[step])
        path.reverse()

        return ShortestPath(found=True, cost=int(distance[end_idx]), path=path)
