"""
Directed link between two nodes.
"""

from typing import Any, Hashable


class Link:
    """
    A directed link from a start node to an end node carrying a payload.

    Two links are equal when they connect the same ordered pair of nodes;
    the payload takes no part in equality or hashing. The endpoints are fixed
    at construction, only the payload may change.
    """

    __slots__ = ("_start_node", "_end_node", "link_data")

    def __init__(self, start_node: Hashable, end_node: Hashable, link_data: Any = None):
        self._start_node = start_node
        self._end_node = end_node
        self.link_data = link_data

    @property
    def start_node(self) -> Hashable:
        return self._start_node

    @property
    def end_node(self) -> Hashable:
        return self._end_node

    @property
    def is_loopback(self) -> bool:
        return self._start_node == self._end_node

    def equal_endpoints(self, start_node: Hashable, end_node: Hashable) -> bool:
        """Check whether this link runs from start_node to end_node."""
        return self._start_node == start_node and self._end_node == end_node

    def __eq__(self, other):
        if not isinstance(other, Link):
            return NotImplemented
        return self.equal_endpoints(other._start_node, other._end_node)

    def __hash__(self):
        return hash((self._start_node, self._end_node))

    def __repr__(self):
        return f"Link({self._start_node!r} -> {self._end_node!r}, link_data={self.link_data!r})"
