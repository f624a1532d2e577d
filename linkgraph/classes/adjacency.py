"""
Adjacency storage for the graph.

Each node owns one AdjacencyRecord holding two ordered lists: the links that
start at the node (outlinks) and the links that end at it (inlinks). A link
object is shared between its start node's outlinks and its end node's
inlinks, so both views always see the same payload.
"""

import logging
from typing import Dict, Hashable, Iterator, List, Optional

from .link import Link
from ..exceptions import NodeNotFoundError

logger = logging.getLogger(__name__)


class AdjacencyRecord:
    """Outgoing and incoming links of a single node."""

    __slots__ = ("outlinks", "inlinks")

    def __init__(self):
        # Both lists are always created together
        self.outlinks: List[Link] = []
        self.inlinks: List[Link] = []

    def clear(self):
        self.outlinks.clear()
        self.inlinks.clear()


def find_link(links: List[Link], start_node: Hashable, end_node: Hashable) -> int:
    """
    Locate the link start_node -> end_node in a link list.

    Args:
        links: Outlink or inlink list to scan
        start_node: Start node of the wanted link
        end_node: End node of the wanted link

    Returns:
        Index of the link, or -1 if it is not in the list
    """
    for i, link in enumerate(links):
        if link.equal_endpoints(start_node, end_node):
            return i
    return -1


class AdjacencyStore:
    """
    Mapping from node to its AdjacencyRecord.

    A node is part of the graph exactly when it has a record here, whether
    or not that record holds any links.
    """

    def __init__(self):
        self._records: Dict[Hashable, AdjacencyRecord] = {}

    def ensure(self, node: Hashable) -> AdjacencyRecord:
        """Return the record for node, creating an empty one if missing."""
        record = self._records.get(node)
        if record is None:
            record = self.create(node)
        return record

    def create(self, node: Hashable) -> AdjacencyRecord:
        """Create the record for a node already known to be missing."""
        record = AdjacencyRecord()
        self._records[node] = record
        return record

    def get(self, node: Hashable) -> AdjacencyRecord:
        try:
            return self._records[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    def find(self, node: Hashable) -> Optional[AdjacencyRecord]:
        return self._records.get(node)

    def discard(self, node: Hashable):
        del self._records[node]

    def records(self) -> Iterator[AdjacencyRecord]:
        return iter(self._records.values())

    def nodes(self) -> List[Hashable]:
        return list(self._records.keys())

    def clear(self):
        self._records.clear()

    def __contains__(self, node) -> bool:
        return node in self._records

    def __len__(self) -> int:
        return len(self._records)
