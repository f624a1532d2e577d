"""
Core graph data structure.

This module provides the directed graph container together with its mutation
and point-query operations. Traversal and path algorithms live in the
analysis package and use only the public methods defined here.
"""

import logging
from typing import Any, Hashable, List, Optional, Tuple

from ..classes.adjacency import AdjacencyRecord, AdjacencyStore, find_link
from ..classes.link import Link
from ..exceptions import (
    AlreadyExistsError,
    CorruptedStateError,
    LinkExistsError,
    LinkNotFoundError,
    LoopbackNotAllowedError,
)

logger = logging.getLogger(__name__)


class Graph:
    """
    Directed graph of arbitrary hashable nodes with payload-carrying links.

    Relationships are stored twice: every node keeps the list of links that
    start at it and the list of links that end at it. The same Link object is
    registered in both lists, which gives:
    - O(1) access to a node's incoming and outgoing links
    - a single payload per link, visible from either endpoint
    - at most one link per ordered (start, end) pair
    """

    def __init__(self):
        self._store = AdjacencyStore()

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_node(self, node: Hashable):
        """
        Add the given node to the graph as a disconnected node.

        Args:
            node: The node to add

        Raises:
            AlreadyExistsError: If the node is already in the graph
        """
        if node in self._store:
            raise AlreadyExistsError(node)

        self._store.create(node)

    def add_link(self, start: Hashable, end: Hashable, link_data: Any = None):
        """
        Add a directed link from start to end.

        Either node is added to the graph first if it is not already present.

        Args:
            start: The node the link starts from
            end: The node the link ends at
            link_data: Payload stored on the link

        Raises:
            LinkExistsError: If a link from start to end already exists
        """
        start_record = self._store.ensure(start)
        end_record = self._store.ensure(end)

        # The end's inlinks mirror the start's outlinks, one check covers both
        if find_link(start_record.outlinks, start, end) >= 0:
            raise LinkExistsError(start, end)

        link = Link(start, end, link_data)
        start_record.outlinks.append(link)
        end_record.inlinks.append(link)

    def add_dual(self, left: Hashable, right: Hashable, link_data: Any = None):
        """
        Add a link from left to right and a link from right to left.

        Both directions are validated before either one is installed, so a
        failing call leaves the graph untouched.

        Args:
            left: One endpoint
            right: The other endpoint
            link_data: Payload stored on both links

        Raises:
            LoopbackNotAllowedError: If left and right are the same node
            LinkExistsError: If either direction already exists
        """
        if left == right:
            raise LoopbackNotAllowedError(left)

        for start, end in ((left, right), (right, left)):
            record = self._store.find(start)
            if record is not None and find_link(record.outlinks, start, end) >= 0:
                raise LinkExistsError(start, end)

        self.add_link(left, right, link_data)
        self.add_link(right, left, link_data)

    def remove_link(self, start: Hashable, end: Hashable):
        """
        Remove the link from start to end.

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
            LinkNotFoundError: If there is no link from start to end
        """
        start_record = self._store.get(start)
        end_record = self._store.get(end)

        self._remove_link_prefetched(start, end, start_record, end_record)

    def set_link_data(self, start: Hashable, end: Hashable, link_data: Any):
        """
        Replace the payload of the link from start to end.

        Raises:
            NodeNotFoundError: If start is not in the graph
            LinkNotFoundError: If there is no link from start to end
        """
        self._get_link(start, end).link_data = link_data

    def disconnect(self, node: Hashable):
        """
        Remove every link entering or leaving the given node.

        The node stays in the graph with no links. A loopback link is removed
        once, through the outlink pass.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        record = self._store.get(node)
        removed = 0

        for i in range(len(record.outlinks) - 1, -1, -1):
            link = record.outlinks[i]
            end_record = self._store.get(link.end_node)
            self._remove_link_prefetched(node, link.end_node, record, end_record)
            removed += 1

        for i in range(len(record.inlinks) - 1, -1, -1):
            link = record.inlinks[i]
            start_record = self._store.get(link.start_node)
            self._remove_link_prefetched(link.start_node, node, start_record, record)
            removed += 1

        logger.debug(f"Disconnected node {node!r}, removed {removed} links")

    def disconnect_all(self):
        """Remove every link in the graph. All nodes stay as isolated nodes."""
        for record in self._store.records():
            record.clear()

        logger.debug(f"Disconnected all {len(self._store)} nodes")

    def remove(self, node: Hashable):
        """
        Disconnect the given node and remove it from the graph.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        self.disconnect(node)
        self._store.discard(node)

    def remove_all(self):
        """Remove every node and link, leaving an empty graph."""
        self.disconnect_all()
        self._store.clear()

        logger.debug("Removed all nodes from graph")

    # ========================================================================
    # QUERIES
    # ========================================================================

    def outlinks(self, node: Hashable) -> List[Link]:
        """
        Get the links that start at the given node.

        The returned list is the graph's own storage and changes with later
        mutations.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        return self._store.get(node).outlinks

    def inlinks(self, node: Hashable) -> List[Link]:
        """
        Get the links that end at the given node.

        The returned list is the graph's own storage and changes with later
        mutations.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        return self._store.get(node).inlinks

    def nodes(self) -> List[Hashable]:
        """Get all nodes in the graph."""
        return self._store.nodes()

    def link_data(self, start: Hashable, end: Hashable) -> Any:
        """
        Get the payload of the link from start to end.

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
            LinkNotFoundError: If there is no link from start to end
        """
        self._store.get(end)
        return self._get_link(start, end).link_data

    def try_link_data(self, start: Hashable, end: Hashable) -> Tuple[bool, Optional[Any]]:
        """
        Look up the payload of the link from start to end without raising.

        Returns:
            Tuple of (found, link_data); link_data is None when not found
        """
        record = self._store.find(start)
        if record is None:
            return False, None

        index = find_link(record.outlinks, start, end)
        if index < 0:
            return False, None

        return True, record.outlinks[index].link_data

    def has_node(self, node: Hashable) -> bool:
        return node in self._store

    def has_link(self, start: Hashable, end: Hashable) -> bool:
        record = self._store.find(start)
        return record is not None and find_link(record.outlinks, start, end) >= 0

    def neighbors(self, node: Hashable) -> List[Hashable]:
        """
        Get the nodes the given node has a bidirectional link with.

        A peer counts when links exist in both directions between it and the
        node. A node is never its own neighbor, even with a loopback link.

        Raises:
            NodeNotFoundError: If the node is not in the graph
        """
        record = self._store.get(node)

        result = []
        for link in record.outlinks:
            peer = link.end_node
            if peer == node:
                continue
            if find_link(record.inlinks, peer, node) >= 0:
                result.append(peer)

        return result

    def __contains__(self, node) -> bool:
        return node in self._store

    def __len__(self) -> int:
        return len(self._store)

    # ========================================================================
    # PRIVATE METHODS
    # ========================================================================

    def _get_link(self, start: Hashable, end: Hashable) -> Link:
        outlinks = self._store.get(start).outlinks

        index = find_link(outlinks, start, end)
        if index < 0:
            raise LinkNotFoundError(start, end)

        return outlinks[index]

    def _remove_link_prefetched(self, start: Hashable, end: Hashable,
                                start_record: AdjacencyRecord, end_record: AdjacencyRecord):
        """
        Remove the link start -> end given both endpoints' records.

        Raises:
            LinkNotFoundError: If the link is not in start's outlinks
            CorruptedStateError: If the link is in start's outlinks but not
                in end's inlinks
        """
        out_index = find_link(start_record.outlinks, start, end)
        if out_index < 0:
            raise LinkNotFoundError(start, end)

        in_index = find_link(end_record.inlinks, start, end)
        if in_index < 0:
            logger.error(f"Link {start!r} -> {end!r} found in outlinks but missing from inlinks")
            raise CorruptedStateError(start, end, "Missing from the end node's inlinks.")

        del start_record.outlinks[out_index]
        del end_record.inlinks[in_index]
