"""
Topology builders.

Helpers that seed a graph with a common shape by calling its public
mutation methods. They work on any object offering add_link and add_dual,
so both LinkGraph and the core Graph can be populated.
"""

import logging
from typing import Any, Hashable, Sequence

logger = logging.getLogger(__name__)


def simple_complete(graph, nodes: Sequence[Hashable], link_data: Any = None):
    """
    Connect every node to every other node in both directions.

    No loopback links are created.

    Args:
        graph: Graph to populate
        nodes: Nodes to connect
        link_data: Payload for every link
    """
    for start in nodes:
        for end in nodes:
            if start == end:
                continue
            graph.add_link(start, end, link_data)

    logger.debug(f"Built simple complete graph over {len(nodes)} nodes")


def bidi_line(graph, nodes: Sequence[Hashable], link_data: Any = None):
    """
    Connect consecutive nodes with bidirectional links.

    For nodes [0, 1, 2, 3] the graph gets dual links (0,1), (1,2) and (2,3).

    Args:
        graph: Graph to populate
        nodes: Nodes in line order
        link_data: Payload for every link
    """
    for left, right in zip(nodes, nodes[1:]):
        graph.add_dual(left, right, link_data)

    logger.debug(f"Built bidirectional line over {len(nodes)} nodes")


def line(graph, nodes: Sequence[Hashable], link_data: Any = None):
    """
    Connect consecutive nodes with links pointing forward.

    For nodes [0, 1, 2] the graph gets links 0 -> 1 and 1 -> 2.
    """
    for start, end in zip(nodes, nodes[1:]):
        graph.add_link(start, end, link_data)

    logger.debug(f"Built directed line over {len(nodes)} nodes")
