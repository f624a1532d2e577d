"""
Small demonstration of the link graph.

Builds a three node bidirectional line, prints every node's links, then
disconnects the first node and prints the graph again.
"""

import logging
from typing import List

from .core.linkgraph import LinkGraph
from .operations.builders import bidi_line

logger = logging.getLogger(__name__)


def dump_graph(graph: LinkGraph) -> List[str]:
    """
    Describe every node of the graph with its outgoing and incoming links.

    Returns:
        Lines of text, one block per node followed by a blank line
    """
    lines = []
    for node in graph.nodes():
        lines.append(f"Node {node} =======")

        for link in graph.outlinks(node):
            lines.append(f"{node} --> {link.end_node}")

        for link in graph.inlinks(node):
            lines.append(f"{node} <-- {link.start_node}")

        lines.append("")

    return lines


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    graph = LinkGraph(lambda link_data: link_data)
    bidi_line(graph, [0, 1, 2], 42)

    print("\n".join(dump_graph(graph)))

    print("Disconnecting...")
    graph.disconnect(0)

    print("\n".join(dump_graph(graph)))

    logger.info(f"Closed network of 1: {sorted(graph.closed_network(1))}")
    return 0
