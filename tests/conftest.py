from __future__ import annotations

import pytest

from linkgraph import LinkGraph
from linkgraph.operations import line


@pytest.fixture
def graph() -> LinkGraph:
    """Empty graph whose link payloads are their own cost."""
    return LinkGraph(lambda link_data: link_data)


@pytest.fixture
def directed_line(graph: LinkGraph) -> LinkGraph:
    """100 nodes linked 0 -> 1 -> ... -> 99 with unit cost."""
    line(graph, list(range(100)), 1)
    return graph


def assert_mirrored(graph: LinkGraph) -> None:
    """Every outlink has exactly one identical inlink at its end node, and back."""
    for node in graph.nodes():
        ends = [link.end_node for link in graph.outlinks(node)]
        assert len(ends) == len(set(ends))

        for link in graph.outlinks(node):
            assert link.start_node == node
            mirrors = [other for other in graph.inlinks(link.end_node) if other == link]
            assert len(mirrors) == 1
            assert mirrors[0] is link

        for link in graph.inlinks(node):
            assert link.end_node == node
            mirrors = [other for other in graph.outlinks(link.start_node) if other == link]
            assert len(mirrors) == 1
            assert mirrors[0] is link
