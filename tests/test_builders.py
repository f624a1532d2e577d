import pytest

from linkgraph import LinkExistsError, LinkGraph
from linkgraph.core import Graph
from linkgraph.operations import bidi_line, line, simple_complete

from conftest import assert_mirrored


def test_simple_complete(graph: LinkGraph) -> None:
    nodes = list(range(5))

    simple_complete(graph, nodes, 7)

    for start in nodes:
        assert not graph.has_link(start, start)
        assert len(graph.outlinks(start)) == 4
        assert len(graph.inlinks(start)) == 4
        for end in nodes:
            if start != end:
                assert graph.link_data(start, end) == 7
    assert_mirrored(graph)


def test_bidi_line_uses_given_nodes_and_payload(graph: LinkGraph) -> None:
    bidi_line(graph, ["a", "b", "c", "d"], 10)

    assert sorted(graph.nodes()) == ["a", "b", "c", "d"]
    assert graph.link_data("a", "b") == 10
    assert graph.link_data("d", "c") == 10
    assert not graph.has_link("a", "c")
    assert_mirrored(graph)


def test_line_is_one_way(graph: LinkGraph) -> None:
    line(graph, [0, 1, 2], 1)

    assert graph.has_link(0, 1)
    assert graph.has_link(1, 2)
    assert not graph.has_link(1, 0)


def test_builders_accept_short_sequences(graph: LinkGraph) -> None:
    bidi_line(graph, [], 1)
    line(graph, [0], 1)
    simple_complete(graph, [0], 1)

    assert graph.nodes() == []


def test_bidi_line_over_existing_link_fails(graph: LinkGraph) -> None:
    graph.add_link(2, 1, 1)

    with pytest.raises(LinkExistsError):
        bidi_line(graph, [0, 1, 2], 1)


def test_builders_work_on_core_graph() -> None:
    graph = Graph()

    bidi_line(graph, range(4), 1)

    assert sorted(graph.neighbors(1)) == [0, 2]
