import pytest

from linkgraph import CorruptedStateError, LinkGraph, LinkNotFoundError, NodeNotFoundError
from linkgraph.core import Graph
from linkgraph.operations import bidi_line, simple_complete


def test_outlinks_and_inlinks_reject_unknown_node(graph: LinkGraph) -> None:
    with pytest.raises(NodeNotFoundError):
        graph.outlinks(0)

    with pytest.raises(NodeNotFoundError):
        graph.inlinks(0)


def test_outlinks_are_live_views(graph: LinkGraph) -> None:
    graph.add_node(0)
    outlinks = graph.outlinks(0)

    graph.add_link(0, 1, 1)

    assert len(outlinks) == 1


def test_nodes_lists_every_node(graph: LinkGraph) -> None:
    graph.add_node("x")
    graph.add_link("a", "b", 1)

    assert sorted(graph.nodes()) == ["a", "b", "x"]
    assert len(graph) == 3
    assert "x" in graph
    assert graph.has_node("a")
    assert not graph.has_node("z")


def test_link_data_errors(graph: LinkGraph) -> None:
    graph.add_link(0, 1, 10)

    with pytest.raises(LinkNotFoundError):
        graph.link_data(1, 0)

    with pytest.raises(NodeNotFoundError):
        graph.link_data(0, 5)

    with pytest.raises(NodeNotFoundError):
        graph.link_data(5, 0)


def test_try_link_data(graph: LinkGraph) -> None:
    graph.add_link(0, 1, 10)

    assert graph.try_link_data(0, 1) == (True, 10)
    assert graph.try_link_data(1, 0) == (False, None)
    assert graph.try_link_data(7, 8) == (False, None)


def test_try_link_data_distinguishes_none_payload(graph: LinkGraph) -> None:
    graph.add_link(0, 1, None)

    assert graph.try_link_data(0, 1) == (True, None)


def test_neighbors_requires_both_directions(graph: LinkGraph) -> None:
    graph.add_dual(0, 1, 1)
    graph.add_link(0, 2, 1)
    graph.add_link(3, 0, 1)

    assert graph.neighbors(0) == [1]
    assert graph.neighbors(1) == [0]
    assert graph.neighbors(2) == []


def test_neighbors_in_complete_graph(graph: LinkGraph) -> None:
    simple_complete(graph, list(range(6)), 1)

    assert sorted(graph.neighbors(3)) == [0, 1, 2, 4, 5]


def test_neighbors_on_bidi_line(graph: LinkGraph) -> None:
    bidi_line(graph, list(range(5)), 1)

    assert graph.neighbors(0) == [1]
    assert sorted(graph.neighbors(2)) == [1, 3]


def test_neighbors_rejects_unknown_node(graph: LinkGraph) -> None:
    with pytest.raises(NodeNotFoundError):
        graph.neighbors(0)


def test_corrupted_mirror_is_detected() -> None:
    graph = Graph()
    graph.add_link(0, 1, 1)

    # Break the mirror through the live inlink view
    graph.inlinks(1).clear()

    with pytest.raises(CorruptedStateError):
        graph.remove_link(0, 1)

    # Nothing was removed before the fault was reported
    assert graph.has_link(0, 1)
