import pytest

from citygen.road_graph import Edge, RoadGraph, Vertex


def test_vertex_ids_are_sequential():
    graph = RoadGraph()
    ids = [graph.add_vertex(float(i), 0.0) for i in range(4)]
    assert ids == [0, 1, 2, 3]
    assert [v.id for v in graph.vertices] == ids


def test_vertex_keeps_coordinates():
    graph = RoadGraph()
    graph.add_vertex(2.5, -1.5)
    assert graph.vertices[0] == Vertex(0, 2.5, -1.5, [])


def test_add_edge_links_both_vertices():
    graph = RoadGraph()
    a = graph.add_vertex(0.0, 0.0)
    b = graph.add_vertex(1.0, 0.0)
    edge_id = graph.add_edge(a, b)
    assert edge_id == 0
    assert graph.edges == [Edge(0, a, b)]
    assert graph.vertices[a].edges == [0]
    assert graph.vertices[b].edges == [0]


def test_edge_ids_are_sequential():
    graph = RoadGraph()
    for i in range(3):
        graph.add_vertex(float(i), 0.0)
    assert [graph.add_edge(0, 1), graph.add_edge(1, 2)] == [0, 1]
    assert graph.vertices[1].edges == [0, 1]


@pytest.mark.parametrize("start,end", [(0, 5), (-1, 0), (3, 0)])
def test_add_edge_with_missing_vertex_raises(start, end):
    graph = RoadGraph()
    graph.add_vertex(0.0, 0.0)
    with pytest.raises(IndexError):
        graph.add_edge(start, end)
    assert graph.edges == []


def test_reset_clears_and_restarts_ids():
    graph = RoadGraph()
    graph.add_vertex(0.0, 0.0)
    graph.add_vertex(1.0, 1.0)
    graph.add_edge(0, 1)
    graph.reset()
    assert graph.vertices == [] and graph.edges == []
    assert graph.add_vertex(3.0, 3.0) == 0