"""Storage for the road network: vertices joined by edges."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Edge:
    """A road segment between two vertices."""

    id: int
    start_vertex_id: int
    end_vertex_id: int


@dataclass
class Vertex:
    """A point of the road network and the ids of the edges touching it."""

    id: int
    x: float
    y: float
    edges: list[int] = field(default_factory=list)


class RoadGraph:
    """An undirected graph of road vertices and edges with sequential ids."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.edges: list[Edge] = []

    def add_vertex(self, x: float, y: float) -> int:
        """Add a vertex at (x, y) and return its id."""
        vertex_id = len(self.vertices)
        self.vertices.append(Vertex(vertex_id, x, y))
        return vertex_id

    def add_edge(self, start_vertex_id: int, end_vertex_id: int) -> int:
        """Join two existing vertices and return the new edge's id."""
        for vertex_id in (start_vertex_id, end_vertex_id):
            if not 0 <= vertex_id < len(self.vertices):
                raise IndexError(f"no vertex with id {vertex_id}")
        edge_id = len(self.edges)
        self.edges.append(Edge(edge_id, start_vertex_id, end_vertex_id))
        self.vertices[start_vertex_id].edges.append(edge_id)
        self.vertices[end_vertex_id].edges.append(edge_id)
        return edge_id

    def reset(self) -> None:
        """Remove every vertex and edge; ids start again from zero."""
        self.vertices.clear()
        self.edges.clear()