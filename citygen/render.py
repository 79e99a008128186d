"""Drawing the road network onto a pygame surface."""

from __future__ import annotations

import pygame

from citygen.road_graph import RoadGraph

SCALE = 10
ROAD_COLOR = (0, 0, 0)

Point = tuple[float, float]


class RenderLayer:
    """Holds the road line segments for a surface and draws them."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.segments: list[tuple[Point, Point]] = []

    def build_road_mesh(self, graph: RoadGraph) -> None:
        """Rebuild the segments from the graph, centred on the surface."""
        width, height = self.surface.get_size()
        x_offset = float(int(width / 2))
        y_offset = float(int(height / 2))

        def project(vertex_id: int) -> Point:
            vertex = graph.vertices[vertex_id]
            return (SCALE * vertex.x + x_offset, SCALE * vertex.y + y_offset)

        self.segments = [
            (project(edge.start_vertex_id), project(edge.end_vertex_id))
            for edge in graph.edges
        ]

    def render_roads(self) -> None:
        """Draw every segment onto the surface."""
        for start, end in self.segments:
            pygame.draw.line(self.surface, ROAD_COLOR, start, end)