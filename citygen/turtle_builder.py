"""Turtle interpretation of L-system strings into a road graph (units are metres)."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from citygen.road_graph import RoadGraph
from citygen.symbols import FORWARD, LEFT, POP, PUSH, RIGHT

TURN_ANGLE = 90.0


@dataclass
class State:
    """Position, heading in degrees, and the vertex the turtle stands on."""

    x: float
    y: float
    angle: float
    current_vertex_id: int


class TurtleBuilder:
    """Walks a generated string and lays down road vertices and edges."""

    def __init__(self, generated: str, graph: RoadGraph) -> None:
        self.generated = generated
        self.graph = graph
        self._stack: list[State] = []
        self.state = State(0.0, 0.0, 0.0, graph.add_vertex(0.0, 0.0))

    def create_graph(self) -> RoadGraph:
        """Interpret every command symbol in the string; return the graph."""
        actions = {
            FORWARD: self.move_forward,
            RIGHT: lambda: self.turn(TURN_ANGLE),
            LEFT: lambda: self.turn(-TURN_ANGLE),
            PUSH: self.push_state,
            POP: self.pop_state,
        }
        for char in self.generated:
            action = actions.get(char)
            if action is not None:
                action()
        return self.graph

    def move_forward(self) -> None:
        """Step one unit along the heading, adding a vertex and an edge."""
        radians = math.radians(self.state.angle)
        new_x = self.state.x + math.cos(radians)
        new_y = self.state.y + math.sin(radians)
        new_id = self.graph.add_vertex(new_x, new_y)
        self.graph.add_edge(self.state.current_vertex_id, new_id)
        self.state.x = new_x
        self.state.y = new_y
        self.state.current_vertex_id = new_id

    def turn(self, angle: float) -> None:
        """Add ``angle`` degrees to the heading, wrapping once into range."""
        self.state.angle += angle
        if self.state.angle > 360.0:
            self.state.angle -= 360.0
        elif self.state.angle < 0.0:
            self.state.angle += 360.0

    def push_state(self) -> None:
        """Save the current state."""
        self._stack.append(replace(self.state))

    def pop_state(self) -> None:
        """Restore the last saved state; do nothing if none is saved."""
        if self._stack:
            self.state = self._stack.pop()