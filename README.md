# citygen

citygen generates city road networks. A stochastic L-system produces a string of
turtle commands. The package walks that string to build a road graph and then
draws the graph in a pygame window.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
citygen
citygen --seed 42
```

This opens a resizable window. The left panel has a **Test** button. Each click
on it makes the L-system generate a new string, builds a fresh road graph from
that string and draws the roads in black at the centre of the city view. The
generated string and the position of every vertex are printed to standard
output. The panel below the button shows the frame rate.

`--seed` fixes the random seed for choosing rules, so that the same sequence of
clicks produces the same cities. Without it, each run is different.

## The symbols

| Symbol | Meaning                    |
|--------|----------------------------|
| `F`    | move forward one unit      |
| `+`    | turn 90 degrees            |
| `-`    | turn -90 degrees           |
| `[`    | push the turtle's state    |
| `]`    | pop the turtle's state     |

`citygen.symbols.is_command_symbol` reports whether a character is one of these.
The turtle ignores any other character. A `]` that has no saved state does nothing.

## Using the library

```python
from citygen.lsystem import LSystemGenerator, Production
from citygen.road_graph import RoadGraph
from citygen.turtle_builder import TurtleBuilder

generator = LSystemGenerator(seed=42)
generator.axiom = "F"
generator.iterations = 2
generator.add_rule(Production("F", "F[+F]F[-F]F", 1.0))
generated = generator.generate()

graph = RoadGraph()
TurtleBuilder(generated, graph).create_graph()
for vertex in graph.vertices:
    print(vertex.id, vertex.x, vertex.y)
```

A new `LSystemGenerator` starts with an empty axiom and zero iterations.
`generate()` stores its result in `generator.generated` and also returns it.

Several rules can share one predecessor. In that case one of them is chosen at
random for each occurrence, with a chance proportional to its probability.
`select_rule(predecessor)` makes a single such choice. It raises `KeyError` when
no rule has that predecessor.

`RoadGraph` gives vertices and edges sequential ids starting at 0. Each `Vertex`
lists the ids of the edges that touch it. `add_edge` raises `IndexError` for an
unknown vertex id. `reset()` empties the graph and restarts the ids.

`TurtleBuilder` puts its first vertex at the origin, facing 0 degrees. Each `F`
adds a vertex one unit ahead and an edge from the current vertex to the new one.

`citygen.app.build_default_generator(seed)` returns a generator with the default
city rules already set: axiom `F`, depth 4, and three weighted rules for `F`:

- `F[+F][-F][++F][--F]F` with weight 0.3
- `FF[+F][-F]F` with weight 0.3
- `F[+F]F[-F]F` with weight 0.4

`citygen.app.generate_city(generator, graph)` clears a graph, fills it from a new
generation and returns it.

`citygen.render.RenderLayer` converts a road graph into line segments on a
pygame surface. Each unit is scaled to 10 pixels, and the origin is placed at
the centre of the surface. `build_road_mesh(graph)` computes the segments, and
`render_roads()` draws them.

## What it does not do

The package does not save generated strings or road graphs to files, and it does
not load them from files. A city exists only while the viewer or your program
holds it. The viewer has no controls for changing the rules or the depth.