"""Interactive city generator window and the helpers it uses."""

from __future__ import annotations

import argparse

import pygame

from citygen.lsystem import LSystemGenerator, Production
from citygen.render import RenderLayer
from citygen.road_graph import RoadGraph
from citygen.turtle_builder import TurtleBuilder

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = int(WINDOW_WIDTH * 0.8)
FRAME_RATE = 120
CONTROLS_FRACTION = 0.2


def build_default_generator(seed: int | None = None) -> LSystemGenerator:
    """Return a generator with the default road-growing rules."""
    generator = LSystemGenerator(seed)
    generator.axiom = "F"
    generator.add_rule(Production("F", "F[+F][-F][++F][--F]F", 0.3))
    generator.add_rule(Production("F", "FF[+F][-F]F", 0.3))
    generator.add_rule(Production("F", "F[+F]F[-F]F", 0.4))
    generator.iterations = 4
    return generator


def generate_city(generator: LSystemGenerator, graph: RoadGraph) -> RoadGraph:
    """Clear the graph, expand the L-system and lay roads along it."""
    graph.reset()
    generator.generate()
    return TurtleBuilder(generator.generated, graph).create_graph()


def _regenerate(generator: LSystemGenerator, graph: RoadGraph, layer: RenderLayer) -> None:
    generate_city(generator, graph)
    print(f"Generated L-System: {generator.generated}")
    print("Generated Road Graph:")
    for vertex in graph.vertices:
        print(f"Vertex ID: {vertex.id}, Position: ({vertex.x}, {vertex.y})")
    layer.build_road_mesh(graph)


def _panel(size: tuple[int, int]) -> pygame.Surface:
    panel = pygame.Surface(size, pygame.SRCALPHA)
    panel.fill((220, 220, 220, 128))
    return panel


def main(argv: list[str] | None = None) -> int:
    """Open the generator window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="citygen", description="Generate a road network.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for rule choice")
    args = parser.parse_args(argv)

    pygame.init()
    window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("CityGen")
    font = pygame.font.Font(None, 22)
    clock = pygame.time.Clock()

    graph = RoadGraph()
    generator = build_default_generator(args.seed)
    layer = RenderLayer(pygame.Surface(window.get_size()))

    running = True
    while running:
        width, height = window.get_size()
        panel_width = int(width * CONTROLS_FRACTION)
        button_rect = pygame.Rect(10, 30, max(panel_width - 20, 40), 28)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                layer.surface = pygame.Surface(window.get_size())
                layer.build_road_mesh(graph)
            elif (
                event.type == pygame.MOUSEBUTTONDOWN
                and event.button == 1
                and button_rect.collidepoint(event.pos)
            ):
                _regenerate(generator, graph, layer)

        window.fill((255, 255, 255))
        layer.surface.fill((255, 255, 255))
        layer.render_roads()
        city_view = pygame.transform.scale(layer.surface, (width - panel_width, height))
        window.blit(city_view, (panel_width, 0))

        controls_height = int(WINDOW_HEIGHT * 0.2)
        controls = _panel((panel_width, controls_height))
        controls.blit(font.render("Controls", True, (0, 0, 0)), (10, 8))
        pygame.draw.rect(controls, (90, 120, 200), button_rect)
        label = font.render("Test", True, (255, 255, 255))
        controls.blit(label, label.get_rect(center=button_rect.center))
        window.blit(controls, (0, 0))

        stats = _panel((panel_width, int(WINDOW_HEIGHT * 0.1)))
        stats.blit(font.render(f"Frame Rate: {clock.get_fps():.1f} FPS", True, (0, 0, 0)), (10, 8))
        window.blit(stats, (0, controls_height))

        pygame.display.flip()
        clock.tick(FRAME_RATE)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())