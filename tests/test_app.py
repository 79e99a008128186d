import pytest

from citygen.app import build_default_generator, generate_city
from citygen.road_graph import RoadGraph


def test_default_generator_configuration():
    gen = build_default_generator(0)
    assert gen.axiom == "F"
    assert gen.iterations == 4
    assert [p.successor for p in gen.productions] == [
        "F[+F][-F][++F][--F]F",
        "FF[+F][-F]F",
        "F[+F]F[-F]F",
    ]
    assert sum(p.probability for p in gen.productions) == pytest.approx(1.0)


def test_generate_city_builds_graph_from_string():
    gen = build_default_generator(3)
    graph = generate_city(gen, RoadGraph())
    forwards = gen.generated.count("F")
    assert len(graph.edges) == forwards
    assert len(graph.vertices) == forwards + 1


def test_generate_city_resets_previous_graph():
    gen = build_default_generator(5)
    graph = RoadGraph()
    generate_city(gen, graph)
    generate_city(gen, graph)
    assert graph.vertices[0].id == 0
    assert len(graph.vertices) == gen.generated.count("F") + 1


def test_seeded_generation_is_reproducible():
    first = build_default_generator(11)
    second = build_default_generator(11)
    generate_city(first, RoadGraph())
    generate_city(second, RoadGraph())
    assert first.generated == second.generated