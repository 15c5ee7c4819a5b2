from __future__ import annotations

import pytest

from venue_routing import CongestionRegistry, GraphStore, PedestrianRouter, RoutingConfig
from venue_routing.data import Edge, Node, position_distance


def walkway(nodes: dict[str, Node], a: str, b: str, stretch: float = 1.0,
            has_stairs: bool = False, has_shadow: bool = False) -> list[Edge]:
    """Both directions of a walkway whose length is the straight line times ``stretch``."""
    meters = position_distance(nodes[a].position, nodes[b].position) * stretch
    return [
        Edge(a, b, meters, has_stairs=has_stairs, has_shadow=has_shadow),
        Edge(b, a, meters, has_stairs=has_stairs, has_shadow=has_shadow),
    ]


def triangle_graph() -> GraphStore:
    """A-B is a direct walkway with stairs; A-C-B is step-free."""
    nodes = {
        "A": Node("A", "Alpha", (0.0, 0.0)),
        "B": Node("B", "Bravo", (0.0, 1.0)),
        "C": Node("C", "Charlie", (1.0, 1.0)),
    }
    edges = (
        walkway(nodes, "A", "B", has_stairs=True)
        + walkway(nodes, "A", "C")
        + walkway(nodes, "C", "B")
    )
    return GraphStore(nodes.values(), edges)


@pytest.fixture
def triangle() -> GraphStore:
    return triangle_graph()


@pytest.fixture
def circuit() -> GraphStore:
    return GraphStore.from_circuit()


@pytest.fixture
def registry() -> CongestionRegistry:
    return CongestionRegistry()


@pytest.fixture
def router(registry: CongestionRegistry) -> PedestrianRouter:
    return PedestrianRouter(congestion_source=registry, config=RoutingConfig.create_default_config())
