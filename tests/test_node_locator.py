from __future__ import annotations

from venue_routing import GraphStore, NearestNodeLocator
from venue_routing.data import Node


def test_node_coordinates_snap_to_that_node(circuit: GraphStore) -> None:
    locator = NearestNodeLocator(circuit)

    for node in circuit.all_nodes():
        assert locator.nearest(node.position).id == node.id


def test_nearest_to_arbitrary_fix(circuit: GraphStore) -> None:
    locator = NearestNodeLocator(circuit)

    # a few meters north-west of the main entrance
    assert locator.nearest((41.56935, 2.25765)).id == "gate_main"


def test_empty_graph_has_no_nearest_node() -> None:
    assert NearestNodeLocator(GraphStore([], [])).nearest((41.0, 2.0)) is None


def test_prefix_restricts_candidates(circuit: GraphStore) -> None:
    locator = NearestNodeLocator(circuit)
    beside_north_lot = (41.5716, 2.2554)

    assert locator.nearest_with_prefix(beside_north_lot, "parking").id == "parking_n"
    assert locator.nearest_with_prefix((41.5661, 2.2566), "parking").id == "parking_s"
    # the closest node overall is not a parking when standing at the main entrance
    assert locator.nearest_with_prefix((41.5693, 2.2577), "parking").id.startswith("parking")
    assert locator.nearest_with_prefix(beside_north_lot, "heliport") is None


def test_equidistant_nodes_resolve_to_smallest_id() -> None:
    graph = GraphStore([
        Node("west", "West", (0.0, -0.001)),
        Node("east", "East", (0.0, 0.001)),
    ], [])

    assert NearestNodeLocator(graph).nearest((0.0, 0.0)).id == "east"
