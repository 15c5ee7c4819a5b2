from __future__ import annotations

import networkx as nx
import pytest

from venue_routing import GraphDataError, GraphStore
from venue_routing.data import CIRCUIT_EDGES, CIRCUIT_NODES, Edge, Node, position_distance


def _nodes() -> list[Node]:
    return [
        Node("a", "A", (41.0, 2.0)),
        Node("b", "B", (41.001, 2.0), is_indoor=True),
        Node("parking_1", "Lot", (41.002, 2.0)),
    ]


def test_rejects_edge_to_unknown_node() -> None:
    with pytest.raises(GraphDataError, match="unknown node ghost"):
        GraphStore(_nodes(), [Edge("a", "ghost", 10.0)])


def test_rejects_duplicate_node_ids() -> None:
    nodes = _nodes() + [Node("a", "Another A", (41.5, 2.5))]
    with pytest.raises(GraphDataError, match="Duplicate node id: a"):
        GraphStore(nodes, [])


def test_rejects_non_positive_distance() -> None:
    with pytest.raises(GraphDataError):
        GraphStore(_nodes(), [Edge("a", "b", 0.0)])


def test_graph_data_error_is_a_value_error() -> None:
    assert issubclass(GraphDataError, ValueError)


def test_neighbors_groups_outgoing_edges_by_origin() -> None:
    edges = [Edge("a", "b", 10.0), Edge("a", "parking_1", 20.0), Edge("b", "a", 10.0)]
    store = GraphStore(_nodes(), edges)

    assert [edge.to_id for edge in store.neighbors("a")] == ["b", "parking_1"]
    assert [edge.to_id for edge in store.neighbors("b")] == ["a"]
    assert store.neighbors("parking_1") == ()
    assert store.neighbors("nowhere") == ()


def test_lookups_and_filters() -> None:
    store = GraphStore(_nodes(), [Edge("a", "b", 10.0)])

    assert len(store) == 3
    assert "a" in store
    assert "z" not in store
    assert store.get_node("b").name == "B"
    assert store.get_node("z") is None
    assert [node.id for node in store.indoor_nodes()] == ["b"]
    assert [node.id for node in store.nodes_with_prefix("parking")] == ["parking_1"]
    assert store.get_bounds() == {"lat_min": 41.0, "lat_max": 41.002, "lon_min": 2.0, "lon_max": 2.0}


def test_has_edge_respects_step_free(triangle: GraphStore) -> None:
    assert triangle.has_edge("A", "B")
    assert not triangle.has_edge("A", "B", step_free=True)
    assert triangle.has_edge("A", "C", step_free=True)
    assert not triangle.has_edge("B", "Z")


def test_has_edge_with_parallel_walkways() -> None:
    nodes = [Node("x", "X", (0.0, 0.0)), Node("y", "Y", (0.0, 0.001))]
    store = GraphStore(nodes, [Edge("x", "y", 90.0, has_stairs=True), Edge("x", "y", 140.0)])

    assert store.has_edge("x", "y", step_free=True)
    assert not store.has_edge("y", "x")


def test_networkx_mirror_is_frozen(triangle: GraphStore) -> None:
    graph = triangle.graph

    assert nx.is_frozen(graph)
    assert graph.number_of_nodes() == 3
    assert graph.number_of_edges() == 6
    assert graph.nodes["B"]["x"] == 1.0
    with pytest.raises(nx.NetworkXError):
        graph.add_node("D")


def test_reachability_with_and_without_stairs() -> None:
    nodes = [Node("x", "X", (0.0, 0.0)), Node("y", "Y", (0.0, 0.001)), Node("z", "Z", (0.0, 0.002))]
    edges = [Edge("x", "y", 120.0, has_stairs=True), Edge("y", "z", 120.0)]
    store = GraphStore(nodes, edges)

    assert store.is_reachable("x", "z")
    assert not store.is_reachable("x", "z", avoid_stairs=True)
    assert not store.is_reachable("z", "x")
    assert not store.is_reachable("x", "missing")


def test_circuit_dataset_is_consistent(circuit: GraphStore) -> None:
    assert len(circuit) == len(CIRCUIT_NODES) == 37
    assert len(circuit.all_edges()) == len(CIRCUIT_EDGES) == 90

    # every walkway is walkable in both directions with the same attributes
    for edge in circuit.all_edges():
        reverse = [e for e in circuit.neighbors(edge.to_id) if e.to_id == edge.from_id]
        assert len(reverse) == 1
        assert reverse[0].distance_meters == edge.distance_meters
        assert reverse[0].has_stairs == edge.has_stairs


def test_circuit_indoor_nodes(circuit: GraphStore) -> None:
    indoor = {node.id for node in circuit.indoor_nodes()}

    assert {"tunnel_north", "tunnel_south", "indoor_vip_box", "tower", "merch"} <= indoor
    assert "gate_main" not in indoor
    assert all(circuit.get_node(node_id).has_shadow for node_id in indoor)


def test_circuit_vip_box_needs_stairs(circuit: GraphStore) -> None:
    assert circuit.is_reachable("gate_main", "indoor_vip_box")
    assert not circuit.is_reachable("gate_main", "indoor_vip_box", avoid_stairs=True)
    assert circuit.is_reachable("gate_main", "trib_h", avoid_stairs=True)


def test_admissible_scale_on_straight_line_walkways(triangle: GraphStore) -> None:
    assert triangle.admissible_heuristic_scale() == pytest.approx(1.0)
    assert triangle.admissible_heuristic_scale(0.5) == pytest.approx(0.5)


def test_admissible_scale_follows_shortest_walkway_and_edge_weight() -> None:
    nodes = [Node("x", "X", (0.0, 0.0)), Node("y", "Y", (0.0, 0.001)), Node("z", "Z", (0.0, 0.002))]
    straight = position_distance(nodes[0].position, nodes[1].position)
    edges = [
        Edge("x", "y", straight / 4),
        Edge("y", "z", straight, congestion_weight=0.2),
    ]
    store = GraphStore(nodes, edges)

    assert store.admissible_heuristic_scale() == pytest.approx(0.2)
    assert store.admissible_heuristic_scale(0.1) == pytest.approx(0.025)


def test_admissible_scale_never_overestimates_circuit_edges(circuit: GraphStore) -> None:
    scale = circuit.admissible_heuristic_scale(0.5)

    assert 0 < scale < 0.5
    for edge in circuit.all_edges():
        span = position_distance(circuit.get_node(edge.from_id).position,
                                 circuit.get_node(edge.to_id).position)
        assert scale * span <= edge.distance_meters * 0.5
