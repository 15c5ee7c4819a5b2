from __future__ import annotations

import pytest

from venue_routing import CongestionRegistry, GraphStore
from venue_routing.algorithms.congestion import (
    CIRCUIT_ZONE_MAPPINGS,
    ZoneCongestionFeed,
    ZoneMapping,
    ZoneOccupancy,
    ZoneStatus,
    describe,
    parse_zone_rows,
)


@pytest.mark.parametrize(
    ("occupancy", "factor"),
    [(95, 2.5), (90, 2.5), (80, 1.8), (75, 1.8), (65, 1.4), (45, 1.1), (39, 1.0), (0, 1.0)],
)
def test_occupancy_buckets(occupancy: int, factor: float) -> None:
    zone = ZoneOccupancy(id="z", capacity=100, current_occupancy=occupancy)
    assert zone.congestion_factor == factor


def test_zero_capacity_is_free_flowing() -> None:
    zone = ZoneOccupancy(id="z", capacity=0, current_occupancy=500)
    assert zone.occupancy_percentage == 0
    assert zone.congestion_factor == 1.0


def test_parse_rows_accepts_snake_and_camel_case() -> None:
    rows = [
        {"id": "fan-zone-principal", "capacity": "1000", "current_occupancy": 950, "status": "SATURATED"},
        {"zone_id": "paddock-vip-boxes", "capacity": 200, "currentOccupancy": "120", "waitTime": 4},
        {"name": "row without id", "capacity": 10},
    ]

    zones = parse_zone_rows(rows)

    assert [zone.id for zone in zones] == ["fan-zone-principal", "paddock-vip-boxes"]
    assert zones[0].status is ZoneStatus.SATURATED
    assert zones[0].occupancy_percentage == 95
    assert zones[1].current_occupancy == 120
    assert zones[1].wait_time_min == 4
    assert zones[1].status is ZoneStatus.OPEN


def test_apply_pushes_factor_to_every_zone_node(registry: CongestionRegistry) -> None:
    feed = ZoneCongestionFeed(registry)

    applied = feed.apply([ZoneOccupancy(id="fan-zone-principal", capacity=100, current_occupancy=92)])

    assert applied == {"fan-zone-principal": 2.5}
    assert registry.snapshot() == {"fan_zone": 2.5, "cross_4": 2.5, "food_main": 2.5}
    assert feed.zone_factors()["fan-zone-principal"] == 2.5


def test_unknown_zones_are_ignored_and_missing_zones_keep_their_factor(
        registry: CongestionRegistry) -> None:
    feed = ZoneCongestionFeed(registry)
    feed.apply([ZoneOccupancy(id="grada-t2-curva-ascari", capacity=100, current_occupancy=80)])

    applied = feed.apply([ZoneOccupancy(id="somewhere-else", capacity=100, current_occupancy=99)])

    assert applied == {}
    assert registry.get("curve_1") == 1.8
    assert feed.zone_factors()["grada-t2-curva-ascari"] == 1.8


def test_apply_rows_parses_then_applies(registry: CongestionRegistry) -> None:
    feed = ZoneCongestionFeed(registry)

    applied = feed.apply_rows([{"id": "vial-acceso-a-norte", "capacity": 100, "currentOccupancy": 62}])

    assert applied == {"vial-acceso-a-norte": 1.4}
    assert registry.get("gate_main") == 1.4


def test_traffic_factor_uses_nearest_zone(registry: CongestionRegistry) -> None:
    mappings = [
        ZoneMapping("north", (41.0, 2.0), 50.0, ("n1",)),
        ZoneMapping("south", (40.9, 2.0), 50.0, ("s1",)),
    ]
    feed = ZoneCongestionFeed(registry, mappings)
    feed.apply([ZoneOccupancy(id="north", capacity=10, current_occupancy=10)])

    assert feed.traffic_factor((41.001, 2.0)) == 2.5
    assert feed.traffic_factor((40.899, 2.0)) == 1.0
    assert feed.segment_traffic_factor((41.001, 2.0), (40.899, 2.0)) == pytest.approx(1.75)
    assert feed.traffic_description((41.001, 2.0)) == "Very congested area"


def test_traffic_factor_without_zones_is_nominal(registry: CongestionRegistry) -> None:
    assert ZoneCongestionFeed(registry, []).traffic_factor((41.0, 2.0)) == 1.0


@pytest.mark.parametrize(
    ("factor", "label"),
    [(0.5, "Flowing freely"), (1.0, "Normal traffic"), (1.4, "Busy area"),
     (1.8, "Congested area"), (2.5, "Very congested area")],
)
def test_describe(factor: float, label: str) -> None:
    assert describe(factor) == label


def test_circuit_zone_mappings_reference_known_nodes(circuit: GraphStore) -> None:
    for mapping in CIRCUIT_ZONE_MAPPINGS:
        for node_id in mapping.node_ids:
            assert node_id in circuit, f"{mapping.zone_id} maps unknown node {node_id}"
