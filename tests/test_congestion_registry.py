from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from venue_routing import CongestionRegistry, CongestionSource, RoutingConfig
from venue_routing.data import Edge


def test_factors_are_clamped_into_range(registry: CongestionRegistry) -> None:
    assert registry.update("fan_zone", 10.0) == 3.0
    assert registry.update("paddock", 0.1) == 0.5
    assert registry.update("cross_1", 1.7) == 1.7

    assert registry.snapshot() == {"fan_zone": 3.0, "paddock": 0.5, "cross_1": 1.7}


def test_clamp_bounds_follow_config() -> None:
    registry = CongestionRegistry(RoutingConfig(congestion_min=0.8, congestion_max=2.0))

    assert registry.update("n", 5.0) == 2.0
    assert registry.update("n", 0.2) == 0.8


def test_non_finite_factors(registry: CongestionRegistry) -> None:
    assert registry.update("a", float("nan")) == 1.0
    assert registry.update("b", float("inf")) == 3.0
    assert registry.update("c", float("-inf")) == 0.5

    assert registry.snapshot() == {"a": 1.0, "b": 3.0, "c": 0.5}
    assert registry.effective_factor(Edge("x", "a", 50.0)) == 1.0


def test_factor_is_keyed_by_destination_node(registry: CongestionRegistry) -> None:
    there = Edge("a", "b", 50.0)
    back = Edge("b", "a", 50.0)

    registry.update("b", 2.0)

    assert registry.effective_factor(there) == 2.0
    assert registry.effective_factor(back) == 1.0


def test_unset_node_falls_back_to_edge_weight(registry: CongestionRegistry) -> None:
    assert registry.effective_factor(Edge("a", "b", 50.0, congestion_weight=1.3)) == 1.3
    assert registry.get("b") is None


def test_clear_drops_every_factor(registry: CongestionRegistry) -> None:
    registry.update("a", 2.0)
    registry.update("b", 2.5)
    assert len(registry) == 2

    registry.clear()

    assert len(registry) == 0
    assert registry.snapshot() == {}
    assert registry.effective_factor(Edge("x", "a", 10.0)) == 1.0


def test_snapshot_is_a_copy(registry: CongestionRegistry) -> None:
    registry.update("a", 2.0)
    snapshot = registry.snapshot()
    snapshot["a"] = 99.0

    assert registry.get("a") == 2.0


def test_concurrent_writers_and_readers(registry: CongestionRegistry) -> None:
    edge = Edge("x", "hot", 10.0)

    def write(i: int) -> float:
        return registry.update("hot", 0.5 + (i % 5) * 0.5)

    def read(_: int) -> float:
        return registry.effective_factor(edge)

    with ThreadPoolExecutor(max_workers=8) as pool:
        written = list(pool.map(write, range(200)))
        read_back = list(pool.map(read, range(200)))

    assert all(0.5 <= factor <= 3.0 for factor in written + read_back)
    assert registry.get("hot") in {0.5, 1.0, 1.5, 2.0, 2.5}


def test_registry_is_a_congestion_source() -> None:
    assert isinstance(CongestionRegistry(), CongestionSource)
