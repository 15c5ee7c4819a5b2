from __future__ import annotations

import pytest

from venue_routing import CongestionRegistry, CostPolicy, RouteOptions, RoutingConfig
from venue_routing.data import Edge

SUNNY = Edge("a", "b", 100.0)
SHADED = Edge("a", "c", 100.0, has_shadow=True)
STAIRS = Edge("a", "d", 100.0, has_stairs=True)


def test_base_cost_is_distance() -> None:
    assert CostPolicy().cost(SUNNY, RouteOptions()) == 100.0


def test_stairs_are_excluded_not_penalised() -> None:
    policy = CostPolicy()

    assert policy.cost(STAIRS, RouteOptions(avoid_stairs=True)) is None
    assert policy.cost(STAIRS, RouteOptions()) == 100.0


def test_shade_penalty_applies_to_unshaded_edges_only() -> None:
    policy = CostPolicy()
    options = RouteOptions(prefer_shadow=True)

    assert policy.cost(SUNNY, options) == pytest.approx(140.0)
    assert policy.cost(SHADED, options) == 100.0


def test_congestion_multiplies_before_shade(registry: CongestionRegistry) -> None:
    policy = CostPolicy(registry)
    registry.update("b", 2.0)

    assert policy.cost(SUNNY, RouteOptions()) == 200.0
    assert policy.cost(SUNNY, RouteOptions(prefer_shadow=True)) == pytest.approx(280.0)
    assert policy.cost(SUNNY, RouteOptions(use_dynamic_weights=False)) == 100.0


def test_without_source_uses_static_edge_weight() -> None:
    edge = Edge("a", "b", 100.0, congestion_weight=1.5)

    assert CostPolicy().cost(edge, RouteOptions()) == 150.0
    assert CostPolicy().cost(edge, RouteOptions(use_dynamic_weights=False)) == 100.0


def test_shade_penalty_follows_config() -> None:
    policy = CostPolicy(config=RoutingConfig(shade_penalty=2.0))
    assert policy.cost(SUNNY, RouteOptions(prefer_shadow=True)) == 200.0


def test_raising_a_factor_never_lowers_path_cost(registry: CongestionRegistry) -> None:
    policy = CostPolicy(registry)
    path = [Edge("a", "b", 40.0), Edge("b", "c", 60.0), Edge("c", "d", 25.0)]

    def path_cost() -> float:
        return sum(policy.cost(edge, RouteOptions()) for edge in path)

    registry.update("c", 0.5)
    previous = path_cost()
    for factor in (0.9, 1.0, 1.6, 2.4, 3.0, 7.0):
        registry.update("c", factor)
        current = path_cost()
        assert current >= previous
        previous = current
