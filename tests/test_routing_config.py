from __future__ import annotations

import pytest

from conftest import triangle_graph
from venue_routing import GraphStore, RoutingConfig


def test_defaults() -> None:
    config = RoutingConfig.create_default_config()
    config.validate()

    assert config.walking_speed_mps == pytest.approx(1.25)
    assert config.shade_penalty == 1.4
    assert (config.congestion_min, config.congestion_max) == (0.5, 3.0)
    assert config.heuristic_scale == 1.0


def test_admissible_preset_scale_comes_from_graph() -> None:
    circuit = GraphStore.from_circuit()
    config = RoutingConfig.create_admissible_config(circuit)
    config.validate()

    # the circuit has walkways far shorter than their straight-line span
    assert 0 < config.heuristic_scale < config.congestion_min / 3
    assert config.heuristic_scale == circuit.admissible_heuristic_scale(config.congestion_min)
    assert RoutingConfig.create_admissible_config(triangle_graph()).heuristic_scale == pytest.approx(
        config.congestion_min
    )


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"walking_speed_kmh": 0}, "walking_speed_kmh"),
        ({"shade_penalty": 0.9}, "shade_penalty"),
        ({"congestion_min": 0}, "congestion_min"),
        ({"congestion_min": 2.0, "congestion_max": 1.0}, "congestion_min"),
        ({"heuristic_scale": 1.5}, "heuristic_scale"),
        ({"heuristic_scale": 0}, "heuristic_scale"),
        ({"parking_prefix": ""}, "parking_prefix"),
    ],
)
def test_validate_rejects_bad_values(overrides: dict, field: str) -> None:
    with pytest.raises(ValueError, match=field):
        RoutingConfig(**overrides).validate()


def test_preset_lookup() -> None:
    graph = triangle_graph()

    assert RoutingConfig.create_preset_config("default", graph) == RoutingConfig()
    assert RoutingConfig.create_preset_config("admissible", graph).heuristic_scale < 1.0
    with pytest.raises(ValueError, match="Unknown routing preset"):
        RoutingConfig.create_preset_config("fastest", graph)
