"""
Configuration management for venue pedestrian routing parameters.
"""

from dataclasses import dataclass

# Environment variable the API server reads its preset name from
PRESET_ENV_VAR = 'VENUE_ROUTING_PRESET'
PRESETS = ('default', 'admissible')


@dataclass
class RoutingConfig:
    """Configuration parameters for the pedestrian routing engine."""

    # Walking model
    walking_speed_kmh: float = 4.5  # nominal pedestrian speed used for ETA

    # Cost policy
    shade_penalty: float = 1.4  # multiplier for unshaded edges when shade is preferred

    # Congestion clamping
    congestion_min: float = 0.5  # lowest factor the registry will store
    congestion_max: float = 3.0  # highest factor the registry will store

    # Search behaviour
    heuristic_scale: float = 1.0  # multiplier on the haversine heuristic (1.0 = straight-line)

    # Last-mile routing
    parking_prefix: str = 'parking'  # node id prefix identifying parking entry points

    @property
    def walking_speed_mps(self) -> float:
        """Walking speed in meters per second."""
        return self.walking_speed_kmh / 3.6

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.walking_speed_kmh <= 0:
            raise ValueError("walking_speed_kmh must be positive")
        if self.shade_penalty < 1.0:
            raise ValueError("shade_penalty must be >= 1.0")
        if self.congestion_min <= 0:
            raise ValueError("congestion_min must be positive")
        if self.congestion_min > self.congestion_max:
            raise ValueError("congestion_min must not exceed congestion_max")
        if not 0 < self.heuristic_scale <= 1.0:
            raise ValueError("heuristic_scale must be in (0, 1]")
        if not self.parking_prefix:
            raise ValueError("parking_prefix must not be empty")

    @classmethod
    def create_default_config(cls) -> 'RoutingConfig':
        """Create the default configuration (matches the deployed engine)."""
        return cls()

    @classmethod
    def create_admissible_config(cls, graph) -> 'RoutingConfig':
        """
        Create configuration whose A* heuristic never overestimates on ``graph``.

        The scale is derived from the graph's shortest walkway relative to
        its straight-line span and from the lowest congestion factor, so the
        search returns least-cost paths. It changes which path wins on most
        venue graphs, so it is opt-in.

        Args:
            graph: GraphStore the configuration will route on
        """
        config = cls()
        config.heuristic_scale = graph.admissible_heuristic_scale(config.congestion_min)
        return config

    @classmethod
    def create_preset_config(cls, preset: str, graph) -> 'RoutingConfig':
        """
        Create configuration by preset name.

        Raises:
            ValueError: If the preset is not one of ``PRESETS``
        """
        if preset == 'default':
            return cls.create_default_config()
        if preset == 'admissible':
            return cls.create_admissible_config(graph)
        raise ValueError(f"Unknown routing preset: {preset}")
