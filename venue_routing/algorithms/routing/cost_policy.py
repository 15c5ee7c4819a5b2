"""
Edge traversal cost under rider-chosen routing options.
"""

from dataclasses import dataclass
from typing import Optional

from ...config.routing_config import RoutingConfig
from ...data.models import Edge
from ..congestion.base_source import CongestionSource


@dataclass(frozen=True)
class RouteOptions:
    """Options a rider picks for a route."""
    avoid_stairs: bool = False  # hard-exclude edges with stairs
    prefer_shadow: bool = False  # penalise unshaded edges
    use_dynamic_weights: bool = True  # apply runtime congestion


class CostPolicy:
    """
    Turns an edge and the active options into a traversal cost.

    Evaluation order:
    1. stairs under ``avoid_stairs`` exclude the edge (``None``), they are
       not merely penalised;
    2. the base cost is the edge distance in meters;
    3. ``use_dynamic_weights`` multiplies by the congestion factor;
    4. ``prefer_shadow`` multiplies unshaded edges by ``shade_penalty``.
    """

    def __init__(self, congestion_source: Optional[CongestionSource] = None,
                 config: Optional[RoutingConfig] = None):
        self.congestion_source = congestion_source
        self.config = config or RoutingConfig()

    def congestion_factor(self, edge: Edge) -> float:
        if self.congestion_source is None:
            return edge.congestion_weight
        return self.congestion_source.effective_factor(edge)

    def cost(self, edge: Edge, options: RouteOptions) -> Optional[float]:
        """
        Cost of traversing an edge.

        Returns:
            Weighted cost, or None if the edge is excluded
        """
        if options.avoid_stairs and edge.has_stairs:
            return None

        cost = edge.distance_meters

        if options.use_dynamic_weights:
            cost *= self.congestion_factor(edge)

        if options.prefer_shadow and not edge.has_shadow:
            cost *= self.config.shade_penalty

        return cost
