"""
Conversion of raw search paths into rider-facing route results.
"""

import logging
from typing import List, Optional

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import (
    bearing_between,
    bearing_to_compass,
    calculate_path_distance,
    position_distance
)
from ...data.models import Node, PathResult, Step
from ...mapping.network.graph_store import GraphStore
from .cost_policy import RouteOptions

logger = logging.getLogger(__name__)


class RouteComposer:
    """
    Builds PathResult objects: true distance, ETA and step instructions.

    Two different lengths are involved. ``total_distance_meters`` is the
    geometric length of the path (haversine between consecutive nodes).
    ``estimated_time_seconds`` is the *weighted* search cost divided by the
    walking speed, so congestion and shade penalties lengthen the ETA even
    though the meters walked are unchanged.
    """

    def __init__(self, graph: GraphStore, config: Optional[RoutingConfig] = None):
        self.graph = graph
        self.config = config or RoutingConfig()

    def compose(self, node_ids: List[str], weighted_cost: float,
                options: Optional[RouteOptions] = None) -> PathResult:
        """
        Build the route result for a searched path.

        Args:
            node_ids: Path node ids from origin to goal
            weighted_cost: Accumulated search cost of the path
            options: Options the route was requested with

        Returns:
            PathResult owned by the caller
        """
        options = options or RouteOptions()
        nodes = [self.graph.get_node(node_id) for node_id in node_ids]

        steps = self.build_steps(nodes)
        total_distance = calculate_path_distance([node.position for node in nodes])
        estimated_time = weighted_cost / self.config.walking_speed_mps

        logger.info(f"Route composed: {len(nodes)} nodes, {total_distance:.0f}m, "
                    f"{estimated_time / 60:.0f} min")

        return PathResult(
            nodes=nodes,
            total_distance_meters=total_distance,
            estimated_time_seconds=estimated_time,
            steps=steps,
            used_accessible_route=options.avoid_stairs,
            used_shadow_route=options.prefer_shadow,
            weighted_cost=weighted_cost
        )

    def build_steps(self, nodes: List[Node]) -> List[Step]:
        """One step per consecutive node pair."""
        steps = []
        for from_node, to_node in zip(nodes, nodes[1:]):
            distance = position_distance(from_node.position, to_node.position)
            steps.append(Step(
                instruction=self.format_instruction(from_node, to_node, distance),
                distance_meters=distance,
                from_node=from_node,
                to_node=to_node
            ))
        return steps

    @staticmethod
    def format_instruction(from_node: Node, to_node: Node, distance: float) -> str:
        bearing = bearing_between(from_node.position[0], from_node.position[1],
                                  to_node.position[0], to_node.position[1])
        return f"Head {bearing_to_compass(bearing)} toward {to_node.name} ({int(distance)} m)"
