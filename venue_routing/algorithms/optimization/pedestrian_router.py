"""
Pedestrian router: the engine's entry points for route requests.
"""

import logging
import time
from typing import Dict, List, Optional

from ...config.routing_config import RoutingConfig
from ...data.models import Edge, LatLon, Node, PathResult, RouteOutcome
from ...mapping.network.graph_store import GraphStore
from ...mapping.network.node_locator import NearestNodeLocator
from ..congestion.base_source import CongestionSource
from ..congestion.registry import CongestionRegistry
from ..routing.astar_weighted import AStarSearch
from ..routing.cost_policy import CostPolicy, RouteOptions
from ..routing.route_composer import RouteComposer

logger = logging.getLogger(__name__)


class PedestrianRouter:
    """
    Routes pedestrians across a venue's walkway network.

    Wires the graph, a congestion source, the cost policy, A* search, GPS
    snapping and route composition together. The congestion source is
    injected so that each venue (and each test) owns its own crowding state;
    when omitted a fresh CongestionRegistry is created.

    Every call is a stateless one-shot computation and may run concurrently
    with other calls and with congestion updates.
    """

    def __init__(self, graph: Optional[GraphStore] = None,
                 congestion_source: Optional[CongestionSource] = None,
                 config: Optional[RoutingConfig] = None):
        """
        Initialize the router.

        Args:
            graph: Walkway graph (the circuit network if omitted)
            congestion_source: Runtime congestion data
            config: Routing configuration parameters
        """
        self.config = config or RoutingConfig()
        self.config.validate()

        self.graph = graph if graph is not None else GraphStore.from_circuit()
        self.congestion = congestion_source if congestion_source is not None else CongestionRegistry(self.config)
        self.cost_policy = CostPolicy(self.congestion, self.config)
        self.astar = AStarSearch(self.graph, self.cost_policy, self.config)
        self.locator = NearestNodeLocator(self.graph)
        self.composer = RouteComposer(self.graph, self.config)

        logger.info(f"PedestrianRouter initialized with {len(self.graph)} nodes")

    # Route requests

    def plan_route(self, from_id: str, to_id: str,
                   avoid_stairs: bool = False,
                   prefer_shadow: bool = False,
                   use_dynamic_weights: bool = True) -> RouteOutcome:
        """
        Find a route between two nodes, reporting why none exists.

        Args:
            from_id: Origin node id
            to_id: Destination node id
            avoid_stairs: Exclude edges with stairs (accessibility)
            prefer_shadow: Penalise unshaded edges
            use_dynamic_weights: Apply runtime congestion factors

        Returns:
            RouteOutcome holding the route, or NODE_NOT_FOUND / NO_PATH_EXISTS
        """
        missing = [node_id for node_id in (from_id, to_id) if not self.graph.has_node(node_id)]
        if missing:
            logger.warning(f"Route request with unknown node(s): {missing}")
            return RouteOutcome.node_not_found(*missing)

        options = RouteOptions(
            avoid_stairs=avoid_stairs,
            prefer_shadow=prefer_shadow,
            use_dynamic_weights=use_dynamic_weights
        )

        start_time = time.time()
        search_result = self.astar.search(from_id, to_id, options)

        if search_result is None:
            logger.warning(f"No route found from {from_id} to {to_id}")
            return RouteOutcome.no_path(from_id, to_id)

        route = self.composer.compose(search_result.node_ids, search_result.weighted_cost, options)
        route.calculation_time = time.time() - start_time

        logger.info(f"Route found {from_id} -> {to_id}: {len(route.nodes)} nodes, "
                    f"{route.total_distance_meters:.0f}m, "
                    f"calculated in {route.calculation_time * 1000:.1f}ms")
        return RouteOutcome.found(route)

    def find_route(self, from_id: str, to_id: str,
                   avoid_stairs: bool = False,
                   prefer_shadow: bool = False,
                   use_dynamic_weights: bool = True) -> Optional[PathResult]:
        """Route between two nodes; None if an id is unknown or no path exists."""
        return self.plan_route(from_id, to_id, avoid_stairs, prefer_shadow, use_dynamic_weights).result

    def plan_route_from_gps(self, user_position: LatLon, to_id: str,
                            avoid_stairs: bool = False,
                            prefer_shadow: bool = False) -> RouteOutcome:
        """
        Find a route from an arbitrary GPS position.

        The position is snapped to the nearest graph node first.
        """
        nearest = self.locator.nearest(user_position)
        if nearest is None:
            logger.warning("Cannot snap GPS position: graph has no nodes")
            return RouteOutcome.node_not_found()

        logger.debug(f"GPS {user_position} snapped to {nearest.id}")
        return self.plan_route(nearest.id, to_id, avoid_stairs, prefer_shadow)

    def find_route_from_gps(self, user_position: LatLon, to_id: str,
                            avoid_stairs: bool = False,
                            prefer_shadow: bool = False) -> Optional[PathResult]:
        return self.plan_route_from_gps(user_position, to_id, avoid_stairs, prefer_shadow).result

    # Congestion feed contract

    def update_congestion(self, node_id: str, factor: float) -> float:
        """Record crowding at a node; out-of-range factors are clamped."""
        return self.congestion.update(node_id, factor)

    def clear_congestion(self) -> None:
        self.congestion.clear()

    def congestion_snapshot(self) -> Dict[str, float]:
        return self.congestion.snapshot()

    # Graph passthroughs

    def nearest_node(self, position: LatLon) -> Optional[Node]:
        return self.locator.nearest(position)

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.graph.get_node(node_id)

    def all_nodes(self) -> List[Node]:
        return self.graph.all_nodes()

    def all_edges(self) -> List[Edge]:
        return self.graph.all_edges()

    def indoor_nodes(self) -> List[Node]:
        return self.graph.indoor_nodes()

    def validate_route(self, route: PathResult) -> bool:
        """
        Validate that a route is walkable on this graph.

        Checks that every consecutive node pair is joined by an edge and,
        for routes requested as accessible, that a step-free edge exists for
        each pair.

        Args:
            route: Route to validate

        Returns:
            True if route is valid
        """
        if not route.nodes:
            return False

        for from_node, to_node in zip(route.nodes, route.nodes[1:]):
            if not self.graph.has_edge(from_node.id, to_node.id,
                                       step_free=route.used_accessible_route):
                logger.error(f"Discontinuous path at nodes {from_node.id} -> {to_node.id}")
                return False

        return True
