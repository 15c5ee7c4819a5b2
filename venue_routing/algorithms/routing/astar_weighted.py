"""
Weighted A* search over the walkway graph.
"""

import heapq
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import position_distance
from ...mapping.network.graph_store import GraphStore
from .cost_policy import CostPolicy, RouteOptions

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Raw outcome of a successful search."""
    node_ids: List[str]
    weighted_cost: float
    expanded_nodes: int


class AStarSearch:
    """
    A* shortest-path search with a haversine heuristic.

    The open set is a binary heap keyed on ``(f, node_id)``: on equal
    ``f = g + h`` the node with the lexicographically smallest id is expanded
    first, so identical requests against identical congestion always return
    the same path.

    The heuristic is the straight-line distance to the goal times
    ``config.heuristic_scale``. The default scale of 1.0 overestimates
    whenever an edge costs less than its straight-line span, either because
    the walkway is shorter than the straight line or because congestion
    discounts it; the search then returns a valid but possibly non-optimal
    path. ``RoutingConfig.create_admissible_config(graph)`` picks a scale
    that restores least-cost results.
    """

    def __init__(self, graph: GraphStore, cost_policy: Optional[CostPolicy] = None,
                 config: Optional[RoutingConfig] = None):
        """
        Initialize the search.

        Args:
            graph: Walkway graph to search
            cost_policy: Edge cost evaluation (distance only if omitted)
            config: Routing configuration parameters
        """
        self.graph = graph
        self.config = config or RoutingConfig()
        self.cost_policy = cost_policy or CostPolicy(config=self.config)

    def heuristic(self, node_id: str, goal_id: str) -> float:
        node = self.graph.get_node(node_id)
        goal = self.graph.get_node(goal_id)
        return position_distance(node.position, goal.position) * self.config.heuristic_scale

    def search(self, from_id: str, to_id: str,
               options: Optional[RouteOptions] = None) -> Optional[SearchResult]:
        """
        Find the least-cost path between two nodes.

        Args:
            from_id: Origin node id
            to_id: Goal node id
            options: Routing options (defaults to ``RouteOptions()``)

        Returns:
            SearchResult, or None if either id is unknown or the open set is
            exhausted without reaching the goal
        """
        options = options or RouteOptions()

        if not self.graph.has_node(from_id) or not self.graph.has_node(to_id):
            return None

        logger.debug(f"A* search {from_id} -> {to_id} "
                     f"(avoid_stairs={options.avoid_stairs}, prefer_shadow={options.prefer_shadow}, "
                     f"dynamic={options.use_dynamic_weights})")

        g_score: Dict[str, float] = {from_id: 0.0}
        came_from: Dict[str, str] = {}
        closed: Set[str] = set()
        open_heap: List[Tuple[float, str]] = [(self.heuristic(from_id, to_id), from_id)]
        expanded = 0

        while open_heap:
            _, current = heapq.heappop(open_heap)

            if current == to_id:
                path = self._reconstruct_path(came_from, current)
                return SearchResult(path, g_score[current], expanded)

            if current in closed:
                continue
            closed.add(current)
            expanded += 1

            current_g = g_score[current]
            for edge in self.graph.neighbors(current):
                if edge.to_id in closed:
                    continue

                edge_cost = self.cost_policy.cost(edge, options)
                if edge_cost is None:
                    continue

                tentative_g = current_g + edge_cost
                if tentative_g < g_score.get(edge.to_id, math.inf):
                    came_from[edge.to_id] = current
                    g_score[edge.to_id] = tentative_g
                    f_score = tentative_g + self.heuristic(edge.to_id, to_id)
                    heapq.heappush(open_heap, (f_score, edge.to_id))

        logger.debug(f"Open set exhausted after {expanded} expansions: no path {from_id} -> {to_id}")
        return None

    @staticmethod
    def _reconstruct_path(came_from: Dict[str, str], goal_id: str) -> List[str]:
        path = [goal_id]
        while path[-1] in came_from:
            path.append(came_from[path[-1]])
        path.reverse()
        return path
