"""
Snapping of GPS fixes onto walkway graph nodes.
"""

import logging
from typing import Iterable, Optional

from ...data.distance_utils import position_distance
from ...data.models import LatLon, Node
from .graph_store import GraphStore

logger = logging.getLogger(__name__)


class NearestNodeLocator:
    """
    Finds the graph node closest to an arbitrary coordinate.

    Uses a linear haversine scan over the candidate nodes. This is only
    viable because venue graphs hold tens of nodes; a network of thousands
    of nodes would need a spatial index.
    """

    def __init__(self, graph: GraphStore):
        self.graph = graph

    def nearest(self, position: LatLon) -> Optional[Node]:
        """
        Find the nearest node to a position.

        Args:
            position: (lat, lon) of the GPS fix

        Returns:
            Closest node, or None if the graph is empty
        """
        return self._closest(position, self.graph.all_nodes())

    def nearest_with_prefix(self, position: LatLon, prefix: str) -> Optional[Node]:
        """
        Find the nearest node whose id starts with ``prefix``.

        Used to locate the closest parking entry point to a parked car.

        Returns:
            Closest matching node, or None if no node id has the prefix
        """
        return self._closest(position, self.graph.nodes_with_prefix(prefix))

    @staticmethod
    def _closest(position: LatLon, candidates: Iterable[Node]) -> Optional[Node]:
        # Ties go to the lexicographically smallest id
        best = min(
            candidates,
            key=lambda node: (position_distance(position, node.position), node.id),
            default=None
        )
        if best is not None:
            logger.debug(f"Snapped {position} to {best.id}")
        return best
