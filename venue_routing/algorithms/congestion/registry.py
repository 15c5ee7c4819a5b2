"""
In-memory congestion registry fed by the venue traffic feed.
"""

import logging
import math
import threading
from typing import Dict, Optional

from ...config.routing_config import RoutingConfig
from ...data.models import Edge
from .base_source import CongestionSource

logger = logging.getLogger(__name__)


class CongestionRegistry(CongestionSource):
    """
    Thread-safe node -> congestion factor table.

    Factors are attached to the *destination* node of an edge: walking
    A -> B looks up B, walking B -> A looks up A, so the two directions of
    a walkway can cost differently.

    Searches read one edge at a time without taking a snapshot, so a search
    running while the feed writes may see old factors for some edges and new
    ones for others.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()
        self._factors: Dict[str, float] = {}
        self._lock = threading.Lock()

    def clamp(self, factor: float) -> float:
        """
        Bound a factor to the configured range.

        Infinities land on the nearest bound; NaN carries no information
        and is stored as nominal 1.0.
        """
        if math.isnan(factor):
            logger.warning("NaN congestion factor treated as nominal 1.0")
            factor = 1.0
        return min(max(factor, self.config.congestion_min), self.config.congestion_max)

    def update(self, node_id: str, factor: float) -> float:
        """
        Record a congestion factor, silently clamped into the configured range.

        Returns:
            The clamped factor that was stored
        """
        clamped = self.clamp(factor)
        with self._lock:
            self._factors[node_id] = clamped
        logger.debug(f"Congestion updated: {node_id} -> {clamped:.2f} (requested {factor:.2f})")
        return clamped

    def clear(self) -> None:
        with self._lock:
            self._factors.clear()
        logger.debug("Congestion cleared")

    def effective_factor(self, edge: Edge) -> float:
        with self._lock:
            factor = self._factors.get(edge.to_id)
        return edge.congestion_weight if factor is None else factor

    def get(self, node_id: str) -> Optional[float]:
        with self._lock:
            return self._factors.get(node_id)

    def snapshot(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._factors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._factors)
