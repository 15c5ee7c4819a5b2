"""
Base abstract class for congestion sources.
"""

from abc import ABC, abstractmethod
from typing import Dict

from ...data.models import Edge


class CongestionSource(ABC):
    """
    Abstract base class for runtime congestion data.

    The router reads ``effective_factor`` once per evaluated edge; an external
    feed writes through ``update`` and ``clear``. Implementations must be safe
    to read and write from different threads.
    """

    @abstractmethod
    def update(self, node_id: str, factor: float) -> float:
        """
        Record a congestion factor for a node.

        Args:
            node_id: Node the crowding was observed at
            factor: Multiplier on walking cost (1.0 = nominal)

        Returns:
            The factor actually stored
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop all recorded factors."""
        pass

    @abstractmethod
    def effective_factor(self, edge: Edge) -> float:
        """
        Congestion multiplier to apply when traversing an edge.

        Args:
            edge: Edge being evaluated

        Returns:
            Multiplier on the edge's base distance
        """
        pass

    @abstractmethod
    def snapshot(self) -> Dict[str, float]:
        """Copy of the currently recorded factors."""
        pass
