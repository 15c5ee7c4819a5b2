"""
Data classes for the venue walkway graph and route results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Node:
    """A point of the walkway network (gate, grandstand, crossing, ...)."""
    id: str
    name: str
    position: LatLon  # (lat, lon)
    has_stairs: bool = False
    has_shadow: bool = False
    is_indoor: bool = False


@dataclass(frozen=True)
class Edge:
    """A directed walkway between two nodes"""
    from_id: str
    to_id: str
    distance_meters: float
    has_stairs: bool = False
    has_shadow: bool = False
    congestion_weight: float = 1.0  # 1.0 = nominal, >1 = crowded


@dataclass
class Step:
    """One instruction of a route, covering a single pair of consecutive nodes."""
    instruction: str
    distance_meters: float
    from_node: Node
    to_node: Node


@dataclass
class PathResult:
    """
    A walkable route returned to the caller.

    ``used_accessible_route`` and ``used_shadow_route`` echo the options the
    caller *asked for*; they are not a verification of the returned path.
    A shade-preferring route may still contain unshaded edges when no shaded
    alternative exists.
    """
    nodes: List[Node]
    total_distance_meters: float
    estimated_time_seconds: float
    steps: List[Step]
    used_accessible_route: bool = False
    used_shadow_route: bool = False
    weighted_cost: float = 0.0
    calculation_time: Optional[float] = None

    @property
    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    @property
    def coordinates(self) -> List[LatLon]:
        return [node.position for node in self.nodes]

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the route."""
        step_distances = np.array([step.distance_meters for step in self.steps])
        return {
            'node_count': len(self.nodes),
            'total_distance_m': round(self.total_distance_meters, 1),
            'weighted_cost': round(self.weighted_cost, 1),
            'estimated_time_min': round(self.estimated_time_seconds / 60, 1),
            'step_count': len(self.steps),
            'average_step_m': round(float(np.mean(step_distances)), 1) if step_distances.size else 0,
            'longest_step_m': round(float(np.max(step_distances)), 1) if step_distances.size else 0,
            'accessible_requested': self.used_accessible_route,
            'shade_requested': self.used_shadow_route,
            'calculation_time_ms': (round(self.calculation_time * 1000, 1)
                                    if self.calculation_time is not None else None)
        }


class RouteErrorKind(Enum):
    """Why a route request produced no route."""
    NODE_NOT_FOUND = "node_not_found"
    NO_PATH_EXISTS = "no_path_exists"


@dataclass
class RouteOutcome:
    """Tagged result of a route request: either a route or the reason there is none."""
    result: Optional[PathResult] = None
    error: Optional[RouteErrorKind] = None
    detail: str = ''
    missing_ids: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def found(cls, result: PathResult) -> 'RouteOutcome':
        return cls(result=result)

    @classmethod
    def node_not_found(cls, *node_ids: str) -> 'RouteOutcome':
        ids = list(node_ids)
        return cls(error=RouteErrorKind.NODE_NOT_FOUND,
                   detail=f"Unknown node id(s): {', '.join(ids)}",
                   missing_ids=ids)

    @classmethod
    def no_path(cls, from_id: str, to_id: str) -> 'RouteOutcome':
        return cls(error=RouteErrorKind.NO_PATH_EXISTS,
                   detail=f"No path from {from_id} to {to_id} under the requested options")
