"""
Data model and static datasets for venue routing.

This module contains:
- Node / edge / route result data classes
- The compiled-in circuit walkway network
- Distance and bearing calculations
"""

from .models import Node, Edge, Step, PathResult, RouteErrorKind, RouteOutcome, LatLon
from .circuit_graph import CIRCUIT_NODES, CIRCUIT_EDGES, bidirectional
from .distance_utils import (
    haversine_distance,
    position_distance,
    bearing_between,
    bearing_to_compass,
    calculate_path_distance
)

__all__ = [
    'Node',
    'Edge',
    'Step',
    'PathResult',
    'RouteErrorKind',
    'RouteOutcome',
    'LatLon',
    'CIRCUIT_NODES',
    'CIRCUIT_EDGES',
    'bidirectional',
    'haversine_distance',
    'position_distance',
    'bearing_between',
    'bearing_to_compass',
    'calculate_path_distance'
]
