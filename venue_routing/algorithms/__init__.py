"""
Routing algorithms and congestion handling.

This module contains:
- Core routing algorithms (cost policy, A*, route composition)
- Router entry points (venue-wide and last-mile)
- Runtime congestion sources
"""

from .routing.astar_weighted import AStarSearch, SearchResult
from .routing.cost_policy import CostPolicy, RouteOptions
from .routing.route_composer import RouteComposer
from .optimization.pedestrian_router import PedestrianRouter
from .optimization.last_mile import LastMileRouter
from .congestion.base_source import CongestionSource
from .congestion.registry import CongestionRegistry
from .congestion.zone_feed import ZoneCongestionFeed, ZoneOccupancy

__all__ = [
    'AStarSearch',
    'SearchResult',
    'CostPolicy',
    'RouteOptions',
    'RouteComposer',
    'PedestrianRouter',
    'LastMileRouter',
    'CongestionSource',
    'CongestionRegistry',
    'ZoneCongestionFeed',
    'ZoneOccupancy'
]
