"""
Core routing algorithms.
"""

from .cost_policy import CostPolicy, RouteOptions
from .astar_weighted import AStarSearch, SearchResult
from .route_composer import RouteComposer

__all__ = [
    'CostPolicy',
    'RouteOptions',
    'AStarSearch',
    'SearchResult',
    'RouteComposer'
]
