"""
Route request entry points.
"""

from .pedestrian_router import PedestrianRouter
from .last_mile import LastMileRouter

__all__ = [
    'PedestrianRouter',
    'LastMileRouter'
]
