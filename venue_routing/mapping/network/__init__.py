"""
Walkway graph storage and GPS snapping.
"""

from .graph_store import GraphStore, GraphDataError
from .node_locator import NearestNodeLocator

__all__ = [
    'GraphStore',
    'GraphDataError',
    'NearestNodeLocator'
]
