"""
Mapping functionality for venue routing.

This module contains:
- The immutable walkway graph store
- Nearest-node lookup for GPS positions
"""

from .network.graph_store import GraphStore, GraphDataError
from .network.node_locator import NearestNodeLocator

__all__ = [
    'GraphStore',
    'GraphDataError',
    'NearestNodeLocator'
]
