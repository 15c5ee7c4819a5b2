"""
Runtime congestion data consumed by the router.
"""

from .base_source import CongestionSource
from .registry import CongestionRegistry
from .zone_feed import (
    ZoneCongestionFeed,
    ZoneOccupancy,
    ZoneStatus,
    ZoneMapping,
    CIRCUIT_ZONE_MAPPINGS,
    parse_zone_rows,
    describe
)

__all__ = [
    'CongestionSource',
    'CongestionRegistry',
    'ZoneCongestionFeed',
    'ZoneOccupancy',
    'ZoneStatus',
    'ZoneMapping',
    'CIRCUIT_ZONE_MAPPINGS',
    'parse_zone_rows',
    'describe'
]
