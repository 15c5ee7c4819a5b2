"""
Adapter turning backend zone occupancy into node congestion factors.

The backend publishes occupancy per venue zone (grandstands, fan zones,
paddock, access roads). Each zone covers a handful of walkway nodes; the
feed converts occupancy into a congestion factor and pushes it to every node
of the zone. Fetching the occupancy rows is the caller's concern.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ...data.distance_utils import haversine_distance
from ...data.models import LatLon
from .base_source import CongestionSource

logger = logging.getLogger(__name__)


class ZoneStatus(Enum):
    """Operational status of a zone as reported by the backend."""
    OPEN = "open"
    SATURATED = "saturated"
    CLOSED = "closed"
    MAINTENANCE = "maintenance"
    OPERATIONAL = "operational"

    @classmethod
    def from_string(cls, value: Optional[str]) -> 'ZoneStatus':
        if value:
            for status in cls:
                if status.value == value.lower() or status.name == value.upper():
                    return status
        return cls.OPEN


@dataclass
class ZoneOccupancy:
    """Occupancy of one venue zone."""
    id: str
    name: str = ''
    type: str = 'GRANDSTAND'  # GRANDSTAND, PADDOCK, FANZONE, ROAD, PARKING
    status: ZoneStatus = ZoneStatus.OPEN
    capacity: int = 0
    current_occupancy: int = 0
    temperature: float = 0.0
    wait_time_min: int = 0
    entry_rate: int = 0  # people/min
    exit_rate: int = 0  # people/min

    @property
    def occupancy_percentage(self) -> int:
        if self.capacity <= 0:
            return 0
        return int(self.current_occupancy / self.capacity * 100)

    @property
    def congestion_factor(self) -> float:
        percentage = self.occupancy_percentage
        if percentage >= 90:
            return 2.5
        if percentage >= 75:
            return 1.8
        if percentage >= 60:
            return 1.4
        if percentage >= 40:
            return 1.1
        return 1.0


@dataclass(frozen=True)
class ZoneMapping:
    """Geographic footprint of a zone and the graph nodes it covers."""
    zone_id: str
    center: LatLon
    radius_meters: float
    node_ids: Tuple[str, ...]


CIRCUIT_ZONE_MAPPINGS: List[ZoneMapping] = [
    ZoneMapping('grada-t1-recta-principal', (41.5695, 2.2585), 100.0,
                ('trib_main', 'trib_a', 'cross_1')),
    ZoneMapping('fan-zone-principal', (41.5690, 2.2595), 80.0,
                ('fan_zone', 'cross_4', 'food_main')),
    ZoneMapping('paddock-vip-boxes', (41.5702, 2.2575), 70.0,
                ('paddock', 'pit_lane', 'tower', 'cross_2')),
    ZoneMapping('grada-t2-curva-ascari', (41.5678, 2.2610), 100.0,
                ('curve_1', 'curve_5')),
    ZoneMapping('vial-acceso-a-norte', (41.5710, 2.2560), 50.0,
                ('gate_main', 'gate_1', 'gate_3', 'gate_7')),
    ZoneMapping('grada-t3-chicane', (41.5685, 2.2555), 150.0,
                ('parking_n', 'parking_s', 'cross_3')),
    ZoneMapping('fan-zone-tecnologica', (41.5688, 2.2605), 80.0,
                ('curve_9', 'food_north', 'wc_main')),
]


def _first(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def _as_int(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def parse_zone_rows(rows: Iterable[Mapping[str, Any]]) -> List[ZoneOccupancy]:
    """
    Parse raw backend rows into zone occupancy records.

    Accepts both snake_case and camelCase keys and numeric strings. Rows
    without an id are skipped.

    Args:
        rows: Rows of the backend ``zone_traffic`` table

    Returns:
        Parsed zone occupancy records
    """
    zones = []
    for row in rows:
        zone_id = _first(row, 'id', 'zone_id')
        if not zone_id:
            logger.debug(f"Skipping zone row without id: {row}")
            continue
        zones.append(ZoneOccupancy(
            id=str(zone_id),
            name=str(row.get('name') or ''),
            type=str(row.get('type') or 'GRANDSTAND'),
            status=ZoneStatus.from_string(row.get('status')),
            capacity=_as_int(row.get('capacity')),
            current_occupancy=_as_int(_first(row, 'current_occupancy', 'currentOccupancy')),
            temperature=_as_float(row.get('temperature')),
            wait_time_min=_as_int(_first(row, 'wait_time', 'waitTime')),
            entry_rate=_as_int(_first(row, 'entry_rate', 'entryRate')),
            exit_rate=_as_int(_first(row, 'exit_rate', 'exitRate'))
        ))
    return zones


def describe(factor: float) -> str:
    """Human-readable label for a congestion factor."""
    if factor < 0.9:
        return "Flowing freely"
    if factor < 1.2:
        return "Normal traffic"
    if factor < 1.5:
        return "Busy area"
    if factor < 2.0:
        return "Congested area"
    return "Very congested area"


class ZoneCongestionFeed:
    """
    Pushes zone occupancy into a congestion source.

    Keeps the last factor seen for each zone so that positions can be
    scored against the nearest zone.
    """

    def __init__(self, source: CongestionSource,
                 mappings: Optional[List[ZoneMapping]] = None):
        self.source = source
        self.mappings = list(CIRCUIT_ZONE_MAPPINGS if mappings is None else mappings)
        self._zone_factors: Dict[str, float] = {m.zone_id: 1.0 for m in self.mappings}
        self._lock = threading.Lock()

    def apply(self, zones: Iterable[ZoneOccupancy]) -> Dict[str, float]:
        """
        Propagate zone occupancy to the graph nodes of each known zone.

        Zones without a mapping are ignored; mapped zones missing from the
        batch keep their previous factor.

        Args:
            zones: Latest occupancy of some or all zones

        Returns:
            Factor applied per zone id
        """
        by_id = {zone.id: zone for zone in zones}
        applied = {}

        for mapping in self.mappings:
            zone = by_id.get(mapping.zone_id)
            if zone is None:
                continue

            factor = zone.congestion_factor
            for node_id in mapping.node_ids:
                self.source.update(node_id, factor)
            applied[mapping.zone_id] = factor

        with self._lock:
            self._zone_factors.update(applied)

        unknown = set(by_id) - {m.zone_id for m in self.mappings}
        if unknown:
            logger.debug(f"Ignoring unmapped zones: {sorted(unknown)}")

        logger.info("Congestion from zones: " +
                    ", ".join(f"{zone_id}={factor:.1f}" for zone_id, factor in applied.items()))
        return applied

    def apply_rows(self, rows: Iterable[Mapping[str, Any]]) -> Dict[str, float]:
        """Parse raw backend rows and apply them."""
        return self.apply(parse_zone_rows(rows))

    def zone_factors(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._zone_factors)

    def traffic_factor(self, position: LatLon) -> float:
        """Last known factor of the zone whose centre is closest to ``position``."""
        if not self.mappings:
            return 1.0
        nearest = min(
            self.mappings,
            key=lambda m: haversine_distance(position[0], position[1], m.center[0], m.center[1])
        )
        with self._lock:
            return self._zone_factors.get(nearest.zone_id, 1.0)

    def segment_traffic_factor(self, start: LatLon, end: LatLon) -> float:
        """Mean of the traffic factors at both ends of a segment."""
        return (self.traffic_factor(start) + self.traffic_factor(end)) / 2.0

    def traffic_description(self, position: LatLon) -> str:
        return describe(self.traffic_factor(position))
