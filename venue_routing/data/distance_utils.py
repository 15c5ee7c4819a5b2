"""
Distance and bearing calculation utilities.
"""

import math
from typing import List, Tuple

# Earth's radius in meters
EARTH_RADIUS_M = 6371000

COMPASS_DIRECTIONS = [
    'north', 'northeast', 'east', 'southeast',
    'south', 'southwest', 'west', 'northwest'
]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        lat1, lon1: First point coordinates
        lat2, lon2: Second point coordinates

    Returns:
        Distance in meters
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def position_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Haversine distance in meters between two (lat, lon) tuples."""
    return haversine_distance(a[0], a[1], b[0], b[1])


def bearing_between(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the initial bearing from point 1 to point 2.

    Returns:
        Bearing in degrees (0-360, 0 = north, clockwise)
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lon = math.radians(lon2 - lon1)

    y = math.sin(delta_lon) * math.cos(phi2)
    x = (math.cos(phi1) * math.sin(phi2) -
         math.sin(phi1) * math.cos(phi2) * math.cos(delta_lon))

    return (math.degrees(math.atan2(y, x)) + 360) % 360


def bearing_to_compass(bearing: float) -> str:
    """
    Bucket a bearing into one of eight 45-degree compass sectors.

    Each sector is centred on its direction, so north covers
    [337.5, 360) and [0, 22.5).
    """
    index = int(((bearing % 360) + 22.5) // 45) % 8
    return COMPASS_DIRECTIONS[index]


def calculate_path_distance(positions: List[Tuple[float, float]]) -> float:
    """
    Calculate the total geometric length of a polyline.

    Args:
        positions: Ordered (lat, lon) points

    Returns:
        Sum of haversine distances between consecutive points, in meters
    """
    total_distance = 0.0

    for i in range(len(positions) - 1):
        total_distance += position_distance(positions[i], positions[i + 1])

    return total_distance
