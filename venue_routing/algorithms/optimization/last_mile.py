"""
Last-mile guidance: from the parked car to the final destination.
"""

import logging
from typing import Optional

from ...data.models import LatLon, PathResult, RouteOutcome
from .pedestrian_router import PedestrianRouter

logger = logging.getLogger(__name__)


class LastMileRouter:
    """
    Parking-to-destination routing that always prefers shaded and covered
    walkways, with congestion applied.
    """

    def __init__(self, router: PedestrianRouter):
        self.router = router

    def plan_last_mile_route(self, parking_id: str, destination_id: str,
                             avoid_stairs: bool = False) -> RouteOutcome:
        logger.debug(f"Last mile: parking={parking_id} -> destination={destination_id}")
        return self.router.plan_route(
            parking_id,
            destination_id,
            avoid_stairs=avoid_stairs,
            prefer_shadow=True,
            use_dynamic_weights=True
        )

    def find_last_mile_route(self, parking_id: str, destination_id: str,
                             avoid_stairs: bool = False) -> Optional[PathResult]:
        return self.plan_last_mile_route(parking_id, destination_id, avoid_stairs).result

    def plan_last_mile_route_from_gps(self, car_position: LatLon, destination_id: str,
                                      avoid_stairs: bool = False) -> RouteOutcome:
        """
        Last-mile route starting from the car's GPS position.

        Starts at the parking node closest to the car. Graphs without any
        parking node fall back to a plain GPS route, still shade-preferring.
        """
        prefix = self.router.config.parking_prefix
        parking = self.router.locator.nearest_with_prefix(car_position, prefix)

        if parking is None:
            logger.info(f"No '{prefix}' node in graph, falling back to GPS routing")
            return self.router.plan_route_from_gps(
                car_position, destination_id, avoid_stairs=avoid_stairs, prefer_shadow=True
            )

        return self.plan_last_mile_route(parking.id, destination_id, avoid_stairs)

    def find_last_mile_route_from_gps(self, car_position: LatLon, destination_id: str,
                                      avoid_stairs: bool = False) -> Optional[PathResult]:
        return self.plan_last_mile_route_from_gps(car_position, destination_id, avoid_stairs).result
