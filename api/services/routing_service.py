"""
Service layer for the venue routing API.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import geojson

from venue_routing import __version__
from venue_routing.algorithms import LastMileRouter, PedestrianRouter, ZoneCongestionFeed
from venue_routing.config import PRESET_ENV_VAR, RoutingConfig
from venue_routing.data import PathResult, RouteOutcome
from venue_routing.mapping import GraphStore
from api.schemas.routing import (
    CongestionSnapshotResponse,
    CongestionUpdateRequest,
    CongestionUpdateResponse,
    GpsRouteRequest,
    HealthResponse,
    LastMileGpsRequest,
    LastMileRequest,
    NodeResponse,
    RouteRequest,
    RouteResponse,
    RouteStats,
    StepResponse,
    ZoneOccupancyRequest,
    ZoneOccupancyResponse
)

logger = logging.getLogger(__name__)


class VenueRoutingService:
    """
    Service class that provides pedestrian routing functionality for the API.
    """

    def __init__(self, router: PedestrianRouter = None, preset: str = 'default'):
        """Initialize the routing service."""
        self.router = router if router is not None else PedestrianRouter(
            config=RoutingConfig.create_default_config()
        )
        self.preset = preset
        self.last_mile = LastMileRouter(self.router)
        self.zone_feed = ZoneCongestionFeed(self.router.congestion)
        logger.info(f"Routing service initialized with {len(self.router.graph)} walkway nodes")

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            node_count=len(self.router.all_nodes()),
            edge_count=len(self.router.all_edges()),
            congested_nodes=len(self.router.congestion_snapshot())
        )

    def list_nodes(self, indoor_only: bool = False) -> List[NodeResponse]:
        nodes = self.router.indoor_nodes() if indoor_only else self.router.all_nodes()
        return [
            NodeResponse(
                id=node.id,
                name=node.name,
                latitude=node.position[0],
                longitude=node.position[1],
                has_stairs=node.has_stairs,
                has_shadow=node.has_shadow,
                is_indoor=node.is_indoor
            )
            for node in nodes
        ]

    # Routes

    def calculate_route(self, request: RouteRequest) -> RouteResponse:
        logger.info(f"Calculating route {request.from_id} -> {request.to_id}")
        outcome = self.router.plan_route(
            request.from_id,
            request.to_id,
            avoid_stairs=request.avoid_stairs,
            prefer_shadow=request.prefer_shadow,
            use_dynamic_weights=request.use_dynamic_weights
        )
        return self._convert_to_response(outcome)

    def calculate_route_from_gps(self, request: GpsRouteRequest) -> RouteResponse:
        outcome = self.router.plan_route_from_gps(
            request.position.to_tuple(),
            request.to_id,
            avoid_stairs=request.avoid_stairs,
            prefer_shadow=request.prefer_shadow
        )
        return self._convert_to_response(outcome)

    def calculate_last_mile(self, request: LastMileRequest) -> RouteResponse:
        outcome = self.last_mile.plan_last_mile_route(
            request.parking_id, request.destination_id, request.avoid_stairs
        )
        return self._convert_to_response(outcome)

    def calculate_last_mile_from_gps(self, request: LastMileGpsRequest) -> RouteResponse:
        outcome = self.last_mile.plan_last_mile_route_from_gps(
            request.car_position.to_tuple(), request.destination_id, request.avoid_stairs
        )
        return self._convert_to_response(outcome)

    # Congestion feed

    def update_congestion(self, request: CongestionUpdateRequest) -> CongestionUpdateResponse:
        applied = self.router.update_congestion(request.node_id, request.factor)
        return CongestionUpdateResponse(node_id=request.node_id, applied_factor=applied)

    def apply_zone_occupancy(self, request: ZoneOccupancyRequest) -> ZoneOccupancyResponse:
        return ZoneOccupancyResponse(applied=self.zone_feed.apply_rows(request.zones))

    def clear_congestion(self) -> None:
        self.router.clear_congestion()
        logger.info("Congestion cleared via API")

    def get_congestion(self) -> CongestionSnapshotResponse:
        return CongestionSnapshotResponse(factors=self.router.congestion_snapshot())

    # Conversion helpers

    def _convert_to_response(self, outcome: RouteOutcome) -> RouteResponse:
        """
        Convert a route outcome to API response format.

        Args:
            outcome: Outcome returned by the router

        Returns:
            Formatted RouteResponse
        """
        if not outcome.ok:
            return RouteResponse(
                success=False,
                message=outcome.detail or "No valid route found",
                error=outcome.error.value if outcome.error else None
            )

        route = outcome.result
        return RouteResponse(
            success=True,
            message="Route calculated successfully",
            node_ids=route.node_ids,
            steps=[
                StepResponse(
                    instruction=step.instruction,
                    distance_m=round(step.distance_meters, 1),
                    from_id=step.from_node.id,
                    to_id=step.to_node.id
                )
                for step in route.steps
            ],
            route_geojson=self._route_to_geojson(route),
            route_stats=self._calculate_route_stats(route)
        )

    def _route_to_geojson(self, route: PathResult) -> Dict[str, Any]:
        """
        Convert a route to GeoJSON format.

        Args:
            route: PathResult to convert

        Returns:
            GeoJSON FeatureCollection
        """
        # GeoJSON coordinates are (lon, lat)
        geojson_coords = [[lon, lat] for lat, lon in route.coordinates]

        line_feature = geojson.Feature(
            geometry=geojson.LineString(geojson_coords),
            properties={
                "total_distance_m": route.total_distance_meters,
                "estimated_time_s": route.estimated_time_seconds,
                "node_count": len(route.nodes),
                "calculation_time_ms": (route.calculation_time * 1000
                                        if route.calculation_time is not None else None)
            }
        )

        start_feature = geojson.Feature(
            geometry=geojson.Point(geojson_coords[0]),
            properties={"type": "start", "id": route.nodes[0].id, "name": route.nodes[0].name}
        )

        end_feature = geojson.Feature(
            geometry=geojson.Point(geojson_coords[-1]),
            properties={"type": "end", "id": route.nodes[-1].id, "name": route.nodes[-1].name}
        )

        return geojson.FeatureCollection([line_feature, start_feature, end_feature])

    def _calculate_route_stats(self, route: PathResult) -> RouteStats:
        return RouteStats(
            total_distance_m=round(route.total_distance_meters, 1),
            estimated_time_s=round(route.estimated_time_seconds, 0),
            weighted_cost=round(route.weighted_cost, 1),
            node_count=len(route.nodes),
            used_accessible_route=route.used_accessible_route,
            used_shadow_route=route.used_shadow_route
        )


def create_routing_service(preset: Optional[str] = None) -> VenueRoutingService:
    """
    Build the service for a named routing preset.

    Args:
        preset: Preset name; read from the environment when omitted
    """
    preset = preset or os.environ.get(PRESET_ENV_VAR, 'default')
    graph = GraphStore.from_circuit()
    config = RoutingConfig.create_preset_config(preset, graph)
    logger.info(f"Routing preset '{preset}' (heuristic scale {config.heuristic_scale:.3f})")
    return VenueRoutingService(PedestrianRouter(graph=graph, config=config), preset=preset)


# Global service instance
routing_service = create_routing_service()
