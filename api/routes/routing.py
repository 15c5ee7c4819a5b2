"""
FastAPI routes for pedestrian routing endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from api.schemas.routing import (
    GpsRouteRequest,
    HealthResponse,
    LastMileGpsRequest,
    LastMileRequest,
    NodeResponse,
    RouteRequest,
    RouteResponse
)
from api.services.routing_service import routing_service

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/routing", tags=["routing"])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health_check():
    """
    Check the health status of the routing service.

    Returns:
        HealthResponse: Service health information
    """
    try:
        return routing_service.get_health_status()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Health check failed"
        )


@router.get("/nodes", response_model=List[NodeResponse], summary="List Walkway Nodes")
async def list_nodes(indoor_only: bool = False):
    """
    List the nodes of the walkway graph.

    Args:
        indoor_only: Only return buildings, tunnels and covered areas
    """
    return routing_service.list_nodes(indoor_only)


@router.post("/calculate", response_model=RouteResponse, summary="Calculate Route")
async def calculate_route(request: RouteRequest):
    """
    Calculate a pedestrian route between two walkway nodes.

    Business failures (unknown node, no path under the requested options)
    return 200 with ``success: false`` and an ``error`` kind.

    Example:
        ```json
        {
            "from_id": "gate_main",
            "to_id": "trib_h",
            "avoid_stairs": true,
            "prefer_shadow": false
        }
        ```
    """
    logger.info(f"Route calculation request: {request.from_id} -> {request.to_id}")
    return routing_service.calculate_route(request)


@router.post("/from-gps", response_model=RouteResponse, summary="Calculate Route From GPS")
async def calculate_route_from_gps(request: GpsRouteRequest):
    """
    Calculate a route from the user's GPS position, snapped to the nearest node.
    """
    return routing_service.calculate_route_from_gps(request)


@router.post("/last-mile", response_model=RouteResponse, summary="Calculate Last-Mile Route")
async def calculate_last_mile(request: LastMileRequest):
    """
    Calculate a parking-to-destination route, always preferring shade.
    """
    return routing_service.calculate_last_mile(request)


@router.post("/last-mile/from-gps", response_model=RouteResponse,
             summary="Calculate Last-Mile Route From Car Position")
async def calculate_last_mile_from_gps(request: LastMileGpsRequest):
    """
    Calculate a last-mile route starting at the parking closest to the car.
    """
    return routing_service.calculate_last_mile_from_gps(request)
