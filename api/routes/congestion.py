"""
FastAPI routes for the congestion feed.
"""

import logging

from fastapi import APIRouter, status

from api.schemas.routing import (
    CongestionSnapshotResponse,
    CongestionUpdateRequest,
    CongestionUpdateResponse,
    ZoneOccupancyRequest,
    ZoneOccupancyResponse
)
from api.services.routing_service import routing_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/congestion", tags=["congestion"])


@router.get("/", response_model=CongestionSnapshotResponse, summary="Current Congestion")
async def get_congestion():
    """Congestion factors currently recorded per node."""
    return routing_service.get_congestion()


@router.post("/update", response_model=CongestionUpdateResponse, summary="Update Node Congestion")
async def update_congestion(request: CongestionUpdateRequest):
    """
    Record a congestion factor for a node.

    Factors outside [0.5, 3.0] are clamped, never rejected; the response
    carries the factor actually stored.
    """
    return routing_service.update_congestion(request)


@router.post("/zones", response_model=ZoneOccupancyResponse, summary="Apply Zone Occupancy")
async def apply_zone_occupancy(request: ZoneOccupancyRequest):
    """
    Convert backend zone occupancy rows into node congestion factors.
    """
    logger.info(f"Zone occupancy batch with {len(request.zones)} rows")
    return routing_service.apply_zone_occupancy(request)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT, summary="Clear Congestion")
async def clear_congestion():
    """Drop every recorded congestion factor."""
    routing_service.clear_congestion()
