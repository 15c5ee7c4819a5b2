"""
Pydantic schemas for the venue routing API.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class LocationRequest(BaseModel):
    """Request model for a single GPS location."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")

    def to_tuple(self):
        return (self.latitude, self.longitude)


class RouteRequest(BaseModel):
    """Request model for a node-to-node route."""
    from_id: str = Field(..., min_length=1, description="Origin node id")
    to_id: str = Field(..., min_length=1, description="Destination node id")
    avoid_stairs: bool = Field(default=False, description="Exclude walkways with stairs")
    prefer_shadow: bool = Field(default=False, description="Prefer shaded walkways")
    use_dynamic_weights: bool = Field(default=True, description="Apply live congestion factors")


class GpsRouteRequest(BaseModel):
    """Request model for a route starting at a GPS position."""
    position: LocationRequest = Field(..., description="Current position of the user")
    to_id: str = Field(..., min_length=1, description="Destination node id")
    avoid_stairs: bool = Field(default=False, description="Exclude walkways with stairs")
    prefer_shadow: bool = Field(default=False, description="Prefer shaded walkways")


class LastMileRequest(BaseModel):
    """Request model for a parking-to-destination route."""
    parking_id: str = Field(..., min_length=1, description="Parking node id")
    destination_id: str = Field(..., min_length=1, description="Destination node id")
    avoid_stairs: bool = Field(default=False, description="Exclude walkways with stairs")


class LastMileGpsRequest(BaseModel):
    """Request model for a last-mile route starting at the car's position."""
    car_position: LocationRequest = Field(..., description="Position of the parked car")
    destination_id: str = Field(..., min_length=1, description="Destination node id")
    avoid_stairs: bool = Field(default=False, description="Exclude walkways with stairs")


class StepResponse(BaseModel):
    """One turn-by-turn instruction."""
    instruction: str
    distance_m: float
    from_id: str
    to_id: str


class RouteStats(BaseModel):
    """Statistics about a calculated route."""
    total_distance_m: float = Field(..., description="Geometric route length in meters")
    estimated_time_s: float = Field(..., description="Weighted cost divided by walking speed")
    weighted_cost: float = Field(..., description="Congestion and shade weighted search cost")
    node_count: int = Field(..., description="Number of nodes on the route")
    used_accessible_route: bool = Field(..., description="Step-free routing was requested")
    used_shadow_route: bool = Field(..., description="Shade preference was requested")


class RouteResponse(BaseModel):
    """Response model for route calculation."""
    success: bool = Field(..., description="Whether a route was found")
    message: str = Field(..., description="Status message")
    error: Optional[str] = Field(default=None, description="'node_not_found' or 'no_path_exists'")
    node_ids: Optional[List[str]] = Field(default=None, description="Route node ids in order")
    steps: Optional[List[StepResponse]] = Field(default=None, description="Turn-by-turn steps")
    route_geojson: Optional[Dict[str, Any]] = Field(default=None, description="Route as GeoJSON FeatureCollection")
    route_stats: Optional[RouteStats] = Field(default=None, description="Route statistics")


class NodeResponse(BaseModel):
    """A walkway graph node."""
    id: str
    name: str
    latitude: float
    longitude: float
    has_stairs: bool
    has_shadow: bool
    is_indoor: bool


class CongestionUpdateRequest(BaseModel):
    """A single congestion observation; out-of-range factors are clamped."""
    node_id: str = Field(..., min_length=1, description="Node the crowding was observed at")
    factor: float = Field(..., description="Congestion multiplier (1.0 = nominal)")

    @field_validator('factor')
    @classmethod
    def validate_finite(cls, v):
        """Clamping handles any finite value; NaN and infinities are rejected."""
        if v != v or v in (float('inf'), float('-inf')):
            raise ValueError('factor must be a finite number')
        return v


class CongestionUpdateResponse(BaseModel):
    node_id: str
    applied_factor: float


class ZoneOccupancyRequest(BaseModel):
    """Raw rows of the backend zone occupancy table."""
    zones: List[Dict[str, Any]] = Field(..., description="Zone occupancy rows")


class ZoneOccupancyResponse(BaseModel):
    applied: Dict[str, float] = Field(..., description="Congestion factor applied per zone")


class CongestionSnapshotResponse(BaseModel):
    factors: Dict[str, float] = Field(..., description="Current congestion factor per node")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    node_count: int = Field(..., description="Nodes in the walkway graph")
    edge_count: int = Field(..., description="Directed edges in the walkway graph")
    congested_nodes: int = Field(..., description="Nodes with a recorded congestion factor")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Any] = Field(None, description="Additional error details")
