"""
Venue Pedestrian Routing

Offline pedestrian routing for the Circuit de Barcelona-Catalunya walkway
network, with live crowd congestion, step-free routing and shade preference.

## Quick Start

```python
from venue_routing import PedestrianRouter, LastMileRouter

router = PedestrianRouter()

# Crowd feed reports the fan zone as busy
router.update_congestion('fan_zone', 1.8)

route = router.find_route('gate_main', 'trib_h', avoid_stairs=True)
for step in route.steps:
    print(step.instruction)

# From the parked car to the VIP box, preferring covered walkways
last_mile = LastMileRouter(router)
route = last_mile.find_last_mile_route_from_gps((41.5716, 2.2554), 'indoor_hospitality')
```

## Main Components

- **PedestrianRouter**: Route requests between nodes or from GPS positions
- **LastMileRouter**: Parking-to-destination routing, always shade-preferring
- **CongestionRegistry**: Thread-safe node congestion factors
- **ZoneCongestionFeed**: Converts backend zone occupancy into congestion
- **GraphStore**: Immutable walkway graph
- **RoutingConfig**: Configuration management

## Architecture

- `algorithms/`: Cost policy, A* search, route composition, congestion
- `mapping/`: Walkway graph storage and GPS snapping
- `data/`: Data classes, circuit dataset, distance utilities
- `config/`: Configuration management
"""

from .algorithms import (
    PedestrianRouter,
    LastMileRouter,
    AStarSearch,
    CostPolicy,
    RouteOptions,
    RouteComposer,
    CongestionSource,
    CongestionRegistry,
    ZoneCongestionFeed,
    ZoneOccupancy
)
from .config import RoutingConfig
from .mapping import GraphStore, GraphDataError, NearestNodeLocator
from .data import Node, Edge, Step, PathResult, RouteErrorKind, RouteOutcome

# Version information
__version__ = "1.0.0"

# Public API
__all__ = [
    # Main interfaces
    'PedestrianRouter',
    'LastMileRouter',
    'RoutingConfig',

    # Core algorithms
    'AStarSearch',
    'CostPolicy',
    'RouteOptions',
    'RouteComposer',
    'NearestNodeLocator',

    # Congestion
    'CongestionSource',
    'CongestionRegistry',
    'ZoneCongestionFeed',
    'ZoneOccupancy',

    # Graph and results
    'GraphStore',
    'GraphDataError',
    'Node',
    'Edge',
    'Step',
    'PathResult',
    'RouteErrorKind',
    'RouteOutcome',

    # Metadata
    '__version__'
]
