"""
Walkway network of the Circuit de Barcelona-Catalunya.

The topology is compiled in: pedestrian routing runs fully offline and the
network only changes between seasons.
"""

from typing import List, Tuple

from .models import Edge, Node

CIRCUIT_NODES: List[Node] = [
    # Main accesses
    Node('gate_main', 'Main Entrance', (41.5693, 2.2577)),
    Node('gate_1', 'Gate 1', (41.5700, 2.2590)),
    Node('gate_3', 'Gate 3', (41.5688, 2.2610)),
    Node('gate_7', 'Gate 7', (41.5675, 2.2555)),

    # Grandstands
    Node('trib_main', 'Main Grandstand', (41.5695, 2.2585), has_shadow=True),
    Node('trib_a', 'Grandstand A', (41.5698, 2.2600)),
    Node('trib_g', 'Grandstand G', (41.5685, 2.2570)),
    Node('trib_h', 'Grandstand H', (41.5680, 2.2562), has_stairs=True),

    # Inner areas
    Node('fan_zone', 'Fan Zone', (41.5690, 2.2595), has_shadow=True),
    Node('paddock', 'Paddock Access', (41.5702, 2.2575)),
    Node('pit_lane', 'Pit Lane Walkway', (41.5700, 2.2565)),
    Node('tower', 'Control Tower', (41.5705, 2.2570), has_shadow=True, is_indoor=True),

    # Services
    Node('food_main', 'Main Food Court', (41.5692, 2.2590), has_shadow=True),
    Node('food_north', 'North Food Court', (41.5698, 2.2578)),
    Node('wc_main', 'Main Restrooms', (41.5691, 2.2583)),
    Node('wc_north', 'North Restrooms', (41.5701, 2.2582)),
    Node('merch', 'Official Store', (41.5694, 2.2572), has_shadow=True, is_indoor=True),
    Node('medical', 'Medical Point', (41.5689, 2.2575)),

    # Curves (spectator areas)
    Node('curve_1', 'Turn 1 (Elf)', (41.5710, 2.2600)),
    Node('curve_5', 'Turn 5 (Seat)', (41.5665, 2.2620)),
    Node('curve_9', 'Turn 9 (Campsa)', (41.5678, 2.2540)),

    # Inner crossings
    Node('cross_1', 'Central Crossing', (41.5693, 2.2580)),
    Node('cross_2', 'North Crossing', (41.5700, 2.2578)),
    Node('cross_3', 'South Crossing', (41.5682, 2.2575)),
    Node('cross_4', 'East Crossing', (41.5690, 2.2605)),

    # Parkings
    Node('parking_n', 'North Parking', (41.5715, 2.2555)),
    Node('parking_s', 'South Parking', (41.5660, 2.2565)),

    # Indoor last mile: buildings, tunnels and covered areas
    Node('indoor_hospitality', 'Hospitality Lounge', (41.5704, 2.2572), has_shadow=True, is_indoor=True),
    Node('indoor_media', 'Media Centre', (41.5706, 2.2568), has_shadow=True, is_indoor=True),
    Node('indoor_paddock_hall', 'Paddock Hall', (41.5703, 2.2573), has_shadow=True, is_indoor=True),
    Node('tunnel_south', 'South Tunnel (under track)', (41.5685, 2.2580), has_shadow=True, is_indoor=True),
    Node('tunnel_north', 'North Tunnel (under track)', (41.5705, 2.2580), has_shadow=True, is_indoor=True),
    Node('indoor_vip_box', 'VIP Box', (41.5696, 2.2586), has_stairs=True, has_shadow=True, is_indoor=True),
    Node('indoor_press_room', 'Press Room', (41.5707, 2.2566), has_shadow=True, is_indoor=True),
    Node('indoor_museum', 'Circuit Museum', (41.5692, 2.2568), has_shadow=True, is_indoor=True),
    Node('parking_entrance_n', 'North Parking Entrance', (41.5712, 2.2558)),
    Node('parking_entrance_s', 'South Parking Entrance', (41.5663, 2.2567)),
]

# (a, b, meters, has_stairs, has_shadow); every walkway is walkable both ways
_WALKWAYS: List[Tuple[str, str, float, bool, bool]] = [
    # Main entrance -> central crossing
    ('gate_main', 'cross_1', 30.0, False, True),

    # Central crossing -> services
    ('cross_1', 'food_main', 25.0, False, True),
    ('cross_1', 'wc_main', 20.0, False, False),
    ('cross_1', 'merch', 35.0, False, True),
    ('cross_1', 'medical', 40.0, False, False),

    # Central crossing -> grandstands
    ('cross_1', 'trib_main', 45.0, False, True),
    ('cross_1', 'trib_g', 60.0, False, False),
    ('cross_1', 'fan_zone', 50.0, False, True),

    # North crossing
    ('cross_1', 'cross_2', 40.0, False, False),
    ('cross_2', 'paddock', 35.0, False, False),
    ('cross_2', 'pit_lane', 30.0, False, False),
    ('cross_2', 'tower', 40.0, False, True),
    ('cross_2', 'food_north', 25.0, False, False),
    ('cross_2', 'wc_north', 20.0, False, False),
    ('cross_2', 'gate_1', 55.0, False, False),
    ('cross_2', 'curve_1', 80.0, False, False),

    # South crossing
    ('cross_1', 'cross_3', 50.0, False, False),
    ('cross_3', 'trib_h', 45.0, True, False),
    ('cross_3', 'gate_7', 60.0, False, False),
    ('cross_3', 'curve_9', 90.0, False, False),
    ('cross_3', 'parking_s', 120.0, False, False),

    # East crossing
    ('cross_1', 'cross_4', 55.0, False, False),
    ('cross_4', 'trib_a', 40.0, False, False),
    ('cross_4', 'gate_3', 50.0, False, False),
    ('cross_4', 'curve_5', 100.0, False, False),

    # Main grandstand -> fan zone (direct)
    ('trib_main', 'fan_zone', 35.0, False, True),

    # North parking
    ('cross_2', 'parking_n', 100.0, False, False),

    # Step-free detour to grandstand H
    ('cross_3', 'trib_g', 55.0, False, False),
    ('trib_g', 'trib_h', 40.0, False, False),

    # South tunnel: grandstands to the inner area without crossing the track
    ('cross_3', 'tunnel_south', 30.0, False, True),
    ('tunnel_south', 'fan_zone', 40.0, False, True),

    # North tunnel: paddock <-> spectator area
    ('cross_2', 'tunnel_north', 25.0, False, True),
    ('tunnel_north', 'paddock', 20.0, False, True),

    # Hospitality / paddock hall / media
    ('paddock', 'indoor_paddock_hall', 15.0, False, True),
    ('indoor_paddock_hall', 'indoor_hospitality', 20.0, False, True),
    ('indoor_paddock_hall', 'indoor_media', 25.0, False, True),
    ('indoor_media', 'indoor_press_room', 15.0, False, True),
    ('tower', 'indoor_press_room', 20.0, False, True),

    # VIP box, reached by stairs from the main grandstand
    ('trib_main', 'indoor_vip_box', 25.0, True, True),

    # Circuit museum
    ('merch', 'indoor_museum', 30.0, False, True),
    ('cross_1', 'indoor_museum', 45.0, False, False),

    # Parking entrances
    ('parking_n', 'parking_entrance_n', 25.0, False, False),
    ('parking_entrance_n', 'cross_2', 80.0, False, False),
    ('parking_s', 'parking_entrance_s', 25.0, False, False),
    ('parking_entrance_s', 'cross_3', 95.0, False, False),
]


def bidirectional(a: str, b: str, distance_meters: float,
                  has_stairs: bool = False, has_shadow: bool = False) -> List[Edge]:
    """Build the two directed edges of a walkway."""
    return [
        Edge(a, b, distance_meters, has_stairs=has_stairs, has_shadow=has_shadow),
        Edge(b, a, distance_meters, has_stairs=has_stairs, has_shadow=has_shadow),
    ]


CIRCUIT_EDGES: List[Edge] = [
    edge
    for a, b, meters, stairs, shadow in _WALKWAYS
    for edge in bidirectional(a, b, meters, has_stairs=stairs, has_shadow=shadow)
]
