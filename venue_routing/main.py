#!/usr/bin/env python3
"""
Venue Pedestrian Routing - Command Line Interface

Computes a route on the circuit walkway network and prints the steps.
"""

import argparse
import logging
import sys

from .algorithms import LastMileRouter, PedestrianRouter
from .data import RouteOutcome


def _parse_position(value: str):
    try:
        lat, lon = (float(part) for part in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'lat,lon', got {value!r}")
    return lat, lon


def _parse_congestion(value: str):
    try:
        node_id, factor = value.split('=')
        return node_id, float(factor)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'node_id=factor', got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Circuit pedestrian route planner")
    origin = parser.add_mutually_exclusive_group(required=True)
    origin.add_argument("--from", dest="from_id", help="Origin node id")
    origin.add_argument("--gps", type=_parse_position, help="Origin GPS position as 'lat,lon'")
    parser.add_argument("--to", dest="to_id", required=True, help="Destination node id")
    parser.add_argument("--avoid-stairs", action="store_true", help="Step-free route")
    parser.add_argument("--prefer-shadow", action="store_true", help="Prefer shaded walkways")
    parser.add_argument("--last-mile", action="store_true",
                        help="Treat the origin as a parked car (forces shade preference)")
    parser.add_argument("--congestion", type=_parse_congestion, action="append", default=[],
                        metavar="NODE=FACTOR", help="Congestion factor for a node (repeatable)")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"], help="Log level")
    return parser


def _route(args, router: PedestrianRouter) -> RouteOutcome:
    if args.last_mile:
        last_mile = LastMileRouter(router)
        if args.gps:
            return last_mile.plan_last_mile_route_from_gps(args.gps, args.to_id, args.avoid_stairs)
        return last_mile.plan_last_mile_route(args.from_id, args.to_id, args.avoid_stairs)

    if args.gps:
        return router.plan_route_from_gps(args.gps, args.to_id, args.avoid_stairs, args.prefer_shadow)
    return router.plan_route(args.from_id, args.to_id, args.avoid_stairs, args.prefer_shadow)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    router = PedestrianRouter()
    for node_id, factor in args.congestion:
        router.update_congestion(node_id, factor)

    outcome = _route(args, router)
    if not outcome.ok:
        print(f"No route: {outcome.error.value} ({outcome.detail})")
        return 1

    route = outcome.result
    summary = route.get_summary()
    print(f"Route {route.nodes[0].name} -> {route.nodes[-1].name}")
    print(f"   Distance: {summary['total_distance_m']:.0f}m")
    print(f"   ETA: {summary['estimated_time_min']:.1f} min")
    print(f"   Nodes: {summary['node_count']}")
    for index, step in enumerate(route.steps, 1):
        print(f"   {index}. {step.instruction}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
