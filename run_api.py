#!/usr/bin/env python3
"""
Start the venue routing API under uvicorn.

The routing preset is handed to the app through ``VENUE_ROUTING_PRESET`` so
that it also reaches reloaded worker processes.
"""

import argparse
import logging
import os

import uvicorn

from venue_routing.config import PRESET_ENV_VAR, PRESETS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Venue pedestrian routing API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes")
    parser.add_argument("--preset", default="default", choices=sorted(PRESETS),
                        help="Routing configuration preset (admissible = least-cost A*)")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    os.environ[PRESET_ENV_VAR] = args.preset

    logger.info(f"Serving venue routing on http://{args.host}:{args.port} (preset: {args.preset})")
    logger.info(f"Interactive docs at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=True
    )


if __name__ == "__main__":
    main()
