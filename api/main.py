"""
Venue Routing API - FastAPI Main Application

A RESTful API for pedestrian routing across the Circuit de Barcelona-Catalunya.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes.congestion import router as congestion_router
from api.routes.routing import router as routing_router
from api.services.routing_service import routing_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - startup and shutdown events.
    """
    logger.info("Starting Venue Routing API...")

    health = routing_service.get_health_status()
    logger.info(f"Routing service ready with {health.node_count} nodes and {health.edge_count} edges "
                f"(preset: {routing_service.preset})")

    yield

    logger.info("Shutting down Venue Routing API...")


# Create FastAPI application
app = FastAPI(
    title="Venue Routing API",
    description="""
    **Pedestrian routing inside the Circuit de Barcelona-Catalunya**

    ## Features

    - **Congestion-Aware Routing**: Live crowd levels steer routes around busy areas
    - **Step-Free Routes**: Walkways with stairs are excluded on request
    - **Shade Preference**: Unshaded walkways are penalised on request
    - **Last Mile**: From the parked car to the seat, preferring covered walkways
    - **GeoJSON Output**: Standard geographic data format

    ## Quick Start

    1. Check service health: `GET /api/routing/health`
    2. List destinations: `GET /api/routing/nodes`
    3. Calculate a route: `POST /api/routing/calculate`
    4. Push crowd levels: `POST /api/congestion/zones`
    """,
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware for web applications
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def jsonable_errors(exc: RequestValidationError):
    # ctx may carry the raised exception object
    return [
        {key: value for key, value in error.items() if key != 'ctx'}
        for error in exc.errors()
    ]


# Custom exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request validation errors with detailed information.
    """
    logger.warning(f"Validation error for {request.url}: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "validation_error",
            "message": "Request validation failed",
            "details": jsonable_errors(exc)
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle unexpected errors gracefully.
    """
    logger.error(f"Unexpected error for {request.url}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "details": None
        }
    )


# Include routers
app.include_router(routing_router)
app.include_router(congestion_router)


@app.get("/", tags=["general"])
async def root():
    """
    Describe the venue network this instance routes on.
    """
    health = routing_service.get_health_status()
    bounds = routing_service.router.graph.get_bounds()
    return {
        "api": "Venue Routing API",
        "version": health.version,
        "status": "operational",
        "documentation": "/docs",
        "health_check": "/api/routing/health",
        "venue": {
            "name": "Circuit de Barcelona-Catalunya",
            "node_count": health.node_count,
            "edge_count": health.edge_count,
            "bounds": bounds
        },
        "routing_preset": routing_service.preset
    }


@app.get("/health", tags=["general"])
async def api_health():
    """
    Simple health check endpoint.
    """
    service_health = routing_service.get_health_status()
    return {
        "api_status": "healthy",
        "service_status": service_health.status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

