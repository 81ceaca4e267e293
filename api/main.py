"""
FastAPI backend for SailFrisco, a San Francisco Bay sailing conditions app.

Provides REST API endpoints for:
- Current marine weather at a coordinate (Open-Meteo, wind in knots)
- Upcoming high/low tides for a NOAA station
- Beaufort classification and gauge positions
- Bay harbor directory and per-harbor conditions
- Route distance and ETA from waypoints

Version: 1.0.0
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import Settings, get_settings
from api.middleware import get_request_id, setup_middleware
from api.routers import beaufort, harbors, marine, routes, system, tides
from api.state import STATE_ATTR, ApplicationState
from src.errors import DomainError, InvalidQueryError, UpstreamError

logger = logging.getLogger(__name__)

# What each upstream source provides, for client-facing error messages
UPSTREAM_LABELS = {
    "open-meteo": "marine",
    "noaa-coops": "tides",
}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(message)s',  # JSON request logs are self-contained
    )


def _error_body(error: str, code: str, details=None) -> dict:
    body = {"error": error, "code": code, "request_id": get_request_id()}
    if details:
        body["details"] = jsonable_encoder(details)
    return body


def register_exception_handlers(application: FastAPI) -> None:
    """Map the core error taxonomy onto HTTP answers."""

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content=_error_body("Invalid query", InvalidQueryError.code, {"errors": exc.errors()}),
        )

    @application.exception_handler(InvalidQueryError)
    async def invalid_query_handler(request: Request, exc: InvalidQueryError):
        logger.info(f"Invalid query on {request.url.path}: {exc.details}")
        return JSONResponse(
            status_code=400,
            content=_error_body("Invalid query", exc.code, exc.details),
        )

    @application.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info(f"Domain error on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=400,
            content=_error_body(exc.message, exc.code, exc.details),
        )

    @application.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(
            f"Upstream failure on {request.method} {request.url.path} "
            f"(source={exc.source}, status={exc.status_code}): {exc.message}"
        )
        label = UPSTREAM_LABELS.get(exc.source, "upstream")
        return JSONResponse(
            status_code=500,
            content=_error_body(f"Failed to fetch {label} data", exc.code),
        )


# =============================================================================
# Application Factory
# =============================================================================

def create_app(
    settings: Optional[Settings] = None,
    state: Optional[ApplicationState] = None,
) -> FastAPI:
    """
    Application factory for the SailFrisco API.

    Args:
        settings: Settings to use (default: environment via get_settings())
        state: Pre-built application state, e.g. with fake upstream clients

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or (state.settings if state else get_settings())
    configure_logging(settings)
    app_state = state or ApplicationState(settings)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        yield
        app_state.close()

    application = FastAPI(
        title="SailFrisco API",
        description="Marine weather, tides, Beaufort classification and route ETA for SF Bay harbors.",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    setattr(application.state, STATE_ATTR, app_state)

    setup_middleware(application, debug=settings.is_development)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(system.router)
    application.include_router(marine.router)
    application.include_router(tides.router)
    application.include_router(beaufort.router)
    application.include_router(harbors.router)
    application.include_router(routes.router)

    return application


# Create the application
app = create_app()


# ============================================================================
# Run Server
# ============================================================================

if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=_settings.api_host,
        port=_settings.api_port,
        log_level=_settings.log_level.lower(),
    )
