"""
FastAPI application factory and API package.

Run with:
    uvicorn quote_engine.api:app --reload --port 8000

Or via main.py:
    python -m quote_engine --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quote_engine.config import get_settings
from quote_engine.api.routes import baseline_router, health_router, quote_router, scenario_router
from quote_engine.pricing.guards import ConfigurationError, UnknownScenarioError

logger = logging.getLogger(__name__)


async def _configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.warning(f"Rejected configuration on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _unknown_scenario_handler(request: Request, exc: UnknownScenarioError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.args[0] if exc.args else "Unknown scenario"})


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="Digitisation Quote Engine API",
        description="Pricing engine for document digitisation and extraction quotes",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(ConfigurationError, _configuration_error_handler)
    application.add_exception_handler(UnknownScenarioError, _unknown_scenario_handler)

    # Register route groups
    application.include_router(health_router, tags=["Health"])
    application.include_router(scenario_router, prefix="/api/scenarios", tags=["Scenarios"])
    application.include_router(quote_router, prefix="/api/quote", tags=["Quote"])
    application.include_router(baseline_router, prefix="/api/baseline", tags=["Baseline"])

    logger.debug(f"{settings.app_name} API created")
    return application


# Module-level instance for `uvicorn quote_engine.api:app`
app = create_app()
