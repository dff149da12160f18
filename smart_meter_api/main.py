"""
This module creates and configures the main FastAPI application for the
Smart Meter Price Plan API. Smart meters push their electricity readings to
the API, which prices them under every available tariff and recommends the
cheapest plans.

Tags:
    - fastapi
    - smart-meters
    - price-plans
    - rest-api
    - mvc-architecture

Features:
    - Validated storage of smart meter readings
    - Time-of-use cost comparison across price plans
    - Ranked price plan recommendations
    - Optional seeding of demo readings at startup
    - Comprehensive Swagger documentation
    - CORS-enabled for web applications

API Categories:
    - Information: System health and API metadata
    - Meter Readings: Storing and retrieving readings
    - Price Plans: Cost comparison and recommendations
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import app_config, setup_logging
from .controllers import smart_meter_controller
from .services import MeterReadingService
from .utils import seed_meter_readings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed demo readings for every configured account before serving."""
    if app_config.seed.enabled:
        seed_meter_readings(
            MeterReadingService(),
            app_config.pricing.accounts.keys(),
            app_config.seed
        )
    logger.info(
        f"Serving {len(app_config.pricing.price_plans)} price plans "
        f"(time zone {app_config.pricing.timezone})")
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This function initializes the FastAPI application with:
    - Logging configured from app_config
    - API metadata and documentation
    - CORS middleware for cross-origin requests
    - Modular controller routing with proper tags
    - OpenAPI/Swagger documentation at /docs

    Returns:
        FastAPI: Configured FastAPI application instance ready for deployment.
    """
    setup_logging(app_config.log_level)

    # Initialize FastAPI app with comprehensive configuration
    app = FastAPI(
        title=app_config.api.title,
        description=app_config.api.description,
        version=app_config.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "System Information",
                "description": "API health, version info, and system status endpoints"
            },
            {
                "name": "Meter Readings",
                "description": "Store and retrieve electricity readings per smart meter"
            },
            {
                "name": "Price Plans",
                "description": "Compare price plan costs and get cheapest-first recommendations"
            }
        ]
    )

    # Add CORS middleware with comprehensive configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.allow_origins,
        allow_credentials=app_config.api.allow_credentials,
        allow_methods=app_config.api.allow_methods,
        allow_headers=app_config.api.allow_headers,
    )

    app.include_router(smart_meter_controller.router)

    return app


# Create the app instance
app = create_app()


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run(
        "smart_meter_api.main:app",
        host=app_config.api.host,
        port=app_config.api.port,
        reload=app_config.api.reload
    )


if __name__ == "__main__":
    run()
