"""
Controller for API information and health endpoints.
"""

from fastapi import Depends

from .base_controller import BaseController
from .meter_reading_controller import get_meter_reading_service
from .price_plan_comparator_controller import get_price_plan_service
from ..config import app_config
from ..services import MeterReadingService, PricePlanService
from ..models import APIInfo, HealthResponse


class InfoController(BaseController):
    """Controller for API information and health endpoints."""

    def _setup_routes(self):
        """Setup routes for API info and health."""

        @self.router.get("/", response_model=APIInfo, tags=["System Information"])
        async def get_api_info():
            """API root endpoint with basic information."""
            return APIInfo(
                message=app_config.api.title,
                version=app_config.api.version,
                endpoints={
                    "store_readings": "POST /readings/store - Store readings for a smart meter",
                    "read_readings": "/readings/read/{smart_meter_id} - Get stored readings",
                    "compare_all": "/price-plans/compare-all/{smart_meter_id} - Cost under every plan",
                    "recommend": "/price-plans/recommend/{smart_meter_id}?limit=N - Cheapest plans first",
                    "health": "/health - Health check"
                }
            )

        @self.router.get("/health", response_model=HealthResponse, tags=["System Information"])
        async def health_check(
            reading_service: MeterReadingService = Depends(get_meter_reading_service),
            price_plan_service: PricePlanService = Depends(get_price_plan_service)
        ):
            """Health check endpoint."""
            return HealthResponse(
                status="healthy",
                service="smart-meter-price-plan-api",
                meters_tracked=reading_service.count_meters(),
                price_plans=price_plan_service.count_price_plans()
            )
