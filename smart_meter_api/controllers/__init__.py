"""
Controllers package for API endpoint handlers.
Imports all controllers for easy access.
"""

from fastapi import APIRouter

# Base controller
from .base_controller import BaseController, ERROR_STATUS_CODES

# Individual controllers
from .info_controller import InfoController
from .meter_reading_controller import MeterReadingController, get_meter_reading_service
from .price_plan_comparator_controller import PricePlanComparatorController, get_price_plan_service


class SmartMeterController:
    """
    Aggregate controller that combines all smart meter controllers
    behind a single router.
    """

    def __init__(self):
        """Initialize aggregate controller with all sub-controllers."""
        self.router = APIRouter()

        # Initialize individual controllers
        self.info_controller = InfoController()
        self.meter_reading_controller = MeterReadingController()
        self.price_plan_comparator_controller = PricePlanComparatorController()

        # Include all routers
        self._setup_aggregate_routes()

    def _setup_aggregate_routes(self):
        """Setup aggregate routes by including all controller routers."""
        self.router.include_router(self.info_controller.router)
        self.router.include_router(self.meter_reading_controller.router)
        self.router.include_router(self.price_plan_comparator_controller.router)


# Create aggregate controller
smart_meter_controller = SmartMeterController()

__all__ = [
    # Base controller
    "BaseController",
    "ERROR_STATUS_CODES",

    # Individual controllers
    "InfoController",
    "MeterReadingController",
    "PricePlanComparatorController",

    # Dependencies
    "get_meter_reading_service",
    "get_price_plan_service",

    # Aggregate controller
    "SmartMeterController",
    "smart_meter_controller"
]
