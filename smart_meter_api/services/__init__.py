"""
Services package for business logic layer.
Imports all services for easy access.
"""

# Base service
from .base_service import BaseService

# Individual services
from .meter_reading_validation_service import MeterReadingValidationService
from .meter_reading_service import MeterReadingService
from .consumption_cost_service import ConsumptionCostService
from .account_service import AccountService
from .price_plan_service import PricePlanService

__all__ = [
    # Base service
    "BaseService",

    # Individual services
    "MeterReadingValidationService",
    "MeterReadingService",
    "ConsumptionCostService",
    "AccountService",
    "PricePlanService"
]
