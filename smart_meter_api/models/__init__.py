"""
Models package for API data structures.
Imports all models for easy access.
"""

# Plan models
from .plan_models import PeakTimeMultiplier, PricePlan

# Reading models
from .reading_models import ElectricityReading, MeterReadings

# Response models
from .response_models import (
    Cost,
    StoreReadingsResponse,
    PricePlanComparison,
    PlanRecommendation,
    APIInfo,
    HealthResponse
)

__all__ = [
    # Plan models
    "PeakTimeMultiplier",
    "PricePlan",

    # Reading models
    "ElectricityReading",
    "MeterReadings",

    # Response models
    "Cost",
    "StoreReadingsResponse",
    "PricePlanComparison",
    "PlanRecommendation",
    "APIInfo",
    "HealthResponse"
]
