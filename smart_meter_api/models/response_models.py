"""
Response models for API endpoints.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .reading_models import JsonDecimal

# Money amounts per plan
Cost = JsonDecimal


class StoreReadingsResponse(BaseModel):
    """Model for the store acknowledgement."""
    message: str
    smart_meter_id: str
    readings_stored: int


class PricePlanComparison(BaseModel):
    """Model for the cost of every plan against one meter's readings."""
    model_config = ConfigDict(populate_by_name=True)

    selected_plan_id: Optional[str] = Field(default=None, alias="selectedPlanId")
    cost_per_plan: Dict[str, Cost] = Field(alias="costPerPlan")


class PlanRecommendation(BaseModel):
    """Model for one ranked plan recommendation."""
    model_config = ConfigDict(populate_by_name=True)

    plan_name: str = Field(alias="planName")
    cost: Cost


class APIInfo(BaseModel):
    """Model for API information."""
    message: str
    version: str
    endpoints: dict


class HealthResponse(BaseModel):
    """Model for health check response."""
    status: str
    service: str
    meters_tracked: int
    price_plans: int
