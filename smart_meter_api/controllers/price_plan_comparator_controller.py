"""
Controller for comparing and recommending price plans.

Tags:
    - price-plans
    - cost-comparison
    - recommendations

Endpoints:
    - GET /price-plans/compare-all/{smart_meter_id}: Cost under every plan
    - GET /price-plans/recommend/{smart_meter_id}: Cheapest plans first
"""

from fastapi import Query, Depends
from typing import Optional, List

from .base_controller import BaseController
from ..services import PricePlanService
from ..models import PricePlanComparison, PlanRecommendation


def get_price_plan_service() -> PricePlanService:
    """Dependency injection for PricePlanService."""
    return PricePlanService()


class PricePlanComparatorController(BaseController):
    """Controller for price plan comparison endpoints."""

    def _setup_routes(self):
        """Setup routes for comparison and recommendation."""

        @self.router.get(
            "/price-plans/compare-all/{smart_meter_id}",
            response_model=PricePlanComparison,
            tags=["Price Plans"],
            summary="Compare every price plan for a smart meter",
            description="""
            Average cost per hour of the meter's stored readings under each price plan,
            together with the plan the meter is currently subscribed to.

            **Cost Calculation:**
            - Each reading is charged at the plan's rate in force at the reading's time
            - Total cost is divided by the hours between the first and last reading
            - Costs are rounded half-up to the configured monetary precision

            Returns HTTP 404 when the meter has no readings and HTTP 422 when all of its
            readings share a single timestamp.
            """,
            response_description="Selected plan id and cost for every plan"
        )
        async def calculate_cost_for_each_price_plan(
            smart_meter_id: str,
            service: PricePlanService = Depends(get_price_plan_service)
        ):
            """Calculate the consumption cost of every plan for a meter."""
            try:
                return service.find_consumption_cost_per_plan(smart_meter_id)
            except Exception as e:
                self.handle_exception(e, "Error comparing price plans")

        @self.router.get(
            "/price-plans/recommend/{smart_meter_id}",
            response_model=List[PlanRecommendation],
            tags=["Price Plans"],
            summary="Recommend the cheapest price plans for a smart meter",
            description="""
            Price plans ranked from cheapest to most expensive for the meter's readings.
            Plans with equal cost are ordered by name.

            **Limit:**
            - Omitted: every plan is returned
            - Equal to the number of plans: every plan is returned
            - Larger than the number of plans: HTTP 400 naming the maximum
            """,
            response_description="Ranked list of plan names and costs"
        )
        async def recommend_cheapest_price_plans(
            smart_meter_id: str,
            limit: Optional[int] = Query(
                None,
                description="Number of recommendations to return",
                examples=[2]
            ),
            service: PricePlanService = Depends(get_price_plan_service)
        ):
            """Find recommended plans for a meter."""
            try:
                return service.find_meter_recommendation_for_user(smart_meter_id, limit)
            except Exception as e:
                self.handle_exception(e, "Error recommending price plans")
