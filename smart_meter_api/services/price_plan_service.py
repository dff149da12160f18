"""
Service for price plan comparison and recommendation.
"""

import logging
from typing import List, Optional

from .account_service import AccountService
from .base_service import BaseService
from .consumption_cost_service import ConsumptionCostService
from ..exceptions import InvalidRecommendationLimitError, RecommendationLimitExceededError
from ..models import PlanRecommendation, PricePlanComparison


class PricePlanService(BaseService):
    """Compares plans for a meter and ranks them cheapest first."""

    def __init__(
        self,
        account_service: AccountService = None,
        consumption_cost_service: ConsumptionCostService = None
    ):
        """Initialize service with its collaborating services."""
        super().__init__()
        self.account_service = account_service or AccountService()
        self.consumption_cost_service = consumption_cost_service or ConsumptionCostService()
        self.logger = logging.getLogger(__name__)

    def validate_input(self, **kwargs) -> bool:
        """Validate the recommendation limit, when one is given."""
        limit = kwargs.get("limit")

        if limit is not None and limit < 1:
            raise InvalidRecommendationLimitError(limit)

        return True

    def find_consumption_cost_per_plan(self, smart_meter_id: str) -> PricePlanComparison:
        """
        Cost of every plan for the meter, plus the plan it currently uses.

        Raises:
            NoReadingsError, ZeroDurationError
        """
        price_plan_id = self.account_service.get_price_plan_id_for_smart_meter_id(smart_meter_id)
        consumption_costs = self.consumption_cost_service.compute_consumption_cost_per_plan(smart_meter_id)

        return PricePlanComparison(
            selected_plan_id=price_plan_id,
            cost_per_plan=consumption_costs
        )

    def find_meter_recommendation_for_user(
        self,
        smart_meter_id: str,
        limit: Optional[int] = None
    ) -> List[PlanRecommendation]:
        """
        Plans ordered from cheapest to most expensive for the meter.

        Equal costs are ordered by plan name so the output is reproducible.
        A limit equal to the number of plans returns them all; a larger one
        is refused with the maximum that can be served.

        Raises:
            NoReadingsError, ZeroDurationError,
            InvalidRecommendationLimitError, RecommendationLimitExceededError
        """
        self.validate_input(limit=limit)

        consumption_costs = self.consumption_cost_service.compute_consumption_cost_per_plan(smart_meter_id)
        ranked = sorted(consumption_costs.items(), key=lambda item: (item[1], item[0]))

        if limit is not None and limit > len(ranked):
            self.logger.error(
                f"Requested {limit} recommendations but only {len(ranked)} price plans exist")
            raise RecommendationLimitExceededError(len(ranked))

        if limit is not None and limit < len(ranked):
            ranked = ranked[:limit]

        return [PlanRecommendation(plan_name=name, cost=cost) for name, cost in ranked]

    def count_price_plans(self) -> int:
        return self.consumption_cost_service.repository.count()
