"""
Repositories for price plans and meter accounts.
Both are read-only views over configuration loaded at startup.
"""

from typing import Dict, Iterable, Mapping, Optional, Tuple

from .base_repository import BaseRepository
from ..config import app_config
from ..models import PricePlan


class PricePlanRepository(BaseRepository):
    """Fixed list of the price plans on offer."""

    def __init__(self, price_plans: Iterable[PricePlan]):
        self._plans: Tuple[PricePlan, ...] = tuple(price_plans)
        names = [plan.plan_name for plan in self._plans]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate price plan names in {names}")

    def find_all(self) -> Dict[str, PricePlan]:
        return {plan.plan_name: plan for plan in self._plans}

    def find_by_id(self, plan_name: str) -> Optional[PricePlan]:
        for plan in self._plans:
            if plan.plan_name == plan_name:
                return plan
        return None

    def count(self) -> int:
        return len(self._plans)

    @property
    def plans(self) -> Tuple[PricePlan, ...]:
        return self._plans


class AccountRepository(BaseRepository):
    """Which price plan each smart meter is currently subscribed to."""

    def __init__(self, accounts: Mapping[str, str]):
        self._accounts: Dict[str, str] = dict(accounts)

    def find_all(self) -> Dict[str, str]:
        return dict(self._accounts)

    def find_by_id(self, smart_meter_id: str) -> Optional[str]:
        return self._accounts.get(smart_meter_id)

    def count(self) -> int:
        return len(self._accounts)


price_plan_repository = PricePlanRepository(app_config.pricing.price_plans)
account_repository = AccountRepository(app_config.pricing.accounts)
