"""
Service for looking up the price plan a meter is subscribed to.
"""

from typing import Optional

from .base_service import BaseService
from ..repositories import AccountRepository, account_repository


class AccountService(BaseService):
    """Read-only access to meter subscriptions."""

    def __init__(self, repository: AccountRepository = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or account_repository)

    def get_price_plan_id_for_smart_meter_id(self, smart_meter_id: str) -> Optional[str]:
        """Plan id for the meter, or None when the meter has no account."""
        return self.repository.find_by_id(smart_meter_id)
