"""
Repository package for data access layer.
"""

from .base_repository import BaseRepository
from .meter_reading_repository import MeterReadingRepository, meter_reading_repository
from .price_plan_repository import (
    PricePlanRepository,
    AccountRepository,
    price_plan_repository,
    account_repository
)

__all__ = [
    "BaseRepository",
    "MeterReadingRepository",
    "PricePlanRepository",
    "AccountRepository",
    "meter_reading_repository",
    "price_plan_repository",
    "account_repository"
]
