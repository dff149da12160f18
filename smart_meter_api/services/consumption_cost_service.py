"""
Service for calculating consumption cost under each price plan.

Formula per plan:

    average cost = sum(reading_kw * unit_price_at(reading_time)) / elapsed_hours

where elapsed_hours is the span between the earliest and latest reading. The
unit price is looked up per reading in the configured local time zone, so
time-of-use plans charge each reading at the rate in force when it was
taken. All arithmetic is Decimal; averages are rounded ROUND_HALF_UP to the
configured number of decimal places.
"""

import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Sequence

import pytz

from .base_service import BaseService
from .meter_reading_service import MeterReadingService
from ..config import app_config
from ..exceptions import NoReadingsError, ZeroDurationError
from ..models import ElectricityReading, PricePlan
from ..repositories import PricePlanRepository, price_plan_repository

SECONDS_PER_HOUR = Decimal(3600)


class ConsumptionCostService(BaseService):
    """Cost engine: one average cost per price plan for a meter's readings."""

    def __init__(
        self,
        meter_reading_service: MeterReadingService = None,
        repository: PricePlanRepository = None,
        timezone: str = None,
        cost_decimal_places: int = None
    ):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or price_plan_repository)
        self.meter_reading_service = meter_reading_service or MeterReadingService()
        self.timezone = pytz.timezone(timezone or app_config.pricing.timezone)
        if cost_decimal_places is None:
            cost_decimal_places = app_config.pricing.cost_decimal_places
        self.cost_quantum = Decimal(1).scaleb(-cost_decimal_places)
        self.logger = logging.getLogger(__name__)

    def compute_consumption_cost_per_plan(self, smart_meter_id: str) -> Dict[str, Decimal]:
        """
        Average cost of the meter's readings under every price plan.

        All plans are costed against one snapshot of the readings.

        Raises:
            NoReadingsError: the meter has no stored readings.
            ZeroDurationError: every reading has the same timestamp.
        """
        readings = self.meter_reading_service.get_readings(smart_meter_id)
        if not readings:
            self.logger.error(
                f"Cannot compute cost per plan as no readings were found for meter id {smart_meter_id}")
            raise NoReadingsError(smart_meter_id)

        time_elapsed = self.calculate_time_elapsed(readings)
        if time_elapsed == 0:
            self.logger.error(f"Readings for meter id {smart_meter_id} span zero hours")
            raise ZeroDurationError(smart_meter_id)

        return {
            plan.plan_name: self.calculate_cost(readings, plan, time_elapsed)
            for plan in self.repository.plans
        }

    def calculate_cost(
        self,
        readings: Sequence[ElectricityReading],
        price_plan: PricePlan,
        time_elapsed: Decimal
    ) -> Decimal:
        """Average cost for one plan: total cost over elapsed hours."""
        total_cost = self.calculate_total_cost(readings, price_plan)
        return (total_cost / time_elapsed).quantize(self.cost_quantum, rounding=ROUND_HALF_UP)

    def calculate_total_cost(self, readings: Sequence[ElectricityReading], price_plan: PricePlan) -> Decimal:
        """Sum of every reading multiplied by the plan's price at that reading's time."""
        return sum(
            (reading.reading * price_plan.get_price(self.to_local_time(reading.time))
             for reading in readings),
            Decimal(0)
        )

    @staticmethod
    def calculate_time_elapsed(readings: Sequence[ElectricityReading]) -> Decimal:
        """Hours between the earliest and the latest reading, fractions kept."""
        start = min(reading.time for reading in readings)
        end = max(reading.time for reading in readings)
        delta = end - start
        seconds = Decimal(delta.days * 86400 + delta.seconds) + Decimal(delta.microseconds) / Decimal(1000000)
        return seconds / SECONDS_PER_HOUR

    def to_local_time(self, time: datetime) -> datetime:
        if time.tzinfo is None:
            time = pytz.utc.localize(time)
        return time.astimezone(self.timezone)
