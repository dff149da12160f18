"""
Domain models for electricity price plans.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PeakTimeMultiplier(BaseModel):
    """Rate multiplier applied on a day of the week, optionally within an hour window."""
    model_config = ConfigDict(frozen=True)

    day_of_week: int = Field(ge=0, le=6)  # Monday=0 ... Sunday=6
    multiplier: Decimal = Field(gt=0)
    # half-open window [start_hour, end_hour); both None means the whole day
    start_hour: Optional[int] = Field(default=None, ge=0, le=23)
    end_hour: Optional[int] = Field(default=None, ge=1, le=24)

    @model_validator(mode="after")
    def check_window(self) -> "PeakTimeMultiplier":
        start = self.start_hour or 0
        end = self.end_hour or 24
        if start >= end:
            raise ValueError("start_hour must be before end_hour")
        return self

    def applies_to(self, local_time: datetime) -> bool:
        if local_time.weekday() != self.day_of_week:
            return False
        start = self.start_hour or 0
        end = self.end_hour or 24
        return start <= local_time.hour < end


class PricePlan(BaseModel):
    """
    A named tariff: a unit rate per kWh, scaled by peak-time multipliers.

    Plans are loaded once from configuration and never change while the
    process runs.
    """
    model_config = ConfigDict(frozen=True)

    plan_name: str
    energy_supplier: str = ""
    unit_rate: Decimal = Field(ge=0)
    peak_time_multipliers: Tuple[PeakTimeMultiplier, ...] = ()

    def get_price(self, local_time: datetime) -> Decimal:
        """
        Unit price in effect at the given local wall-clock time.

        The first matching multiplier wins; without one the plain unit rate
        applies.
        """
        for peak in self.peak_time_multipliers:
            if peak.applies_to(local_time):
                return self.unit_rate * peak.multiplier
        return self.unit_rate
