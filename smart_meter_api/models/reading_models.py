"""
Domain models for smart meter readings.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

# Decimal kept exact in memory, written to JSON as a number
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ElectricityReading(BaseModel):
    """
    Model for a single electricity reading.

    `time` accepts ISO-8601 strings or Unix epoch seconds; naive values are
    taken as UTC. `reading` is instantaneous consumption in kW. Both fields
    may arrive as null and are rejected by the reading validator rather than
    at parse time.
    """
    model_config = ConfigDict(frozen=True)

    time: Optional[datetime] = None
    reading: Optional[JsonDecimal] = None

    @field_validator("time")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class MeterReadings(BaseModel):
    """Request body for storing a batch of readings against one meter."""
    model_config = ConfigDict(populate_by_name=True)

    smart_meter_id: Optional[str] = Field(default=None, alias="smartMeterId")
    electricity_readings: Optional[List[ElectricityReading]] = Field(
        default=None, alias="electricityReadings")
