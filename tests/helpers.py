"""Reading builders shared by the tests."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from smart_meter_api.models import ElectricityReading

T0 = datetime(2024, 6, 7, 12, 0, tzinfo=timezone.utc)  # a Friday


def make_reading(time: datetime, quantity) -> ElectricityReading:
    return ElectricityReading(time=time, reading=Decimal(str(quantity)))


def hours_after_t0(hours: float) -> datetime:
    return T0 + timedelta(hours=hours)
