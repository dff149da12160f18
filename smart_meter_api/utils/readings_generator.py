"""
Synthetic reading generation for seeding the store at startup.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from ..models import ElectricityReading

logger = logging.getLogger(__name__)


def generate_readings(
    count: int,
    interval_seconds: int = 10,
    end: Optional[datetime] = None,
    random_seed: Optional[int] = None
) -> List[ElectricityReading]:
    """
    Generate `count` evenly spaced readings ending at `end` (default: now, UTC).

    Values are the absolute value of a standard normal draw rounded to four
    decimal places, in kW.

    Args:
        count: Number of readings to generate.
        interval_seconds: Seconds between consecutive readings.
        end: Timestamp of the last reading.
        random_seed: Seed for reproducible values.

    Returns:
        List[ElectricityReading]: Readings in ascending time order.
    """
    if count < 1:
        return []

    end_ts = pd.Timestamp(end) if end is not None else pd.Timestamp.now(tz="UTC").floor("s")
    if end_ts.tzinfo is None:
        end_ts = end_ts.tz_localize("UTC")

    times = pd.date_range(end=end_ts, periods=count, freq=pd.Timedelta(seconds=interval_seconds))
    rng = np.random.default_rng(random_seed)
    values = np.round(np.abs(rng.standard_normal(count)), 4)

    return [
        ElectricityReading(time=ts.to_pydatetime(), reading=Decimal(str(value)))
        for ts, value in zip(times, values)
    ]


def seed_meter_readings(meter_reading_service, smart_meter_ids: Iterable[str], seed_config) -> int:
    """
    Store a generated batch for every meter id through the normal store path.

    Returns:
        int: Number of meters seeded.
    """
    seeded = 0
    for offset, smart_meter_id in enumerate(smart_meter_ids):
        random_seed = None if seed_config.random_seed is None else seed_config.random_seed + offset
        readings = generate_readings(
            seed_config.readings_per_meter,
            interval_seconds=seed_config.interval_seconds,
            random_seed=random_seed
        )
        meter_reading_service.store_readings(smart_meter_id, readings)
        seeded += 1

    logger.info(f"Seeded readings for {seeded} smart meters")
    return seeded
