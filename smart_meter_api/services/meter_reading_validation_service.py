"""
Service for validating meter readings before they are stored.
"""

import re
from typing import Optional, Sequence

from .base_service import BaseService
from ..exceptions import InvalidMeterIdError, InvalidReadingsError
from ..models import ElectricityReading

# smart-meter-<one or more digits>
METER_ID_PATTERN = re.compile(r"smart-meter-[0-9]+")


class MeterReadingValidationService(BaseService):
    """
    Structural checks on a meter id and its readings.

    Pure: holds no state and touches nothing, so a failed check can never
    leave partial effects behind.
    """

    def validate_input(self, **kwargs) -> bool:
        """Validate `smart_meter_id` and `electricity_readings` keyword arguments."""
        self.validate_meter_reading(
            kwargs.get("smart_meter_id"),
            kwargs.get("electricity_readings")
        )
        return True

    def validate_meter_reading(
        self,
        smart_meter_id: Optional[str],
        electricity_readings: Optional[Sequence[ElectricityReading]]
    ) -> None:
        """
        Check the meter id first, then the readings.

        Raises:
            InvalidMeterIdError: id is None, empty or not smart-meter-<digits>.
            InvalidReadingsError: readings are None or empty, or an element has a
                missing time, a missing reading or a negative reading.
        """
        if not self.is_meter_id_valid(smart_meter_id):
            raise InvalidMeterIdError(smart_meter_id)

        if not self.are_electricity_readings_valid(electricity_readings):
            raise InvalidReadingsError()

    @staticmethod
    def is_meter_id_valid(smart_meter_id: Optional[str]) -> bool:
        return bool(smart_meter_id) and METER_ID_PATTERN.fullmatch(smart_meter_id) is not None

    @staticmethod
    def are_electricity_readings_valid(
        electricity_readings: Optional[Sequence[ElectricityReading]]
    ) -> bool:
        if not electricity_readings:
            return False
        for reading in electricity_readings:
            if reading is None or reading.time is None or reading.reading is None:
                return False
            if reading.reading < 0:
                return False
        return True
