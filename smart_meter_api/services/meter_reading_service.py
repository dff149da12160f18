"""
Service for storing and retrieving smart meter readings.
"""

import logging
from typing import Optional, Sequence, Tuple

from .base_service import BaseService
from .meter_reading_validation_service import MeterReadingValidationService
from ..exceptions import SmartMeterError
from ..models import ElectricityReading
from ..repositories import MeterReadingRepository, meter_reading_repository


class MeterReadingService(BaseService):
    """Validates incoming batches and keeps them in the reading store."""

    def __init__(
        self,
        repository: MeterReadingRepository = None,
        validation_service: MeterReadingValidationService = None
    ):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or meter_reading_repository)
        self.validation_service = validation_service or MeterReadingValidationService()
        self.logger = logging.getLogger(__name__)

    def validate_input(self, **kwargs) -> bool:
        """Validate a meter id and its readings."""
        return self.validation_service.validate_input(**kwargs)

    def store_readings(
        self,
        smart_meter_id: Optional[str],
        electricity_readings: Optional[Sequence[ElectricityReading]]
    ) -> int:
        """
        Validate and store a batch of readings.

        The whole batch is rejected when the id or any single reading is
        invalid; nothing is written in that case.

        Returns:
            int: Number of readings stored by this call.

        Raises:
            InvalidMeterIdError, InvalidReadingsError
        """
        try:
            self.validate_input(
                smart_meter_id=smart_meter_id,
                electricity_readings=electricity_readings
            )
        except SmartMeterError as e:
            self.logger.warning(f"Rejected readings for meter id {smart_meter_id}: {e.message}")
            raise

        total = self.repository.append(smart_meter_id, electricity_readings)
        self.logger.info(
            f"Stored {len(electricity_readings)} readings for {smart_meter_id} ({total} in total)")
        return len(electricity_readings)

    def get_readings(self, smart_meter_id: str) -> Optional[Tuple[ElectricityReading, ...]]:
        """Readings stored for the meter in append order, or None if it has none."""
        return self.repository.find_by_id(smart_meter_id)

    def count_meters(self) -> int:
        return self.repository.count()
