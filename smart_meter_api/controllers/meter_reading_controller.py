"""
Controller for storing and retrieving meter readings.

Endpoints:
    - POST /readings/store: Validate and store a batch of readings
    - GET /readings/read/{smart_meter_id}: Readings stored for a meter
"""

from fastapi import HTTPException, Depends
from typing import List

from .base_controller import BaseController
from ..services import MeterReadingService
from ..models import ElectricityReading, MeterReadings, StoreReadingsResponse


def get_meter_reading_service() -> MeterReadingService:
    """Dependency injection for MeterReadingService."""
    return MeterReadingService()


class MeterReadingController(BaseController):
    """Controller for meter reading endpoints."""

    def _setup_routes(self):
        """Setup routes for reading storage and retrieval."""

        @self.router.post(
            "/readings/store",
            response_model=StoreReadingsResponse,
            tags=["Meter Readings"],
            summary="Store smart meter readings",
            description="""
            Store a batch of electricity readings for one smart meter.

            **Validation:**
            - `smartMeterId` must look like `smart-meter-<digits>`
            - `electricityReadings` must be a non-empty list
            - every reading needs a `time` (ISO-8601 or epoch seconds) and a
              non-negative `reading` in kW

            A batch with any invalid element is rejected as a whole and nothing
            is stored (HTTP 400). Bodies that cannot be parsed return HTTP 422.
            """,
            response_description="Acknowledgement with the number of readings stored"
        )
        async def store_readings(
            meter_readings: MeterReadings,
            service: MeterReadingService = Depends(get_meter_reading_service)
        ):
            """Validate and store meter readings."""
            try:
                stored = service.store_readings(
                    meter_readings.smart_meter_id,
                    meter_readings.electricity_readings
                )
                return StoreReadingsResponse(
                    message="Readings Saved",
                    smart_meter_id=meter_readings.smart_meter_id,
                    readings_stored=stored
                )
            except Exception as e:
                self.handle_exception(e, "Error storing readings")

        @self.router.get(
            "/readings/read/{smart_meter_id}",
            response_model=List[ElectricityReading],
            tags=["Meter Readings"],
            summary="Get readings for a smart meter",
            response_description="Stored readings in the order they were received"
        )
        async def read_readings(
            smart_meter_id: str,
            service: MeterReadingService = Depends(get_meter_reading_service)
        ):
            """Retrieve readings for a meter id, or HTTP 404 if none were stored."""
            try:
                readings = service.get_readings(smart_meter_id)
                if readings is None:
                    raise HTTPException(
                        status_code=404,
                        detail=f"No readings were found for meter id {smart_meter_id}"
                    )
                return list(readings)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving readings")
