"""Tests for storing and retrieving readings through the service."""

import pytest

from smart_meter_api.exceptions import InvalidMeterIdError, InvalidReadingsError
from smart_meter_api.models import ElectricityReading

from .helpers import T0, hours_after_t0, make_reading


def test_store_then_get_returns_readings_in_append_order(meter_reading_service):
    batch_one = [make_reading(hours_after_t0(1), "0.5"), make_reading(T0, "0.2")]
    batch_two = [make_reading(hours_after_t0(3), "0.9")]

    assert meter_reading_service.store_readings("smart-meter-7", batch_one) == 2
    assert meter_reading_service.store_readings("smart-meter-7", batch_two) == 1

    assert meter_reading_service.get_readings("smart-meter-7") == tuple(batch_one + batch_two)


def test_get_for_never_stored_meter_is_none(meter_reading_service):
    assert meter_reading_service.get_readings("smart-meter-1") is None


def test_invalid_meter_id_leaves_store_unchanged(meter_reading_service):
    stored = [make_reading(T0, "1")]
    meter_reading_service.store_readings("smart-meter-1", stored)

    for _ in range(3):
        with pytest.raises(InvalidMeterIdError):
            meter_reading_service.store_readings("meter-1", [make_reading(hours_after_t0(1), "1")])

    assert meter_reading_service.get_readings("smart-meter-1") == tuple(stored)
    assert meter_reading_service.count_meters() == 1


def test_batch_with_one_bad_reading_is_rejected_whole(meter_reading_service):
    stored = [make_reading(T0, "1")]
    meter_reading_service.store_readings("smart-meter-1", stored)

    bad_batch = [make_reading(hours_after_t0(1), "1"), ElectricityReading(time=hours_after_t0(2), reading=None)]
    with pytest.raises(InvalidReadingsError):
        meter_reading_service.store_readings("smart-meter-1", bad_batch)

    assert meter_reading_service.get_readings("smart-meter-1") == tuple(stored)


def test_failed_first_store_does_not_create_meter(meter_reading_service):
    with pytest.raises(InvalidReadingsError):
        meter_reading_service.store_readings("smart-meter-9", [])

    assert meter_reading_service.get_readings("smart-meter-9") is None
    assert meter_reading_service.count_meters() == 0
