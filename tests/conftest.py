"""Shared fixtures for the smart meter API tests."""

import os

# Keep the app's startup seeding out of the tests
os.environ["SMART_METER_SEED_READINGS"] = "false"

import pytest
from fastapi.testclient import TestClient

from smart_meter_api.controllers import get_meter_reading_service, get_price_plan_service
from smart_meter_api.main import app
from smart_meter_api.models import PricePlan
from smart_meter_api.repositories import AccountRepository, MeterReadingRepository, PricePlanRepository
from smart_meter_api.services import (
    AccountService,
    ConsumptionCostService,
    MeterReadingService,
    PricePlanService,
)


@pytest.fixture
def price_plans():
    return [
        PricePlan(plan_name="price-plan-0", energy_supplier="Dr Evil's Dark Energy", unit_rate="10"),
        PricePlan(plan_name="price-plan-1", energy_supplier="The Green Eco", unit_rate="2"),
        PricePlan(plan_name="price-plan-2", energy_supplier="Power for Everyone", unit_rate="1"),
    ]


@pytest.fixture
def reading_repository():
    return MeterReadingRepository()


@pytest.fixture
def meter_reading_service(reading_repository):
    return MeterReadingService(reading_repository)


@pytest.fixture
def consumption_cost_service(meter_reading_service, price_plans):
    return ConsumptionCostService(
        meter_reading_service,
        PricePlanRepository(price_plans),
        timezone="UTC",
        cost_decimal_places=2
    )


@pytest.fixture
def price_plan_service(consumption_cost_service):
    accounts = AccountRepository({"smart-meter-0": "price-plan-0"})
    return PricePlanService(AccountService(accounts), consumption_cost_service)


@pytest.fixture
def client(meter_reading_service, price_plan_service):
    """Test client wired to fresh, isolated in-memory services."""
    app.dependency_overrides[get_meter_reading_service] = lambda: meter_reading_service
    app.dependency_overrides[get_price_plan_service] = lambda: price_plan_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
