"""
Application configuration settings.
Spring Boot-like configuration management.

Every section has sensible defaults and can be overridden through environment
variables (a `.env` file next to the package is loaded first when present).
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..models.plan_models import PeakTimeMultiplier, PricePlan

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def default_price_plans() -> List[PricePlan]:
    """The three tariffs offered out of the box."""
    return [
        PricePlan(
            plan_name="price-plan-0",
            energy_supplier="Dr Evil's Dark Energy",
            unit_rate="10",
        ),
        PricePlan(
            plan_name="price-plan-1",
            energy_supplier="The Green Eco",
            unit_rate="2",
        ),
        PricePlan(
            plan_name="price-plan-2",
            energy_supplier="Power for Everyone",
            unit_rate="1",
        ),
    ]


def default_accounts() -> Dict[str, str]:
    """Meter id to subscribed plan id."""
    return {
        "smart-meter-0": "price-plan-0",
        "smart-meter-1": "price-plan-1",
        "smart-meter-2": "price-plan-0",
        "smart-meter-3": "price-plan-2",
        "smart-meter-4": "price-plan-1",
    }


def load_price_plans_file(path: str) -> List[PricePlan]:
    """
    Load price plans from a JSON file.

    The file holds a list of plan objects, for example:

        [{"plan_name": "price-plan-0", "energy_supplier": "Dr Evil's Dark Energy",
          "unit_rate": "10",
          "peak_time_multipliers": [{"day_of_week": 5, "multiplier": "2"}]}]
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Price plan file {path} not found")
    with open(path, "r") as f:
        raw_plans = json.load(f)
    return [PricePlan(**plan) for plan in raw_plans]


class APIConfig(BaseModel):
    """API configuration settings."""

    title: str = "Smart Meter Price Plan API"
    description: str = "REST API for storing smart meter readings and comparing electricity price plans"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    reload: bool = False
    log_level: str = "INFO"

    # CORS settings
    allow_origins: list = ["*"]
    allow_credentials: bool = True
    allow_methods: list = ["*"]
    allow_headers: list = ["*"]


class PricingConfig(BaseModel):
    """Price plan and costing settings."""

    # Time zone used to find the local time of a reading for time-of-use lookups
    timezone: str = "UTC"
    # Decimal places of the monetary unit; average costs are rounded HALF_UP to it
    cost_decimal_places: int = Field(default=2, ge=0, le=10)
    price_plans: List[PricePlan] = Field(default_factory=default_price_plans)
    accounts: Dict[str, str] = Field(default_factory=default_accounts)


class SeedConfig(BaseModel):
    """Startup reading generation settings."""

    enabled: bool = True
    readings_per_meter: int = Field(default=20, ge=2)
    interval_seconds: int = Field(default=10, ge=1)
    random_seed: Optional[int] = None


class ApplicationConfig:
    """Main application configuration."""

    def __init__(self):
        self.api = APIConfig(
            host=os.getenv("SMART_METER_HOST", "0.0.0.0"),
            port=int(os.getenv("SMART_METER_PORT", "8080")),
            debug=_env_bool("SMART_METER_DEBUG", False),
            reload=_env_bool("SMART_METER_RELOAD", False),
            log_level=os.getenv("SMART_METER_LOG_LEVEL", "INFO"),
        )

        plans_file = os.getenv("SMART_METER_PRICE_PLANS_FILE")
        pricing_kwargs = {
            "timezone": os.getenv("SMART_METER_TIMEZONE", "UTC"),
            "cost_decimal_places": int(os.getenv("SMART_METER_COST_DECIMAL_PLACES", "2")),
        }
        if plans_file:
            pricing_kwargs["price_plans"] = load_price_plans_file(plans_file)
        self.pricing = PricingConfig(**pricing_kwargs)

        random_seed = os.getenv("SMART_METER_SEED_RANDOM_SEED")
        self.seed = SeedConfig(
            enabled=_env_bool("SMART_METER_SEED_READINGS", True),
            readings_per_meter=int(os.getenv("SMART_METER_SEED_READINGS_PER_METER", "20")),
            random_seed=int(random_seed) if random_seed else None,
        )

    @property
    def is_debug(self) -> bool:
        """Check if debug mode is enabled."""
        return self.api.debug

    @property
    def log_level(self) -> str:
        return self.api.log_level


# Global configuration instance
app_config = ApplicationConfig()
