"""
Configuration package for application settings.
"""

from .settings import ApplicationConfig, APIConfig, PricingConfig, SeedConfig, app_config
from .logging_config import setup_logging

__all__ = [
    "ApplicationConfig",
    "APIConfig",
    "PricingConfig",
    "SeedConfig",
    "app_config",
    "setup_logging"
]
