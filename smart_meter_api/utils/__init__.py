"""
Utilities package for smart meter reading management.
"""

from .readings_generator import generate_readings, seed_meter_readings

__all__ = ['generate_readings', 'seed_meter_readings']
