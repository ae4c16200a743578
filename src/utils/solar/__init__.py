"""
Solar calculation package

This package computes sunrise, sunset, twilight and solar noon times with
the closed-form sunrise equation.
"""

from .core import SolarCalculator, calculate_solar_events, compute_solar_event
from .cache import SolarCache
from .position import CircumpolarError, SolarPipeline
from .julian import (
    gregorian_date_from_julian_day_number,
    julian_day_number_from_date,
)

__all__ = [
    "SolarCalculator",
    "SolarCache",
    "calculate_solar_events",
    "compute_solar_event",
    "CircumpolarError",
    "SolarPipeline",
    "julian_day_number_from_date",
    "gregorian_date_from_julian_day_number",
]
