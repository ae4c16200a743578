"""
Package initialization for models
"""

# Event enumerations
from .events import (
    EventClass,
    Direction,
    PolarCondition,
    expand_event_mask,
    parse_event_mask,
)

# Request and result value objects
from .requests import Coordinate, SolarCalculationRequest
from .results import EVENT_FIELDS, RESULT_FIELD_NAMES, SolarEventResult

# Configuration models
from .config import LocationConfig, CalculatorConfig

__all__ = [
    # Events
    "EventClass",
    "Direction",
    "PolarCondition",
    "expand_event_mask",
    "parse_event_mask",
    # Requests and results
    "Coordinate",
    "SolarCalculationRequest",
    "EVENT_FIELDS",
    "RESULT_FIELD_NAMES",
    "SolarEventResult",
    # Config models
    "LocationConfig",
    "CalculatorConfig",
]
