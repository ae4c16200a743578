"""
Pydantic models for configuration data
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .events import EventClass, parse_event_mask


class LocationConfig(BaseModel):
    """Default observer location"""

    latitude: float = Field(
        ..., ge=-90.0, le=90.0, allow_inf_nan=False, description="Latitude in degrees"
    )
    longitude: float = Field(
        ...,
        ge=-180.0,
        le=180.0,
        allow_inf_nan=False,
        description="Longitude in degrees, east positive",
    )
    timezone: Optional[str] = Field(
        default="UTC",
        description="Timezone for displaying results (e.g., 'America/Los_Angeles')",
    )


class CalculatorConfig(BaseModel):
    """Solar calculator configuration"""

    event_mask: EventClass = Field(
        default=EventClass.ALL, description="Event classes calculated by default"
    )
    solar_noon_mode: Literal["midpoint", "legacy"] = Field(
        default="midpoint",
        description="'midpoint' of sunrise and sunset, or the 'legacy' seconds offset",
    )
    location: Optional[LocationConfig] = Field(
        default=None, description="Default location when none is given"
    )

    @field_validator("event_mask", mode="before")
    @classmethod
    def _coerce_event_mask(cls, value):
        return parse_event_mask(value)
