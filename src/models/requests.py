"""
Pydantic models for solar calculation requests
"""

import datetime as dt
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .events import EventClass, parse_event_mask


class Coordinate(BaseModel):
    """Geographic position in decimal degrees"""

    model_config = ConfigDict(frozen=True)

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


class SolarCalculationRequest(BaseModel):
    """Immutable snapshot of everything a calculation depends on"""

    model_config = ConfigDict(frozen=True)

    date: Union[dt.datetime, dt.date] = Field(
        ..., description="Calendar day to calculate for; time of day is ignored"
    )
    coordinate: Coordinate = Field(..., description="Observer position")
    event_mask: EventClass = Field(
        default=EventClass.ALL, description="Event classes to calculate"
    )

    @field_validator("event_mask", mode="before")
    @classmethod
    def _coerce_event_mask(cls, value):
        return parse_event_mask(value)

    @property
    def day_of_year(self) -> int:
        """1-based ordinal day of the request date (Jan 1 = 1)"""
        return self.date.timetuple().tm_yday

    @property
    def calendar_day(self) -> dt.date:
        """The request date stripped of any time component"""
        if isinstance(self.date, dt.datetime):
            return self.date.date()
        return self.date
