"""
Pydantic models for solar calculation results
"""

import datetime as dt
from typing import Dict, Optional, Union

import pytz
from pydantic import BaseModel, ConfigDict, Field

from .events import Direction, EventClass, PolarCondition

EventTime = Optional[Union[dt.datetime, PolarCondition]]

# Result field populated for each event class and direction
EVENT_FIELDS = {
    (EventClass.OFFICIAL, Direction.RISING): "sunrise",
    (EventClass.OFFICIAL, Direction.SETTING): "sunset",
    (EventClass.CIVIL, Direction.RISING): "civil_dawn",
    (EventClass.CIVIL, Direction.SETTING): "civil_dusk",
    (EventClass.NAUTICAL, Direction.RISING): "nautical_dawn",
    (EventClass.NAUTICAL, Direction.SETTING): "nautical_dusk",
    (EventClass.ASTRONOMICAL, Direction.RISING): "astronomical_dawn",
    (EventClass.ASTRONOMICAL, Direction.SETTING): "astronomical_dusk",
}

RESULT_FIELD_NAMES = (
    "astronomical_dawn",
    "nautical_dawn",
    "civil_dawn",
    "sunrise",
    "solar_noon",
    "sunset",
    "civil_dusk",
    "nautical_dusk",
    "astronomical_dusk",
)


class SolarEventResult(BaseModel):
    """
    Calculated event times.

    Each field is None when it has not been calculated, a UTC datetime when
    the event happens, or a PolarCondition when the sun never crosses the
    event's zenith angle on that day.
    """

    model_config = ConfigDict(frozen=True)

    sunrise: EventTime = Field(default=None, description="Official sunrise")
    sunset: EventTime = Field(default=None, description="Official sunset")
    solar_noon: EventTime = Field(default=None, description="Solar noon")
    civil_dawn: EventTime = Field(default=None, description="Civil dawn")
    civil_dusk: EventTime = Field(default=None, description="Civil dusk")
    nautical_dawn: EventTime = Field(default=None, description="Nautical dawn")
    nautical_dusk: EventTime = Field(default=None, description="Nautical dusk")
    astronomical_dawn: EventTime = Field(
        default=None, description="Astronomical dawn"
    )
    astronomical_dusk: EventTime = Field(
        default=None, description="Astronomical dusk"
    )

    def is_empty(self) -> bool:
        """True when no field has been calculated"""
        return all(getattr(self, name) is None for name in RESULT_FIELD_NAMES)

    def as_dict(self) -> Dict[str, EventTime]:
        """Fields in chronological order of a normal day"""
        return {name: getattr(self, name) for name in RESULT_FIELD_NAMES}

    def localized(self, timezone_name: str) -> Dict[str, EventTime]:
        """Project calculated times into the given IANA time zone"""
        tz = pytz.timezone(timezone_name)
        localized = {}
        for name, value in self.as_dict().items():
            if isinstance(value, dt.datetime):
                localized[name] = value.astimezone(tz)
            else:
                localized[name] = value
        return localized
