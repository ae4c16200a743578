"""
Solar position math for the sunrise/sunset equation

Each function is one step of the closed-form approximation. Angles are
passed around in degrees and converted to radians only for trig calls.
"""

import logging
import math
from dataclasses import dataclass

from models.events import Direction, PolarCondition
from .constants import SolarConstants

logger = logging.getLogger(__name__)


class CircumpolarError(ValueError):
    """The sun does not cross the requested zenith angle on this day"""

    def __init__(self, condition: PolarCondition, cos_h: float):
        self.condition = condition
        self.cos_h = cos_h
        super().__init__(f"Sun {condition.value.replace('_', ' ')} (cosH={cos_h:.4f})")


@dataclass(frozen=True)
class SolarPipeline:
    """Zenith-independent intermediate values for one direction"""

    direction: Direction
    approximate_time: float
    mean_anomaly: float
    true_longitude: float
    right_ascension: float


def _normalize(value: float, bound: float) -> float:
    """Wrap value into [0, bound)"""
    wrapped = value % bound
    # -1e-20 % 360.0 == 360.0
    if wrapped >= bound:
        wrapped -= bound
    return wrapped


def longitude_hour(longitude: float) -> float:
    return longitude / SolarConstants.DEGREES_PER_HOUR


def approximate_time(
    day_of_year: int, longitude_hour: float, direction: Direction
) -> float:
    """t = N + ((base - lngHour) / 24)"""
    base_time = SolarConstants.BASE_TIMES[direction]
    return day_of_year + ((base_time - longitude_hour) / 24.0)


def mean_anomaly(approximate_time: float) -> float:
    return (
        SolarConstants.MEAN_ANOMALY_RATE * approximate_time
        - SolarConstants.MEAN_ANOMALY_OFFSET
    )


def true_longitude(mean_anomaly: float) -> float:
    """Sun's true longitude in degrees, in [0, 360)"""
    m = math.radians(mean_anomaly)
    longitude = (
        mean_anomaly
        + SolarConstants.EQUATION_OF_CENTER_1 * math.sin(m)
        + SolarConstants.EQUATION_OF_CENTER_2 * math.sin(2 * m)
        + SolarConstants.LONGITUDE_OF_PERIHELION
    )
    return _normalize(longitude, 360.0)


def right_ascension(true_longitude: float) -> float:
    """
    Sun's right ascension in hours, in [0, 24).

    atan2() keeps RA in the same quadrant as the true longitude, including
    at the quadrant boundaries where tan(L) is unbounded.
    """
    true_longitude = _normalize(true_longitude, 360.0)
    l = math.radians(true_longitude)
    ra = math.degrees(
        math.atan2(SolarConstants.RIGHT_ASCENSION_FACTOR * math.sin(l), math.cos(l))
    )
    ra = _normalize(ra, 360.0)

    return ra / SolarConstants.DEGREES_PER_HOUR


def local_hour_angle(
    true_longitude: float, latitude: float, zenith: float, direction: Direction
) -> float:
    """
    Sun's local hour angle in hours.

    Raises CircumpolarError when the hour angle cosine leaves [-1, 1]: above 1
    the sun never rises to the zenith angle, below -1 it never sets past it.
    """
    sin_dec = SolarConstants.SIN_OBLIQUITY * math.sin(math.radians(true_longitude))
    cos_dec = math.cos(math.asin(sin_dec))

    lat = math.radians(latitude)
    cos_h = (math.cos(math.radians(zenith)) - (sin_dec * math.sin(lat))) / (
        cos_dec * math.cos(lat)
    )
    logger.debug(f"cosH={cos_h:.6f} lat={latitude} zenith={zenith}")

    if cos_h > 1.0:
        raise CircumpolarError(PolarCondition.NEVER_RISES, cos_h)
    if cos_h < -1.0:
        raise CircumpolarError(PolarCondition.NEVER_SETS, cos_h)

    hour_angle = math.degrees(math.acos(cos_h))
    if direction is Direction.RISING:
        hour_angle = 360.0 - hour_angle

    return hour_angle / SolarConstants.DEGREES_PER_HOUR


def local_mean_time(
    local_hour_angle: float, right_ascension: float, approximate_time: float
) -> float:
    """T = H + RA - (0.06571 * t) - 6.622"""
    return (
        local_hour_angle
        + right_ascension
        - (SolarConstants.SIDEREAL_RATE * approximate_time)
        - SolarConstants.LOCAL_MEAN_TIME_OFFSET
    )


def to_utc(local_mean_time: float, longitude_hour: float) -> float:
    """Convert local mean time to a UTC hour in [0, 24)"""
    return _normalize(local_mean_time - longitude_hour, 24.0)


def compute_pipeline(
    day_of_year: int, longitude_hour: float, direction: Direction
) -> SolarPipeline:
    """Run the steps that do not depend on zenith or latitude"""
    t = approximate_time(day_of_year, longitude_hour, direction)
    m = mean_anomaly(t)
    tl = true_longitude(m)
    ra = right_ascension(tl)
    return SolarPipeline(
        direction=direction,
        approximate_time=t,
        mean_anomaly=m,
        true_longitude=tl,
        right_ascension=ra,
    )
