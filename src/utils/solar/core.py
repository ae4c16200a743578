"""
Core sunrise/sunset calculation: event orchestration and the stateful calculator
"""

import datetime as dt
import logging
import math
from typing import Dict, Mapping, Optional, Tuple, Union

import pytz

from models.config import CalculatorConfig
from models.events import (
    Direction,
    EventClass,
    PolarCondition,
    expand_event_mask,
    parse_event_mask,
)
from models.requests import Coordinate, SolarCalculationRequest
from models.results import EVENT_FIELDS, EventTime, SolarEventResult
from . import position
from .cache import SolarCache
from .constants import SolarConstants

logger = logging.getLogger(__name__)


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def utc_hour_to_datetime(event_date: dt.date, utc_hour: float) -> dt.datetime:
    """
    Build a UTC timestamp on the calendar day of `event_date` from a
    fractional hour. Hour and minute are rounded and may overshoot, in which
    case the minute (and second) offsets are negative.
    """
    hour = _round_half_away_from_zero(utc_hour)
    minutes = (utc_hour - hour) * 60
    minute = _round_half_away_from_zero(minutes)
    second = int((minutes - minute) * 60)

    midnight = dt.datetime(
        event_date.year, event_date.month, event_date.day, tzinfo=pytz.utc
    )
    return midnight + dt.timedelta(hours=hour, minutes=minute, seconds=second)


def compute_solar_event(
    event_class: EventClass,
    direction: Direction,
    zenith: float,
    pipeline: position.SolarPipeline,
    event_date: dt.date,
    latitude: float,
    longitude_hour: float,
) -> Union[dt.datetime, PolarCondition]:
    """Time of one event, or the PolarCondition when it does not happen"""
    try:
        hour_angle = position.local_hour_angle(
            pipeline.true_longitude, latitude, zenith, direction
        )
    except position.CircumpolarError as e:
        logger.info(f"No {event_class.name.lower()} {direction.value} event: {e}")
        return e.condition

    mean_time = position.local_mean_time(
        hour_angle, pipeline.right_ascension, pipeline.approximate_time
    )
    utc_hour = position.to_utc(mean_time, longitude_hour)
    logger.debug(
        f"{event_class.name.lower()} {direction.value}: "
        f"local hour {hour_angle:.6f}, UTC hour {utc_hour:.6f}"
    )
    return utc_hour_to_datetime(event_date, utc_hour)


def solar_noon(
    sunrise: Union[dt.datetime, PolarCondition],
    sunset: Union[dt.datetime, PolarCondition],
    mode: str = "midpoint",
) -> Union[dt.datetime, PolarCondition]:
    """
    Solar noon derived from official sunrise and sunset.

    "midpoint" returns the instant halfway between sunrise and the following
    sunset. "legacy" reproduces the older behaviour of adding half the day
    length, in hours, as a number of seconds past midnight UTC on the
    sunrise day; it is only kept for parity with existing outputs.
    """
    for event in (sunrise, sunset):
        if isinstance(event, PolarCondition):
            return event

    if mode == "legacy":
        day_length = (sunset - sunrise).total_seconds() / 60.0 / 60.0
        half_day_length = day_length / 2.0
        midnight = dt.datetime(
            sunrise.year, sunrise.month, sunrise.day, tzinfo=pytz.utc
        )
        return midnight + dt.timedelta(
            seconds=_round_half_away_from_zero(half_day_length)
        )

    if mode != "midpoint":
        raise ValueError(f"Unknown solar noon mode: {mode!r}")

    # West of Greenwich the UTC sunset on the same date precedes sunrise
    if sunset < sunrise:
        sunset += dt.timedelta(days=1)
    return sunrise + (sunset - sunrise) / 2


def calculate_solar_events(
    request: SolarCalculationRequest,
    previous: Optional[SolarEventResult] = None,
    noon_mode: str = "midpoint",
    pipelines: Optional[Mapping[Direction, position.SolarPipeline]] = None,
) -> SolarEventResult:
    """
    Calculate the events selected by the request's mask.

    Fields for classes outside the mask keep their value from `previous`.
    """
    previous = previous or SolarEventResult()
    day_of_year = request.day_of_year
    event_date = request.calendar_day
    latitude = request.coordinate.latitude
    longitude_hour = position.longitude_hour(request.coordinate.longitude)

    pipelines = dict(pipelines or {})
    for direction in Direction:
        if direction not in pipelines:
            pipelines[direction] = position.compute_pipeline(
                day_of_year, longitude_hour, direction
            )

    updates: Dict[str, EventTime] = {}
    for event_class in expand_event_mask(request.event_mask):
        zenith = SolarConstants.ZENITHS[event_class]
        for direction in Direction:
            field_name = EVENT_FIELDS[(event_class, direction)]
            updates[field_name] = compute_solar_event(
                event_class,
                direction,
                zenith,
                pipelines[direction],
                event_date,
                latitude,
                longitude_hour,
            )

        if event_class is EventClass.OFFICIAL:
            updates["solar_noon"] = solar_noon(
                updates["sunrise"], updates["sunset"], noon_mode
            )

    logger.debug(f"Calculated {sorted(updates)} for {event_date} (day {day_of_year})")
    return previous.model_copy(update=updates)


class SolarCalculator:
    """
    Stateful calculator for one date and coordinate.

    Changing the date or coordinate clears every result; changing the event
    mask does not. Results are only produced by calculate().
    """

    def __init__(
        self,
        date: Optional[dt.date] = None,
        coordinate: Optional[Union[Coordinate, Tuple[float, float], dict]] = None,
        event_mask: Optional[Union[EventClass, int, str]] = None,
        config: Optional[CalculatorConfig] = None,
    ):
        self.config = config or CalculatorConfig()
        self._cache = SolarCache()
        self._date: Optional[dt.date] = None
        self._coordinate: Optional[Coordinate] = None
        self._event_mask = parse_event_mask(
            self.config.event_mask if event_mask is None else event_mask
        )

        if date is not None:
            self.date = date
        if coordinate is not None:
            self.coordinate = coordinate

    @property
    def date(self) -> Optional[dt.date]:
        return self._date

    @date.setter
    def date(self, value: dt.date) -> None:
        if not isinstance(value, dt.date):
            raise ValueError(f"Expected a date or datetime, got {value!r}")
        self.invalidate()
        self._date = value

    @property
    def coordinate(self) -> Optional[Coordinate]:
        return self._coordinate

    @coordinate.setter
    def coordinate(self, value: Union[Coordinate, Tuple[float, float], dict]) -> None:
        if isinstance(value, Coordinate):
            coordinate = value
        elif isinstance(value, dict):
            coordinate = Coordinate(**value)
        else:
            try:
                latitude, longitude = value
            except (TypeError, ValueError):
                raise ValueError(
                    f"Expected a Coordinate, (lat, lon) or dict, got {value!r}"
                ) from None
            coordinate = Coordinate(latitude=latitude, longitude=longitude)
        self.invalidate()
        self._coordinate = coordinate

    @property
    def event_mask(self) -> EventClass:
        return self._event_mask

    @event_mask.setter
    def event_mask(self, value: Union[EventClass, int, str]) -> None:
        self._event_mask = parse_event_mask(value)

    @property
    def request(self) -> SolarCalculationRequest:
        """Snapshot of the current inputs"""
        if self._date is None or self._coordinate is None:
            raise ValueError("Both date and coordinate must be set before calculating")
        return SolarCalculationRequest(
            date=self._date, coordinate=self._coordinate, event_mask=self._event_mask
        )

    def invalidate(self) -> None:
        """Reset every result to absent"""
        self._cache.clear_all()

    def calculate(self) -> None:
        """Populate results for the events selected by the current mask"""
        request = self.request
        longitude_hour = position.longitude_hour(request.coordinate.longitude)

        pipelines = {}
        for direction in Direction:
            pipeline = self._cache.get_pipeline(
                request.day_of_year, longitude_hour, direction
            )
            if pipeline is None:
                pipeline = position.compute_pipeline(
                    request.day_of_year, longitude_hour, direction
                )
                self._cache.set_pipeline(request.day_of_year, longitude_hour, pipeline)
            pipelines[direction] = pipeline

        result = calculate_solar_events(
            request,
            previous=self._cache.get_result(),
            noon_mode=self.config.solar_noon_mode,
            pipelines=pipelines,
        )
        self._cache.set_result(result)

    def get_cache_stats(self) -> Dict[str, int]:
        return self._cache.get_cache_stats()

    @property
    def result(self) -> SolarEventResult:
        return self._cache.get_result()

    @property
    def sunrise(self) -> EventTime:
        return self.result.sunrise

    @property
    def sunset(self) -> EventTime:
        return self.result.sunset

    @property
    def solar_noon(self) -> EventTime:
        return self.result.solar_noon

    @property
    def civil_dawn(self) -> EventTime:
        return self.result.civil_dawn

    @property
    def civil_dusk(self) -> EventTime:
        return self.result.civil_dusk

    @property
    def nautical_dawn(self) -> EventTime:
        return self.result.nautical_dawn

    @property
    def nautical_dusk(self) -> EventTime:
        return self.result.nautical_dusk

    @property
    def astronomical_dawn(self) -> EventTime:
        return self.result.astronomical_dawn

    @property
    def astronomical_dusk(self) -> EventTime:
        return self.result.astronomical_dusk
