"""
Tests for event enumerations, requests and results
"""

import datetime as dt

import pytest
import pytz
from pydantic import ValidationError

from models import (
    Coordinate,
    EventClass,
    PolarCondition,
    SolarCalculationRequest,
    SolarEventResult,
    expand_event_mask,
    parse_event_mask,
)


class TestEventMask:
    """Parsing and expansion of event masks"""

    def test_all_combines_every_class(self):
        assert EventClass.ALL == (
            EventClass.OFFICIAL
            | EventClass.CIVIL
            | EventClass.NAUTICAL
            | EventClass.ASTRONOMICAL
        )
        assert int(EventClass.ALL) == 15

    def test_expand_all(self):
        assert expand_event_mask(EventClass.ALL) == [
            EventClass.OFFICIAL,
            EventClass.CIVIL,
            EventClass.NAUTICAL,
            EventClass.ASTRONOMICAL,
        ]

    def test_expand_subset_keeps_order(self):
        mask = EventClass.ASTRONOMICAL | EventClass.CIVIL
        assert expand_event_mask(mask) == [EventClass.CIVIL, EventClass.ASTRONOMICAL]

    def test_expand_empty(self):
        assert expand_event_mask(EventClass(0)) == []

    @pytest.mark.parametrize(
        "value, expected",
        [
            (EventClass.CIVIL, EventClass.CIVIL),
            (3, EventClass.OFFICIAL | EventClass.CIVIL),
            ("8", EventClass.ASTRONOMICAL),
            ("all", EventClass.ALL),
            ("Official|civil", EventClass.OFFICIAL | EventClass.CIVIL),
            ("nautical, astronomical", EventClass.NAUTICAL | EventClass.ASTRONOMICAL),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_event_mask(value) == expected

    @pytest.mark.parametrize("value", [16, -1, "dusk", "", True, 2.0, None])
    def test_parse_rejects(self, value):
        with pytest.raises(ValueError):
            parse_event_mask(value)


class TestRequest:
    """Coordinate and request validation"""

    def test_coordinate_bounds(self):
        Coordinate(latitude=-90.0, longitude=180.0)
        with pytest.raises(ValidationError):
            Coordinate(latitude=-90.5, longitude=0.0)
        with pytest.raises(ValidationError):
            Coordinate(latitude=0.0, longitude=-181.0)

    def test_request_is_immutable(self):
        request = SolarCalculationRequest(
            date=dt.date(2024, 1, 1), coordinate={"latitude": 1.0, "longitude": 2.0}
        )
        with pytest.raises(ValidationError):
            request.event_mask = EventClass.CIVIL

    def test_default_mask(self):
        request = SolarCalculationRequest(
            date=dt.date(2024, 1, 1), coordinate=Coordinate(latitude=0, longitude=0)
        )
        assert request.event_mask == EventClass.ALL

    @pytest.mark.parametrize(
        "date, expected",
        [
            (dt.date(2024, 1, 1), 1),
            (dt.date(2024, 6, 20), 172),
            (dt.date(2023, 12, 31), 365),
            (dt.date(2024, 12, 31), 366),
        ],
    )
    def test_day_of_year(self, date, expected):
        request = SolarCalculationRequest(
            date=date, coordinate=Coordinate(latitude=0, longitude=0)
        )
        assert request.day_of_year == expected

    def test_datetime_keeps_local_calendar_day(self):
        local = pytz.timezone("Asia/Tokyo").localize(dt.datetime(2024, 6, 21, 1, 0))
        request = SolarCalculationRequest(
            date=local, coordinate=Coordinate(latitude=35.7, longitude=139.7)
        )
        assert request.calendar_day == dt.date(2024, 6, 21)
        assert request.day_of_year == 173


class TestResult:
    """Result helpers"""

    def test_empty(self):
        assert SolarEventResult().is_empty()
        assert not SolarEventResult(sunset=PolarCondition.NEVER_SETS).is_empty()

    def test_as_dict_order(self):
        assert list(SolarEventResult().as_dict()) == [
            "astronomical_dawn",
            "nautical_dawn",
            "civil_dawn",
            "sunrise",
            "solar_noon",
            "sunset",
            "civil_dusk",
            "nautical_dusk",
            "astronomical_dusk",
        ]

    def test_localized(self):
        result = SolarEventResult(
            sunrise=dt.datetime(2024, 6, 20, 12, 48, tzinfo=pytz.utc),
            sunset=PolarCondition.NEVER_SETS,
        )
        localized = result.localized("America/Los_Angeles")

        assert localized["sunrise"].strftime("%Y-%m-%d %H:%M %Z") == "2024-06-20 05:48 PDT"
        assert localized["sunset"] is PolarCondition.NEVER_SETS
        assert localized["civil_dawn"] is None
