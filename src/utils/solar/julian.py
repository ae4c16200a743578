"""
Julian Day Number conversions for the proleptic Gregorian calendar
"""

import datetime as dt
from typing import Union

import pytz


def julian_day_number_from_date(date: Union[dt.date, dt.datetime]) -> int:
    """Julian Day Number of the calendar day of `date` (time of day ignored)"""
    a = (14 - date.month) // 12
    y = date.year + 4800 - a
    m = date.month + (12 * a) - 3
    return (
        date.day
        + ((153 * m) + 2) // 5
        + (365 * y)
        + (y // 4)
        - (y // 100)
        + (y // 400)
        - 32045
    )


def gregorian_date_from_julian_day_number(julian_day_number: int) -> dt.datetime:
    """Noon UTC on the Gregorian day with the given Julian Day Number"""
    j = int(julian_day_number) + 32044
    g = j // 146097
    dg = j % 146097
    c = (dg // 36524 + 1) * 3 // 4
    dc = dg - c * 36524
    b = dc // 1461
    db = dc % 1461
    a = (db // 365 + 1) * 3 // 4
    da = db - a * 365
    y = g * 400 + c * 100 + b * 4 + a
    m = (da * 5 + 308) // 153 - 2
    d = da - (m + 4) * 153 // 5 + 122

    year = y - 4800 + (m + 2) // 12
    month = (m + 2) % 12 + 1
    day = d + 1
    return dt.datetime(year, month, day, 12, 0, 0, tzinfo=pytz.utc)
