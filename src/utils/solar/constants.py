"""
Constants for sunrise/sunset calculations
"""

from models.events import Direction, EventClass


class SolarConstants:
    """Constants used throughout the solar calculation package"""

    # Zenith angle (degrees from straight up) that defines each event class
    ZENITH_OFFICIAL = 90.8333
    ZENITH_CIVIL = 96.0
    ZENITH_NAUTICAL = 102.0
    ZENITH_ASTRONOMICAL = 108.0

    ZENITHS = {
        EventClass.OFFICIAL: ZENITH_OFFICIAL,
        EventClass.CIVIL: ZENITH_CIVIL,
        EventClass.NAUTICAL: ZENITH_NAUTICAL,
        EventClass.ASTRONOMICAL: ZENITH_ASTRONOMICAL,
    }

    # Local time (decimal hours) the approximation starts from
    BASE_TIMES = {
        Direction.RISING: 6.0,
        Direction.SETTING: 18.0,
    }

    DEGREES_PER_HOUR = 15.0

    # Mean anomaly: M = (0.9856 * t) - 3.289
    MEAN_ANOMALY_RATE = 0.9856
    MEAN_ANOMALY_OFFSET = 3.289

    # True longitude: L = M + 1.916 sin(M) + 0.020 sin(2M) + 282.634
    EQUATION_OF_CENTER_1 = 1.916
    EQUATION_OF_CENTER_2 = 0.020
    LONGITUDE_OF_PERIHELION = 282.634

    # RA = atan(0.91764 * tan(L)), sinDec = 0.39782 * sin(L)
    RIGHT_ASCENSION_FACTOR = 0.91764
    SIN_OBLIQUITY = 0.39782

    # T = H + RA - (0.06571 * t) - 6.622
    SIDEREAL_RATE = 0.06571
    LOCAL_MEAN_TIME_OFFSET = 6.622
