"""
Enumerations describing which solar events are calculated
"""

import enum
import re
from typing import List, Union


class EventClass(enum.IntFlag):
    """Bitwise-combinable set of solar event classes"""

    OFFICIAL = 1
    CIVIL = 2
    NAUTICAL = 4
    ASTRONOMICAL = 8
    ALL = OFFICIAL | CIVIL | NAUTICAL | ASTRONOMICAL


# Calculation order for expanded masks
EVENT_CLASS_ORDER = (
    EventClass.OFFICIAL,
    EventClass.CIVIL,
    EventClass.NAUTICAL,
    EventClass.ASTRONOMICAL,
)


class Direction(enum.Enum):
    """Whether the sun is crossing the zenith angle upwards or downwards"""

    RISING = "rising"
    SETTING = "setting"


class PolarCondition(str, enum.Enum):
    """Marker stored in place of a time when the event does not happen that day"""

    NEVER_RISES = "never_rises"
    NEVER_SETS = "never_sets"


def expand_event_mask(mask: EventClass) -> List[EventClass]:
    """Expand a mask (including ALL) into the individual classes to compute"""
    mask = EventClass(mask)
    if (mask & EventClass.ALL) == EventClass.ALL:
        return list(EVENT_CLASS_ORDER)
    return [event_class for event_class in EVENT_CLASS_ORDER if event_class & mask]


def parse_event_mask(value: Union[EventClass, int, str]) -> EventClass:
    """
    Parse an event mask from an EventClass, an integer, or a string.

    Strings may be a number ("3") or member names joined with "|", "," or
    whitespace ("civil|nautical"). Names are case-insensitive.
    """
    if isinstance(value, EventClass):
        return value

    if isinstance(value, bool):
        raise ValueError(f"Invalid event mask: {value!r}")

    if isinstance(value, int):
        if value < 0 or value > EventClass.ALL:
            raise ValueError(f"Event mask out of range: {value}")
        return EventClass(value)

    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return parse_event_mask(int(text))

        names = [name for name in re.split(r"[|,\s]+", text) if name]
        if not names:
            raise ValueError(f"Empty event mask: {value!r}")

        mask = EventClass(0)
        for name in names:
            try:
                mask |= EventClass[name.upper()]
            except KeyError:
                raise ValueError(f"Unknown event class: {name!r}") from None
        return mask

    raise ValueError(f"Invalid event mask: {value!r}")
