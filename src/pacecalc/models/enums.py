"""Enumeration types for calculator values."""

from enum import Enum


class Kind(str, Enum):
    """Tag identifying the kind of a token or result value."""

    ERROR = "error"
    PACE = "pace"
    SPEED = "speed"
    OPERATOR = "operator"
    DURATION = "duration"
    DISTANCE = "distance"
    MARATHON = "marathon"
    HALF_MARATHON = "half_marathon"
    CONSTANT = "constant"


class Unit(str, Enum):
    """Unit labels accepted in input and used for display."""

    # Pace and speed
    MINUTES_PER_KILOMETER = "min/km"
    MINUTES_PER_MILE = "min/mi"
    KILOMETERS_PER_HOUR = "km/h"
    MILES_PER_HOUR = "mi/h"

    # Distance
    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"
    YARDS = "yd"

    # Duration
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"


class OperatorSymbol(str, Enum):
    """Operator tokens."""

    IN = "in"
    FOR = "for"
    AT = "at"
    MULTIPLY = "*"
    ADD = "+"
    # Tokenized but never evaluated
    AT_SIGN = "@"
    SUBTRACT = "-"


class Landmark(str, Enum):
    """Named race distance a Distance value stands for."""

    NONE = "none"
    MARATHON = "marathon"
    HALF_MARATHON = "half_marathon"


class PaceView(str, Enum):
    """How a seconds-per-kilometer quantity is presented."""

    PACE = "pace"
    SPEED = "speed"
