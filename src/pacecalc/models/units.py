"""Unit conversion and number formatting utilities."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

from .enums import Unit


class UnitSystem(str, Enum):
    """Unit system for parsing defaults and display."""

    METRIC = "metric"  # kilometers
    IMPERIAL = "imperial"  # miles


# Conversion constants
MILE_METERS = 1609.34
YARD_METERS = 0.9144
KM_PER_MILE = 1.60934
MILE_PER_KM = 1 / KM_PER_MILE

MARATHON_METERS = 42195
HALF_MARATHON_METERS = MARATHON_METERS / 2

_THOUSANDTH = Decimal("0.001")
# Wide enough for every finite float
_CONTEXT = Context(prec=400)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP, context=_CONTEXT))


def to_meters(value: float, unit: Unit) -> float:
    """
    Convert a distance to meters.

    Args:
        value: Distance expressed in ``unit``
        unit: One of the distance units

    Returns:
        Distance in meters

    Raises:
        ValueError: If ``unit`` is not a distance unit
    """
    if unit == Unit.METERS:
        return value
    if unit == Unit.KILOMETERS:
        return value * 1000
    if unit == Unit.MILES:
        return value * MILE_METERS
    if unit == Unit.YARDS:
        return value * YARD_METERS
    raise ValueError(f"Unknown distance unit {unit}")


def to_seconds(first: float, second: float, third: float, unit: Unit) -> float:
    """
    Convert colon separated time fields to seconds.

    The unit names the first field: ``s`` reads only the seconds,
    ``min`` reads minutes:seconds and ``h`` reads hours:minutes:seconds.

    Raises:
        ValueError: If ``unit`` is not a duration unit
    """
    if unit == Unit.SECONDS:
        return first
    if unit == Unit.MINUTES:
        return first * 60 + second
    if unit == Unit.HOURS:
        return first * 3600 + second * 60 + third
    raise ValueError(f"Unknown duration unit {unit}")


def format_number(value: float) -> str:
    """
    Format a number with thousands separators and up to three decimals.

    Examples: 2.5 -> "2.5", 1234.5678 -> "1,234.568", 10.0 -> "10".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    rounded = Decimal(value).quantize(_THOUSANDTH, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_pace(seconds_per_unit: float) -> str:
    """
    Format pace as M:SS.

    Args:
        seconds_per_unit: Pace in seconds per kilometer or mile

    Returns:
        Formatted pace string (e.g., "4:05")
    """
    if not math.isfinite(seconds_per_unit):
        return format_number(seconds_per_unit)
    minutes, seconds = divmod(round_half_up(seconds_per_unit), 60)
    return f"{minutes}:{seconds:02d}"


def duration_parts(total_seconds: float) -> list[tuple[str, str]]:
    """
    Split a duration into its non-zero hour, minute and second components.

    Args:
        total_seconds: Duration in seconds, rounded half up before splitting

    Returns:
        (value, unit) pairs, e.g. [("1", "h"), ("30", "min")] for 5400
    """
    if not math.isfinite(total_seconds):
        return [(format_number(total_seconds), Unit.SECONDS.value)]

    hours, remainder = divmod(round_half_up(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if hours > 0:
        parts.append((str(hours), Unit.HOURS.value))
    if minutes > 0:
        parts.append((str(minutes), Unit.MINUTES.value))
    if seconds > 0:
        parts.append((str(seconds), Unit.SECONDS.value))
    return parts


def format_duration(total_seconds: float) -> str:
    """
    Format a duration as its non-zero hour, minute and second components.

    Examples: 5680 -> "1h 34min 40s", 1500 -> "25min", 0 -> "".
    """
    return " ".join(f"{value}{unit}" for value, unit in duration_parts(total_seconds))
