"""Split calculator input into value and operator tokens.

Tokens are not separated by delimiters: whitespace is dropped and each
position is offered to the matchers in ``MATCHERS`` order. Several matchers
accept overlapping prefixes ("4" may start a pace, a duration, a distance or
a constant), so the order decides which reading wins.
"""

import logging
import math
import re
from collections.abc import Callable
from typing import NamedTuple

from .evaluator import calculate
from .models import (
    KM_PER_MILE,
    Calculation,
    Constant,
    Distance,
    Duration,
    ErrorValue,
    Operator,
    OperatorSymbol,
    Pace,
    Unit,
    UnitSystem,
    Value,
    to_meters,
    to_seconds,
)

logger = logging.getLogger(__name__)


class Match(NamedTuple):
    """A matched token and the number of input characters it consumed."""

    value: Value
    consumed: int


Matcher = Callable[[str, UnitSystem], Match | None]

_NUMBER = r"\d+(?:\.\d+)?"
_OPERATOR = r"\*|@|at|for|in|\+|-"

_PACE_RE = re.compile(r"(\d+)(:\d+)?(min/km|min/mi|h|min|s)?")
_SPEED_RE = re.compile(rf"({_NUMBER})(km/h|mi/h)")
_DURATION_RE = re.compile(r"(?:(\d+)h)?(?:(\d+)min)?(?:(\d+)s)?")
_CLOCK_DURATION_RE = re.compile(r"(\d+)(:\d+)?(:\d+)?(h|min|s)")
_OPERATOR_RE = re.compile(_OPERATOR)
# "mi" before "m" so miles are not read as meters
_DISTANCE_RE = re.compile(rf"({_NUMBER})(mi|m|km|yd)")
_MARATHON_RE = re.compile(r"M", re.IGNORECASE)
_HALF_MARATHON_RE = re.compile(r"HM", re.IGNORECASE)
_CONSTANT_RE = re.compile(rf"({_NUMBER})(?:\Z|(?={_OPERATOR}))")


def _colon_field(group: str | None) -> float:
    # Digit runs too long for a float read as infinity
    return float(group[1:]) if group else 0.0


def match_pace(text: str, unit_system: UnitSystem) -> Match | None:
    """
    Match ``M[:SS][unit]``.

    A bare number with neither seconds nor unit is not a pace. Without a unit
    the minutes are per kilometer or per mile depending on ``unit_system``.
    Any unit other than min/km or min/mi rejects the match.
    """
    match = _PACE_RE.match(text)
    if not match:
        return None

    minutes, seconds, unit_label = match.groups()
    if seconds is None and unit_label is None:
        return None

    if unit_label is not None:
        unit = Unit(unit_label)
    elif unit_system == UnitSystem.IMPERIAL:
        unit = Unit.MINUTES_PER_MILE
    else:
        unit = Unit.MINUTES_PER_KILOMETER

    if unit not in (Unit.MINUTES_PER_KILOMETER, Unit.MINUTES_PER_MILE):
        return None

    seconds_per_km = float(minutes) * 60 + _colon_field(seconds)
    if not math.isfinite(seconds_per_km):
        return None
    if unit == Unit.MINUTES_PER_MILE:
        seconds_per_km = seconds_per_km / KM_PER_MILE

    return Match(Pace(seconds_per_km=seconds_per_km), match.end())


def match_speed(text: str, unit_system: UnitSystem) -> Match | None:
    """Match ``N(km/h|mi/h)``; a zero or out of range speed is rejected."""
    match = _SPEED_RE.match(text)
    if not match:
        return None

    value = float(match.group(1))
    if value == 0 or not math.isfinite(value):
        return None

    pace = Pace.from_speed(value, Unit(match.group(2)))
    if not math.isfinite(pace.seconds_per_km):
        return None
    return Match(pace, match.end())


def match_duration(text: str, unit_system: UnitSystem) -> Match | None:
    """
    Match ``[Nh][Nmin][Ns]`` or ``N[:N][:N](h|min|s)``.

    In the colon form the unit names the first field, so ``1:30h`` is an
    hour and a half and ``4:05min`` is four minutes five seconds.
    """
    match = _DURATION_RE.match(text)
    if match and match.group(0):
        hours, minutes, seconds = (float(group or 0) for group in match.groups())
        total = hours * 3600 + minutes * 60 + seconds
        if not math.isfinite(total):
            return None
        return Match(Duration(seconds=total), match.end())

    match = _CLOCK_DURATION_RE.match(text)
    if match:
        first, second, third, unit_label = match.groups()
        seconds = to_seconds(
            float(first), _colon_field(second), _colon_field(third), Unit(unit_label)
        )
        if not math.isfinite(seconds):
            return None
        return Match(Duration(seconds=seconds), match.end())

    return None


def match_operator(text: str, unit_system: UnitSystem) -> Match | None:
    match = _OPERATOR_RE.match(text)
    if not match:
        return None
    return Match(Operator(symbol=OperatorSymbol(match.group(0))), match.end())


def match_distance(text: str, unit_system: UnitSystem) -> Match | None:
    match = _DISTANCE_RE.match(text)
    if not match:
        return None
    meters = to_meters(float(match.group(1)), Unit(match.group(2)))
    if not math.isfinite(meters):
        return None
    return Match(Distance(meters=meters), match.end())


def match_marathon(text: str, unit_system: UnitSystem) -> Match | None:
    match = _MARATHON_RE.match(text)
    if not match:
        return None
    return Match(Distance.marathon(), match.end())


def match_half_marathon(text: str, unit_system: UnitSystem) -> Match | None:
    match = _HALF_MARATHON_RE.match(text)
    if not match:
        return None
    return Match(Distance.half_marathon(), match.end())


def match_constant(text: str, unit_system: UnitSystem) -> Match | None:
    """
    Match a bare number at the end of input or right before an operator.

    A number followed by anything else (typically a unit that failed to
    parse) is left unmatched so it surfaces as an error.
    """
    match = _CONSTANT_RE.match(text)
    if not match:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return Match(Constant(value=value), match.end())


MATCHERS: tuple[Matcher, ...] = (
    match_pace,
    match_speed,
    match_duration,
    match_operator,
    match_distance,
    match_marathon,
    match_half_marathon,
    match_constant,
)


def match_token(text: str, unit_system: UnitSystem) -> Match | None:
    """Return the first match in ``MATCHERS`` order that consumes input."""
    for matcher in MATCHERS:
        match = matcher(text, unit_system)
        if match is not None and match.consumed > 0:
            return match
    return None


def sanitize(text: str) -> str:
    """Remove all whitespace."""
    return "".join(text.split())


def tokenize(text: str, unit_system: UnitSystem = UnitSystem.METRIC) -> Calculation:
    """
    Tokenize an expression and evaluate it.

    Args:
        text: Raw expression, e.g. "5km in 25min"
        unit_system: Default unit for unlabeled paces

    Returns:
        Calculation with the tokens and, unless tokenizing failed, the result
    """
    remaining = sanitize(text)
    parts: list[Value] = []

    while remaining:
        match = match_token(remaining, unit_system)
        if match is None:
            logger.debug(f"No token matches {remaining!r}")
            parts.append(ErrorValue(message=remaining))
            return Calculation(parts=tuple(parts))

        logger.debug(f"Matched {match.value.kind.value} from {remaining[: match.consumed]!r}")
        parts.append(match.value)
        remaining = remaining[match.consumed :]

    return Calculation(parts=tuple(parts), result=calculate(parts))
