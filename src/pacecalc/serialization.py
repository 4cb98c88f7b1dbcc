"""Convert values and calculations to and from plain data.

Plain data is what a store of saved results persists: each value becomes
``{"kind": <tag>, "data": {<field>: <number or string>}}``.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .models import (
    Calculation,
    Constant,
    Distance,
    Duration,
    ErrorValue,
    Kind,
    Operator,
    Pace,
    PaceView,
    Value,
)

logger = logging.getLogger(__name__)


def to_plain(value: Value) -> dict[str, Any]:
    """
    Convert a value to plain data.

    Args:
        value: Any token or result value

    Returns:
        Dict with the kind tag and the single stored field
    """
    if isinstance(value, Distance):
        data: dict[str, Any] = {"meters": value.meters}
    elif isinstance(value, Duration):
        data = {"seconds": value.seconds}
    elif isinstance(value, Pace):
        data = {"seconds_per_km": value.seconds_per_km}
    elif isinstance(value, Constant):
        data = {"value": value.value}
    elif isinstance(value, Operator):
        data = {"symbol": value.symbol.value}
    else:
        data = {"message": value.message}
    return {"kind": value.kind.value, "data": data}


def from_plain(kind: str, data: dict[str, Any]) -> Value:
    """
    Rebuild a value from its kind tag and stored field.

    Marathon and half marathon ignore any stored meters. An unknown tag or
    a payload missing its field or holding a bad one produces an ErrorValue
    instead of raising.
    """
    try:
        tag = Kind(kind)
    except ValueError:
        logger.warning(f"Cannot rebuild value of unknown kind {kind!r}")
        return ErrorValue(message=f"Unknown type {kind}")

    try:
        return _build(tag, data)
    except (KeyError, TypeError, ValidationError) as e:
        logger.warning(f"Cannot rebuild {tag.value} from {data!r}: {e}")
        return ErrorValue(message=f"Invalid {tag.value} data")


def _build(tag: Kind, data: dict[str, Any]) -> Value:
    if tag == Kind.PACE:
        return Pace(seconds_per_km=data["seconds_per_km"])
    if tag == Kind.SPEED:
        return Pace(seconds_per_km=data["seconds_per_km"], view=PaceView.SPEED)
    if tag == Kind.DURATION:
        return Duration(seconds=data["seconds"])
    if tag == Kind.DISTANCE:
        return Distance(meters=data["meters"])
    if tag == Kind.MARATHON:
        return Distance.marathon()
    if tag == Kind.HALF_MARATHON:
        return Distance.half_marathon()
    if tag == Kind.CONSTANT:
        return Constant(value=data["value"])
    if tag == Kind.OPERATOR:
        return Operator(symbol=data["symbol"])
    return ErrorValue(message=data["message"])


def value_from_plain(plain: dict[str, Any]) -> Value:
    """Rebuild a value from the dict produced by ``to_plain``."""
    return from_plain(plain.get("kind", ""), plain.get("data", {}))


def calculation_to_plain(calculation: Calculation) -> dict[str, Any]:
    """
    Convert a calculation to plain data.

    Returns:
        Dict with the serialized parts and the result (None if absent)
    """
    return {
        "parts": [to_plain(part) for part in calculation.parts],
        "result": to_plain(calculation.result) if calculation.result is not None else None,
    }


def calculation_from_plain(plain: dict[str, Any]) -> Calculation:
    """Rebuild a calculation from the dict produced by ``calculation_to_plain``."""
    result = plain.get("result")
    return Calculation(
        parts=tuple(value_from_plain(part) for part in plain.get("parts", [])),
        result=value_from_plain(result) if result is not None else None,
    )
