"""Value models and unit tables for the pace calculator."""

from .enums import Kind, Landmark, OperatorSymbol, PaceView, Unit
from .units import (
    HALF_MARATHON_METERS,
    KM_PER_MILE,
    MARATHON_METERS,
    MILE_METERS,
    MILE_PER_KM,
    YARD_METERS,
    UnitSystem,
    duration_parts,
    format_duration,
    format_number,
    format_pace,
    round_half_up,
    to_meters,
    to_seconds,
)
from .calculation import Calculation
from .values import (
    BaseValue,
    Constant,
    Distance,
    Duration,
    ErrorValue,
    Operator,
    Pace,
    Value,
)

__all__ = [
    # Values
    "Calculation",
    "BaseValue",
    "Constant",
    "Distance",
    "Duration",
    "ErrorValue",
    "Operator",
    "Pace",
    "Value",
    # Enums
    "Kind",
    "Landmark",
    "OperatorSymbol",
    "PaceView",
    "Unit",
    # Units
    "UnitSystem",
    "MILE_METERS",
    "YARD_METERS",
    "KM_PER_MILE",
    "MILE_PER_KM",
    "MARATHON_METERS",
    "HALF_MARATHON_METERS",
    "to_meters",
    "to_seconds",
    "round_half_up",
    "format_number",
    "format_pace",
    "format_duration",
    "duration_parts",
]
