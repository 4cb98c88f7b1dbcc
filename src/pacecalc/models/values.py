"""Value models for calculator tokens and results.

Every value stores a single quantity in a fixed internal unit and renders
itself against a unit system. Values are immutable.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .enums import Kind, Landmark, OperatorSymbol, PaceView, Unit
from .units import (
    HALF_MARATHON_METERS,
    KM_PER_MILE,
    MARATHON_METERS,
    MILE_METERS,
    YARD_METERS,
    UnitSystem,
    duration_parts,
    format_number,
    format_pace,
    round_half_up,
)

_LANDMARK_METERS = {
    Landmark.MARATHON: MARATHON_METERS,
    Landmark.HALF_MARATHON: HALF_MARATHON_METERS,
}
_LANDMARK_LABELS = {
    Landmark.MARATHON: "M",
    Landmark.HALF_MARATHON: "HM",
}


class BaseValue(BaseModel, ABC):
    """Common base for all token and result values."""

    model_config = {"frozen": True}

    @property
    @abstractmethod
    def kind(self) -> Kind:
        """Tag identifying the kind of value."""

    @abstractmethod
    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        """Display string in the given unit system."""

    @property
    def is_error(self) -> bool:
        return self.kind == Kind.ERROR


class ErrorValue(BaseValue):
    """A lexical or semantic failure."""

    message: str = Field(description="Unmatched input or failure description")

    @property
    def kind(self) -> Kind:
        return Kind.ERROR

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        return self.message


class Operator(BaseValue):
    """An operator token."""

    symbol: OperatorSymbol = Field(description="Operator symbol as typed")

    @property
    def kind(self) -> Kind:
        return Kind.OPERATOR

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        return self.symbol.value


class Constant(BaseValue):
    """A dimensionless number used as a multiplier or addend."""

    value: float

    @property
    def kind(self) -> Kind:
        return Kind.CONSTANT

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        return format_number(self.value)


class Duration(BaseValue):
    """An elapsed time, stored in seconds."""

    seconds: float = Field(description="Elapsed time in seconds")

    @property
    def kind(self) -> Kind:
        return Kind.DURATION

    def render_parts(self, unit_system: UnitSystem = UnitSystem.METRIC) -> list[tuple[str, str]]:
        """Split the rendered duration into (value, unit) pairs, largest unit first."""
        return duration_parts(self.seconds)

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        return " ".join(f"{value}{unit}" for value, unit in self.render_parts(unit_system))


class Distance(BaseValue):
    """
    A length, stored in meters.

    Marathon and half marathon are distances with a landmark tag. Their
    magnitude is fixed: whatever meters are supplied, the canonical race
    distance is stored.
    """

    meters: float = Field(description="Length in meters")
    landmark: Landmark = Field(
        default=Landmark.NONE,
        description="Named race distance this value stands for",
    )

    @model_validator(mode="before")
    @classmethod
    def pin_landmark_meters(cls, data: Any) -> Any:
        """Replace the magnitude of a landmark distance with its canonical value."""
        if isinstance(data, dict) and data.get("landmark") is not None:
            landmark = Landmark(data["landmark"])
            if landmark in _LANDMARK_METERS:
                data = {**data, "meters": _LANDMARK_METERS[landmark]}
        return data

    @classmethod
    def marathon(cls) -> "Distance":
        return cls(meters=MARATHON_METERS, landmark=Landmark.MARATHON)

    @classmethod
    def half_marathon(cls) -> "Distance":
        return cls(meters=HALF_MARATHON_METERS, landmark=Landmark.HALF_MARATHON)

    @property
    def kind(self) -> Kind:
        if self.landmark == Landmark.MARATHON:
            return Kind.MARATHON
        if self.landmark == Landmark.HALF_MARATHON:
            return Kind.HALF_MARATHON
        return Kind.DISTANCE

    @property
    def yards(self) -> float:
        return self.meters / YARD_METERS

    def render_parts(self, unit_system: UnitSystem = UnitSystem.METRIC) -> tuple[str, str]:
        """
        Split the rendered distance into value and unit label.

        Metric shows meters below one kilometer, imperial shows whole yards
        below one mile.
        """
        if unit_system == UnitSystem.IMPERIAL:
            if self.meters < MILE_METERS:
                return format_number(round_half_up(self.yards)), Unit.YARDS.value
            return format_number(self.meters / MILE_METERS), Unit.MILES.value

        if self.meters < 1000:
            return format_number(self.meters), Unit.METERS.value
        return format_number(self.meters / 1000), Unit.KILOMETERS.value

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        if self.landmark in _LANDMARK_LABELS:
            return _LANDMARK_LABELS[self.landmark]
        value_string, unit_string = self.render_parts(unit_system)
        return f"{value_string}{unit_string}"


class Pace(BaseValue):
    """
    Time needed per distance, stored in seconds per kilometer.

    Speed is the reciprocal presentation of the same quantity; ``view``
    selects which one the value stands for.
    """

    seconds_per_km: float = Field(description="Seconds needed per kilometer")
    view: PaceView = Field(default=PaceView.PACE, description="Pace or speed presentation")

    @classmethod
    def from_speed(cls, value: float, unit: Unit) -> "Pace":
        """
        Build a speed-view value from distance units per hour.

        Raises:
            ValueError: If ``unit`` is not a speed unit
        """
        if unit == Unit.KILOMETERS_PER_HOUR:
            seconds_per_km = 60 / value * 60
        elif unit == Unit.MILES_PER_HOUR:
            seconds_per_km = 60 / value * 60 / KM_PER_MILE
        else:
            raise ValueError(f"Unknown speed unit {unit}")
        return cls(seconds_per_km=seconds_per_km, view=PaceView.SPEED)

    @property
    def kind(self) -> Kind:
        return Kind.SPEED if self.view == PaceView.SPEED else Kind.PACE

    def reciprocal(self) -> "Pace":
        """Return the same quantity in the other presentation."""
        view = PaceView.PACE if self.view == PaceView.SPEED else PaceView.SPEED
        return Pace(seconds_per_km=self.seconds_per_km, view=view)

    def seconds_per_unit(self, unit_system: UnitSystem = UnitSystem.METRIC) -> float:
        if unit_system == UnitSystem.IMPERIAL:
            return self.seconds_per_km * KM_PER_MILE
        return self.seconds_per_km

    def units_per_hour(self, unit_system: UnitSystem = UnitSystem.METRIC) -> float:
        seconds = self.seconds_per_unit(unit_system)
        if seconds == 0:
            return float("inf")
        return 3600 / seconds

    def unit(self, unit_system: UnitSystem = UnitSystem.METRIC) -> Unit:
        imperial = unit_system == UnitSystem.IMPERIAL
        if self.view == PaceView.SPEED:
            return Unit.MILES_PER_HOUR if imperial else Unit.KILOMETERS_PER_HOUR
        return Unit.MINUTES_PER_MILE if imperial else Unit.MINUTES_PER_KILOMETER

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        if self.view == PaceView.SPEED:
            number = format_number(self.units_per_hour(unit_system))
        else:
            number = format_pace(self.seconds_per_unit(unit_system))
        return f"{number}{self.unit(unit_system).value}"


Value = ErrorValue | Operator | Constant | Duration | Distance | Pace
