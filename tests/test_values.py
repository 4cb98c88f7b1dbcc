"""Tests for value models and their rendering."""

import pytest
from pydantic import ValidationError

from pacecalc.models import (
    HALF_MARATHON_METERS,
    KM_PER_MILE,
    MARATHON_METERS,
    MILE_METERS,
    BaseValue,
    Constant,
    Distance,
    Duration,
    ErrorValue,
    Kind,
    Landmark,
    Operator,
    OperatorSymbol,
    Pace,
    PaceView,
    Unit,
    UnitSystem,
)


def test_distance_metric_rendering():
    """Test meters below one kilometer, kilometers above."""
    assert Distance(meters=500).render(UnitSystem.METRIC) == "500m"
    assert Distance(meters=2500).render(UnitSystem.METRIC) == "2.5km"
    assert Distance(meters=10000).render(UnitSystem.METRIC) == "10km"


def test_distance_imperial_rendering():
    """Test whole yards below one mile, miles above."""
    assert Distance(meters=1000).render(UnitSystem.IMPERIAL) == "1,094yd"
    assert Distance(meters=MILE_METERS * 2).render(UnitSystem.IMPERIAL) == "2mi"


def test_distance_render_parts():
    """Test value and unit split."""
    assert Distance(meters=2500).render_parts(UnitSystem.METRIC) == ("2.5", "km")
    assert Distance(meters=100).render_parts(UnitSystem.IMPERIAL) == ("109", "yd")


def test_marathon_is_a_distance():
    """Test marathon magnitude, kind and label."""
    marathon = Distance.marathon()

    assert marathon.meters == MARATHON_METERS
    assert marathon.landmark == Landmark.MARATHON
    assert marathon.kind == Kind.MARATHON
    assert marathon.render(UnitSystem.METRIC) == "M"
    assert marathon.render(UnitSystem.IMPERIAL) == "M"


def test_half_marathon_is_a_distance():
    """Test half marathon magnitude, kind and label."""
    half = Distance.half_marathon()

    assert half.meters == HALF_MARATHON_METERS
    assert half.kind == Kind.HALF_MARATHON
    assert half.render(UnitSystem.IMPERIAL) == "HM"


def test_landmark_distance_ignores_supplied_meters():
    """Test that a landmark always carries its canonical distance."""
    assert Distance(meters=1, landmark=Landmark.MARATHON).meters == MARATHON_METERS
    assert Distance(meters=1, landmark="half_marathon").meters == HALF_MARATHON_METERS


def test_duration_rendering():
    """Test duration rendering is the same in both unit systems."""
    duration = Duration(seconds=5680)

    assert duration.kind == Kind.DURATION
    assert duration.render(UnitSystem.METRIC) == "1h 34min 40s"
    assert duration.render(UnitSystem.IMPERIAL) == "1h 34min 40s"


def test_duration_render_parts():
    """Test splitting a rendered duration into value and unit pairs."""
    duration = Duration(seconds=5680)

    assert duration.render_parts() == [("1", "h"), ("34", "min"), ("40", "s")]
    assert duration.render_parts(UnitSystem.IMPERIAL) == duration.render_parts()
    assert Duration(seconds=0).render_parts() == []
    assert Duration(seconds=0).render() == ""


def test_pace_rendering():
    """Test pace per kilometer and per mile."""
    pace = Pace(seconds_per_km=240)

    assert pace.kind == Kind.PACE
    assert pace.render(UnitSystem.METRIC) == "4:00min/km"
    # 240 * 1.60934 = 386.24 seconds per mile
    assert pace.render(UnitSystem.IMPERIAL) == "6:26min/mi"


def test_speed_rendering():
    """Test speed in kilometers and miles per hour."""
    speed = Pace(seconds_per_km=240, view=PaceView.SPEED)

    assert speed.kind == Kind.SPEED
    assert speed.render(UnitSystem.METRIC) == "15km/h"
    assert speed.units_per_hour(UnitSystem.IMPERIAL) == pytest.approx(15 / KM_PER_MILE)
    assert speed.render(UnitSystem.IMPERIAL) == "9.321mi/h"


def test_speed_from_units_per_hour():
    """Test conversion of km/h and mi/h to seconds per kilometer."""
    assert Pace.from_speed(15, Unit.KILOMETERS_PER_HOUR).seconds_per_km == 240
    assert Pace.from_speed(15, Unit.MILES_PER_HOUR).seconds_per_km == pytest.approx(
        240 / KM_PER_MILE
    )
    with pytest.raises(ValueError):
        Pace.from_speed(15, Unit.KILOMETERS)


def test_pace_reciprocal_swaps_view_only():
    """Test that pace and speed are two views of one quantity."""
    pace = Pace(seconds_per_km=300)
    speed = pace.reciprocal()

    assert speed.view == PaceView.SPEED
    assert speed.seconds_per_km == pace.seconds_per_km
    assert speed.reciprocal() == pace


def test_constant_operator_and_error_rendering():
    """Test the remaining kinds."""
    assert Constant(value=1500).render(UnitSystem.METRIC) == "1,500"
    assert Constant(value=2.5).kind == Kind.CONSTANT
    assert Operator(symbol=OperatorSymbol.FOR).render(UnitSystem.IMPERIAL) == "for"
    assert Operator(symbol="*").symbol == OperatorSymbol.MULTIPLY

    error = ErrorValue(message="xyz")
    assert error.render(UnitSystem.METRIC) == "xyz"
    assert error.is_error
    assert not Constant(value=1).is_error


def test_values_are_immutable():
    """Test that values cannot be changed after construction."""
    distance = Distance(meters=1000)

    with pytest.raises(ValidationError):
        distance.meters = 2000


def test_rendering_does_not_change_value():
    """Test that rendering is free of side effects."""
    pace = Pace(seconds_per_km=255.95)
    pace.render(UnitSystem.IMPERIAL)
    pace.render(UnitSystem.METRIC)

    assert pace == Pace(seconds_per_km=255.95)


def test_base_value_is_abstract():
    """Test that only concrete value kinds can be built."""
    with pytest.raises(TypeError):
        BaseValue()
