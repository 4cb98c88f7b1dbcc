"""Reduce a token sequence to a single value."""

import logging
import math
from collections.abc import Callable, Sequence

from .models import (
    Constant,
    Distance,
    Duration,
    ErrorValue,
    Kind,
    Operator,
    OperatorSymbol,
    Pace,
    Value,
    round_half_up,
)

logger = logging.getLogger(__name__)

INVALID_OPERATION = "Invalid operation"
UNKNOWN_OPERATION = "Unknown operation"
DIVISION_BY_ZERO = "Division by zero"
OUT_OF_RANGE = "Number out of range"

# Operators resolved before anything else, leftmost first
RELATIONAL_OPERATORS = frozenset({OperatorSymbol.FOR, OperatorSymbol.AT, OperatorSymbol.IN})

# Kinds that take part in arithmetic as another kind
_OPERAND_CLASS = {
    Kind.MARATHON: Kind.DISTANCE,
    Kind.HALF_MARATHON: Kind.DISTANCE,
    Kind.SPEED: Kind.PACE,
}


def distance_at_pace(distance: Distance, pace: Pace) -> Duration:
    """Time needed to cover a distance at a pace, rounded to whole seconds."""
    return Duration(seconds=round_half_up(pace.seconds_per_km * (distance.meters / 1000)))


def duration_at_pace(duration: Duration, pace: Pace) -> Distance:
    """Distance covered in a duration at a pace."""
    return Distance(meters=duration.seconds / pace.seconds_per_km * 1000)


def distance_in_duration(distance: Distance, duration: Duration) -> Pace:
    """Pace needed to cover a distance in a duration."""
    return Pace(seconds_per_km=duration.seconds / (distance.meters / 1000))


def _distance_for_pace(distance: Distance, pace: Pace) -> Distance:
    # Carries the seconds of distance_at_pace tagged as a distance.
    return Distance(meters=round_half_up(pace.seconds_per_km * (distance.meters / 1000)))


def _sum_durations(left: Duration, right: Duration) -> Distance:
    # Carries the summed seconds tagged as a distance.
    return Distance(meters=left.seconds + right.seconds)


Rule = Callable[[Value, Value], Value]

RULES: dict[tuple[Kind, OperatorSymbol, Kind], Rule] = {
    (Kind.PACE, OperatorSymbol.FOR, Kind.DURATION): lambda p, d: duration_at_pace(d, p),
    (Kind.PACE, OperatorSymbol.FOR, Kind.DISTANCE): lambda p, d: distance_at_pace(d, p),
    (Kind.DISTANCE, OperatorSymbol.FOR, Kind.PACE): _distance_for_pace,
    (Kind.DISTANCE, OperatorSymbol.AT, Kind.PACE): distance_at_pace,
    (Kind.DURATION, OperatorSymbol.AT, Kind.PACE): duration_at_pace,
    (Kind.DISTANCE, OperatorSymbol.IN, Kind.DURATION): distance_in_duration,
    (Kind.DISTANCE, OperatorSymbol.MULTIPLY, Kind.CONSTANT): lambda d, c: Distance(
        meters=d.meters * c.value
    ),
    (Kind.CONSTANT, OperatorSymbol.MULTIPLY, Kind.DISTANCE): lambda c, d: Distance(
        meters=c.value * d.meters
    ),
    (Kind.DURATION, OperatorSymbol.MULTIPLY, Kind.CONSTANT): lambda d, c: Duration(
        seconds=d.seconds * c.value
    ),
    (Kind.CONSTANT, OperatorSymbol.MULTIPLY, Kind.DURATION): lambda c, d: Duration(
        seconds=c.value * d.seconds
    ),
    (Kind.CONSTANT, OperatorSymbol.MULTIPLY, Kind.CONSTANT): lambda a, b: Constant(
        value=a.value * b.value
    ),
    (Kind.DISTANCE, OperatorSymbol.ADD, Kind.DISTANCE): lambda a, b: Distance(
        meters=a.meters + b.meters
    ),
    (Kind.DURATION, OperatorSymbol.ADD, Kind.DURATION): _sum_durations,
    (Kind.CONSTANT, OperatorSymbol.ADD, Kind.CONSTANT): lambda a, b: Constant(
        value=a.value + b.value
    ),
}


def is_finite(value: Value) -> bool:
    """Whether every stored quantity of a value is a finite number."""
    return all(
        math.isfinite(field) for field in value.model_dump().values() if isinstance(field, float)
    )


def operand_class(value: Value) -> Kind:
    """Kind a value is treated as when looking up a rule."""
    return _OPERAND_CLASS.get(value.kind, value.kind)


def apply_operation(left: Value, operator: Operator, right: Value) -> Value:
    """
    Apply one operator to its operands.

    Returns:
        The resulting value, or an ErrorValue when no rule covers the operand
        kinds or the arithmetic fails
    """
    rule = RULES.get((operand_class(left), operator.symbol, operand_class(right)))
    if rule is None:
        logger.debug(f"No rule for {left.kind.value} {operator.symbol.value} {right.kind.value}")
        return ErrorValue(message=UNKNOWN_OPERATION)

    try:
        result = rule(left, right)
    except ZeroDivisionError:
        logger.debug(f"Division by zero in {left!r} {operator.symbol.value} {right!r}")
        return ErrorValue(message=DIVISION_BY_ZERO)
    except ArithmeticError as e:
        logger.debug(f"Overflow in {left!r} {operator.symbol.value} {right!r}: {e!r}")
        return ErrorValue(message=OUT_OF_RANGE)

    if not is_finite(result):
        logger.debug(f"Result out of range in {left!r} {operator.symbol.value} {right!r}")
        return ErrorValue(message=OUT_OF_RANGE)
    return result


def next_operator_index(parts: Sequence[Value]) -> int | None:
    """
    Pick the operator to resolve next.

    The leftmost of for/at/in wins, then the leftmost multiplication, then
    whichever operator comes first.

    Returns:
        Index of the operator in ``parts``, or None if there is none
    """
    operators = [(index, part) for index, part in enumerate(parts) if isinstance(part, Operator)]
    if not operators:
        return None

    for index, operator in operators:
        if operator.symbol in RELATIONAL_OPERATORS:
            return index
    for index, operator in operators:
        if operator.symbol == OperatorSymbol.MULTIPLY:
            return index
    return operators[0][0]


def calculate(parts: Sequence[Value]) -> Value | None:
    """
    Reduce tokens to a single value.

    A lone pace or speed reduces to its reciprocal. Fewer than three tokens
    otherwise have no result.

    Args:
        parts: Tokens in input order, free of errors

    Returns:
        The result value, an ErrorValue on failure, or None if there is
        nothing to compute
    """
    if len(parts) == 1 and isinstance(parts[0], Pace):
        return parts[0].reciprocal()

    if len(parts) < 3:
        return None

    remaining = list(parts)
    while len(remaining) > 1:
        index = next_operator_index(remaining)
        if index is None or index == 0 or index == len(remaining) - 1:
            logger.debug(f"Missing operator or operand in {len(remaining)} remaining tokens")
            return ErrorValue(message=INVALID_OPERATION)

        left, operator, right = remaining[index - 1 : index + 2]
        result = apply_operation(left, operator, right)
        logger.debug(
            f"Reduced {left.kind.value} {operator.symbol.value} {right.kind.value} "
            f"to {result.kind.value}"
        )
        if result.kind == Kind.ERROR:
            return result

        remaining[index - 1 : index + 2] = [result]

    return remaining[0]
