"""Running pace, speed, distance and duration calculator."""

from .evaluator import calculate
from .models import (
    Calculation,
    Constant,
    Distance,
    Duration,
    ErrorValue,
    Kind,
    Operator,
    OperatorSymbol,
    Pace,
    PaceView,
    UnitSystem,
    Value,
)
from .serialization import (
    calculation_from_plain,
    calculation_to_plain,
    from_plain,
    to_plain,
)
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "tokenize",
    "calculate",
    # Values
    "Calculation",
    "Constant",
    "Distance",
    "Duration",
    "ErrorValue",
    "Operator",
    "Pace",
    "Value",
    # Enums
    "Kind",
    "OperatorSymbol",
    "PaceView",
    "UnitSystem",
    # Serialization
    "to_plain",
    "from_plain",
    "calculation_to_plain",
    "calculation_from_plain",
]
