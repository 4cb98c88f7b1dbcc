"""Calculation model returned by the tokenizer."""

from pydantic import BaseModel, Field

from .enums import Kind
from .units import UnitSystem
from .values import Value


class Calculation(BaseModel):
    """
    The tokens of one input expression and the value they reduce to.

    A calculation is ok when it has a result that is not an error. It is an
    error when any token or the result is an error. A calculation without a
    result and without errors (a lone distance, say) is neither.
    """

    parts: tuple[Value, ...] = Field(description="Tokens in input order")
    result: Value | None = Field(default=None, description="Evaluated value, if any")

    model_config = {"frozen": True}

    @property
    def is_ok(self) -> bool:
        return self.result is not None and self.result.kind != Kind.ERROR

    @property
    def is_error(self) -> bool:
        if any(part.kind == Kind.ERROR for part in self.parts):
            return True
        return self.result is not None and self.result.kind == Kind.ERROR

    def render(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        """Render the tokens joined by single spaces."""
        return " ".join(part.render(unit_system) for part in self.parts)

    def render_result(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str | None:
        if self.result is None:
            return None
        return self.result.render(unit_system)
