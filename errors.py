from __future__ import annotations


class AlgebraError(Exception):
    """Base class for errors raised by the simplification engine."""


class DivisionByZero(AlgebraError, ZeroDivisionError):
    """A zero denominator or divisor arose during construction or arithmetic."""

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


class InvalidRadical(AlgebraError, ValueError):
    """A radical was given an index below 2 or a negative radicand under an even index."""


class NonCanonicalExpression(AlgebraError, ValueError):
    """Raised by the debug equality check when an operand is not in canonical form."""

    def __init__(self, expr: object) -> None:
        super().__init__(f"expression is not canonical: {expr!r}")
        self.expr = expr
