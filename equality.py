"""
Structural equality between canonical expressions.

equals() is only meaningful when both arguments are already simplified.
It does not simplify, so mathematically equal values held in different
representations compare unequal: the fraction 1/2 is never equal to the
radical sqrt(1/4). Pass check=True (tests, debugging) to have both
operands verified as canonical first.
"""
from __future__ import annotations

from atom import Expression, INTEGER, RATIONAL, RADICAL, VARIABLE, POWER, PRODUCT, SUM
from errors import NonCanonicalExpression
from simplifier import simplify


def equals(a: Expression, b: Expression, check: bool = False) -> bool:
    """
    True when a and b are the same canonical tree.

    Precondition: a and b are canonical (outputs of simplify). The result
    for other inputs is unspecified.
    """
    if check:
        for operand in (a, b):
            if not is_canonical(operand):
                raise NonCanonicalExpression(operand)
    return _same(a, b)


def _same(a: Expression, b: Expression) -> bool:
    if a is b:
        return True
    if a.kind != b.kind:
        return False
    kind = a.kind
    if kind == INTEGER:
        return a.value == b.value
    if kind == RATIONAL:
        return a.fraction() == b.fraction()
    if kind == RADICAL:
        return (
            a.index == b.index
            and a.coeff.fraction() == b.coeff.fraction()
            and a.radicand.fraction() == b.radicand.fraction()
        )
    if kind == VARIABLE:
        return a.symbol == b.symbol
    if kind == POWER:
        return _same(a.base, b.base) and _same(a.exponent, b.exponent)
    if kind in (PRODUCT, SUM):
        ca, cb = a.children(), b.children()
        return len(ca) == len(cb) and all(_same(x, y) for x, y in zip(ca, cb))
    raise TypeError(f"unknown expression kind {kind!r}")


def is_canonical(expr: Expression) -> bool:
    """Debug check: simplifying expr again leaves it structurally unchanged."""
    return _same(simplify(expr), expr)
