"""
Composite expression nodes and the construction functions for every kind.

Trees are built bottom-up by callers and never mutated; composite nodes
hold their children as tuples. Construction only validates local
invariants, it does not simplify: pass the tree to simplifier.simplify
for the canonical form.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from atom import (
    Expression,
    Integer,
    Variable,
    POWER,
    PRODUCT,
    SUM,
)
from rational import Rational, reduce
from radical import Radical

ExprLike = Union[Expression, int]


def wrap(value: ExprLike) -> Expression:
    """Accept plain ints wherever an expression is expected."""
    if isinstance(value, Expression):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Integer(value)
    raise TypeError(f"not an expression: {value!r}")


def _children(items: Iterable[ExprLike]) -> Tuple[Expression, ...]:
    return tuple(wrap(x) for x in items)


@dataclass(frozen=True)
class Sum(Expression):
    terms: Tuple[Expression, ...]
    kind = SUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", _children(self.terms))

    def children(self) -> Tuple[Expression, ...]:
        return self.terms


@dataclass(frozen=True)
class Product(Expression):
    factors: Tuple[Expression, ...]
    kind = PRODUCT

    def __post_init__(self) -> None:
        object.__setattr__(self, "factors", _children(self.factors))

    def children(self) -> Tuple[Expression, ...]:
        return self.factors


@dataclass(frozen=True)
class Power(Expression):
    base: Expression
    exponent: Expression
    kind = POWER

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", wrap(self.base))
        object.__setattr__(self, "exponent", wrap(self.exponent))

    def children(self) -> Tuple[Expression, ...]:
        return (self.base, self.exponent)


# -----------------
# Construction functions
# -----------------
def integer(value: int) -> Integer:
    return Integer(value)


def rational(num: int, den: int = 1) -> Expression:
    """num/den in lowest terms; whole values come back as Integer."""
    return reduce(num, den).collapse()


def radical(coeff: Union[Rational, Integer, int], index: int, radicand: Union[Rational, Integer, int]) -> Radical:
    return Radical(coeff, index, radicand)


def sqrt(radicand: Union[Rational, Integer, int]) -> Radical:
    return Radical(1, 2, radicand)


def variable(symbol: str) -> Variable:
    return Variable(symbol)


def add(*terms: ExprLike) -> Sum:
    return Sum(terms)


def mul(*factors: ExprLike) -> Product:
    return Product(factors)


def power(base: ExprLike, exponent: ExprLike) -> Power:
    return Power(base, exponent)


def neg(expr: ExprLike) -> Product:
    return Product((Integer(-1), expr))


def sub(a: ExprLike, b: ExprLike) -> Sum:
    return Sum((a, neg(b)))


def div(a: ExprLike, b: ExprLike) -> Product:
    """a / b as a * b^-1; a zero divisor is reported when the tree is simplified."""
    return Product((a, Power(b, Integer(-1))))


def walk(expr: Expression) -> Iterable[Expression]:
    """Pre-order traversal of every node in the tree."""
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children()))


__all__ = [
    "Expression",
    "Integer",
    "Rational",
    "Radical",
    "Variable",
    "Sum",
    "Product",
    "Power",
    "wrap",
    "integer",
    "rational",
    "radical",
    "sqrt",
    "variable",
    "add",
    "mul",
    "power",
    "neg",
    "sub",
    "div",
    "walk",
]
