"""
Radicals: coeff * radicand ** (1/index) with an exact rational coefficient.

A reduced radical has a positive radicand whose numerator carries no
perfect index-th power factor above 1. The radicand's denominator is part
of the radical's identity and is left as given, so sqrt(1/4) stays a
radical rather than becoming the fraction 1/2.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Union

from atom import Expression, Integer, RADICAL, ZERO as INT_ZERO, ONE as INT_ONE
from errors import InvalidRadical
from factor import extract_power
from rational import Rational, as_rational

logger = logging.getLogger(__name__)

RationalLike = Union[Rational, Integer, int]


@dataclass(frozen=True)
class Radical(Expression):
    coeff: Rational
    index: int
    radicand: Rational
    kind = RADICAL

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise InvalidRadical(f"radical index must be an int, got {self.index!r}")
        if self.index < 2:
            raise InvalidRadical(f"radical index must be at least 2, got {self.index}")
        object.__setattr__(self, "coeff", as_rational(self.coeff))
        object.__setattr__(self, "radicand", as_rational(self.radicand))
        if self.radicand.sign() < 0 and self.index % 2 == 0:
            raise InvalidRadical(
                f"even-index radical of negative radicand {self.radicand!r}"
            )

    def is_reduced(self) -> bool:
        if self.coeff.is_zero() or self.radicand.sign() <= 0 or self.radicand.is_one():
            return False
        outside, _ = extract_power(self.radicand.numerator(), self.index)
        return outside == 1

    def unit(self) -> "Radical":
        """The same root with coefficient 1."""
        return Radical(Rational(1, 1), self.index, self.radicand)


def make(coeff: RationalLike, index: int, radicand: RationalLike) -> Expression:
    """Build and reduce a radical; may collapse to an Integer or Rational node."""
    return reduce(Radical(coeff, index, radicand))


def reduce(r: Radical) -> Expression:
    c, k, q = r.coeff, r.index, r.radicand
    if c.is_zero() or q.is_zero():
        return INT_ZERO
    if q.sign() < 0:
        # odd index only, the constructor rejects the even case
        c, q = -c, -q
    outside, inside = extract_power(q.numerator(), k)
    c = c * outside
    q = Rational(inside, q.denominator())
    if q.is_one():
        return c.collapse()
    return Radical(c, k, q)


def scale(r: Radical, c: RationalLike) -> Expression:
    """c * r, reduced."""
    return make(r.coeff * as_rational(c), r.index, r.radicand)


def multiply(a: Radical, b: Radical) -> Expression:
    """
    Product of two radicals.

    Equal indices multiply under one root and re-reduce. Differing indices
    are not combined: the result is an unsimplified Product of the joint
    coefficient and one fractional Power per radicand.
    """
    ra, rb = reduce(a), reduce(b)
    if not isinstance(ra, Radical) or not isinstance(rb, Radical):
        if isinstance(ra, Radical):
            return scale(ra, as_rational(rb))
        if isinstance(rb, Radical):
            return scale(rb, as_rational(ra))
        return (as_rational(ra) * as_rational(rb)).collapse()
    if ra.index == rb.index:
        return make(ra.coeff * rb.coeff, ra.index, ra.radicand * rb.radicand)
    from expression import Product
    logger.debug("no cross-index product for index %d and %d", ra.index, rb.index)
    return Product(((ra.coeff * rb.coeff).collapse(), as_power(ra), as_power(rb)))


def as_power(r: Radical) -> Expression:
    """The root of r as radicand^(1/index); the coefficient is left to the caller."""
    from expression import Power
    return Power(r.radicand.collapse(), Rational(1, r.index))


def reciprocal(r: Radical) -> Expression:
    """
    1 / r with the root rationalized.

    For r = c * (a/b)^(1/k): 1/r == 1/(c*a) * (b * a^(k-1))^(1/k), so the
    result never carries a denominator under the root.
    """
    red = reduce(r)
    one = Rational(1, 1)
    if not isinstance(red, Radical):
        return (one / as_rational(red)).collapse()
    k = red.index
    a, b = red.radicand.numerator(), red.radicand.denominator()
    return make(one / (red.coeff * a), k, b * a ** (k - 1))


def power(r: Radical, n: int) -> Expression:
    """r ** n for an integer n; r ** -n is the reciprocal of r ** n."""
    if n == 0:
        return INT_ONE
    red = reduce(r)
    if not isinstance(red, Radical):
        return (as_rational(red) ** n).collapse()
    if n < 0:
        pos = power(red, -n)
        if isinstance(pos, Radical):
            return reciprocal(pos)
        return (Rational(1, 1) / as_rational(pos)).collapse()
    return make(red.coeff ** n, red.index, red.radicand ** n)
