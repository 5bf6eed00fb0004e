"""
Simplifier Module

Maps any expression tree to its canonical form by rewriting bottom-up:
children first, then the node itself. Every rule below assumes its inputs
are already canonical and produces a canonical result, which is what
makes simplify idempotent.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Tuple

import radical
from atom import (
    Expression,
    INTEGER,
    RATIONAL,
    RADICAL,
    VARIABLE,
    POWER,
    PRODUCT,
    SUM,
    ZERO,
    ONE,
)
from errors import DivisionByZero
from expression import Power, Product, Sum
from ordering import canonical_sort
from radical import Radical
from rational import Rational, as_rational

logger = logging.getLogger(__name__)

RATIONAL_KINDS = (INTEGER, RATIONAL)


def numeric_sign(expr: Expression) -> int:
    """Sign of a canonical numeric literal."""
    if expr.kind == INTEGER:
        return (expr.value > 0) - (expr.value < 0)
    if expr.kind == RATIONAL:
        return expr.sign()
    if expr.kind == RADICAL:
        return expr.coeff.sign() * expr.radicand.sign()
    raise TypeError(f"not a numeric literal: {expr!r}")


def split_term(term: Expression) -> Tuple[Rational, Expression | None]:
    """
    Split a canonical Sum term into (rational coefficient, symbolic shape).

    Rational literals have no shape (None). A radical's coefficient is
    split off its root, so 2*sqrt(3) and 5*sqrt(3) share the shape sqrt(3).
    """
    kind = term.kind
    if kind in RATIONAL_KINDS:
        return as_rational(term), None
    if kind == RADICAL:
        return term.coeff, term.unit()
    if kind == PRODUCT:
        first, rest = term.factors[0], term.factors[1:]
        if first.kind in RATIONAL_KINDS:
            shape = rest[0] if len(rest) == 1 else Product(rest)
            return as_rational(first), shape
        if first.kind == RADICAL:
            return first.coeff, Product((first.unit(),) + rest)
    return Rational(1, 1), term


class Simplifier:
    """
    One simplification run.

    With memoize on, results are cached by structural hash for the life
    of this instance only; simplify() below builds a fresh instance per
    top-level call so no cache outlives the tree it was built for.
    """

    def __init__(self, memoize: bool = True) -> None:
        self.memoize = memoize
        self._cache: Dict[Expression, Expression] = {}
        self.hits = 0
        self.misses = 0

    def simplify(self, expr: Expression) -> Expression:
        if not isinstance(expr, Expression):
            raise TypeError(f"not an expression: {expr!r}")
        if self.memoize:
            cached = self._cache.get(expr)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1
        out = self._simplify(expr)
        if self.memoize:
            self._cache[expr] = out
        return out

    def _simplify(self, expr: Expression) -> Expression:
        kind = expr.kind
        if kind in (INTEGER, VARIABLE):
            return expr
        if kind == RATIONAL:
            return expr.collapse()
        if kind == RADICAL:
            return radical.reduce(expr)
        if kind == POWER:
            return self.power(self.simplify(expr.base), self.simplify(expr.exponent))
        if kind == PRODUCT:
            return self.product([self.simplify(f) for f in expr.factors])
        if kind == SUM:
            return self.sum([self.simplify(t) for t in expr.terms])
        raise TypeError(f"unknown expression kind {kind!r}")

    # -----------------
    # Power
    # -----------------
    def power(self, base: Expression, exponent: Expression) -> Expression:
        """base ** exponent for canonical base and exponent."""
        if exponent == ZERO:
            # 0^0 included
            return ONE
        if exponent == ONE:
            return base
        if base.kind == POWER:
            return self.power(base.base, self.product([base.exponent, exponent]))
        if base == ONE:
            return ONE
        if base.is_numeric():
            if exponent.kind == INTEGER:
                return self._literal_power(base, exponent.value)
            if base == ZERO and exponent.is_numeric():
                if numeric_sign(exponent) < 0:
                    raise DivisionByZero(f"zero raised to negative power {exponent!r}")
                return ZERO
        return Power(base, exponent)

    def _literal_power(self, base: Expression, n: int) -> Expression:
        if base.kind == RADICAL:
            return radical.power(base, n)
        return (as_rational(base) ** n).collapse()

    # -----------------
    # Product
    # -----------------
    def product(self, factors: List[Expression]) -> Expression:
        """Canonical product of canonical factors."""
        flat: List[Expression] = []
        for f in factors:
            if f.kind == PRODUCT:
                flat.extend(f.factors)
            else:
                flat.append(f)
        coeff = Rational(1, 1)
        roots: Dict[int, Rational] = {}
        symbolic: List[Expression] = []
        for f in flat:
            if f.kind in RATIONAL_KINDS:
                coeff = coeff * as_rational(f)
            elif f.kind == RADICAL:
                coeff = coeff * f.coeff
                roots[f.index] = roots.get(f.index, Rational(1, 1)) * f.radicand
            else:
                symbolic.append(f)
        if coeff.is_zero():
            logger.debug("annihilator: product of %d factors collapsed to 0", len(flat))
            return ZERO
        numeric, coeff_powers = self._fold_roots(coeff, roots)
        symbolic.extend(coeff_powers)
        merged, rerun = self._merge_bases(symbolic)
        if rerun:
            return self.product([numeric] + merged + rerun)
        out = [f for f in [numeric] + merged if f != ONE]
        if not out:
            return ONE
        if len(out) == 1:
            return out[0]
        return Product(tuple(canonical_sort(out)))

    def _fold_roots(self, coeff: Rational, roots: Dict[int, Rational]) -> Tuple[Expression, List[Expression]]:
        """
        Fold the radicands gathered per index into the coefficient.

        At most one index may survive as a numeric literal; with more, each
        root becomes radicand^(1/index) beside a rational coefficient.
        """
        units: List[Radical] = []
        for index in sorted(roots):
            red = radical.make(1, index, roots[index])
            if isinstance(red, Radical):
                coeff = coeff * red.coeff
                units.append(red.unit())
            else:
                coeff = coeff * as_rational(red)
        if not units:
            return coeff.collapse(), []
        if len(units) == 1:
            return radical.scale(units[0], coeff), []
        logger.debug("radicals of index %s kept as fractional powers", [u.index for u in units])
        return coeff.collapse(), [radical.as_power(u) for u in units]

    def _merge_bases(self, symbolic: List[Expression]) -> Tuple[List[Expression], List[Expression]]:
        """
        Combine base^e1 * base^e2 into base^(e1+e2).

        Returns (symbolic factors, factors needing another product pass);
        the second list holds merges that turned numeric or into a Product.
        """
        groups: Dict[Expression, List[Tuple[Expression, Expression]]] = {}
        for f in symbolic:
            if f.kind == POWER:
                groups.setdefault(f.base, []).append((f, f.exponent))
            else:
                groups.setdefault(f, []).append((f, ONE))
        merged: List[Expression] = []
        rerun: List[Expression] = []
        for base, items in groups.items():
            if len(items) == 1:
                merged.append(items[0][0])
                continue
            combined = self.power(base, self.sum([e for _, e in items]))
            if combined.is_numeric() or combined.kind == PRODUCT:
                rerun.append(combined)
            else:
                merged.append(combined)
        return merged, rerun

    # -----------------
    # Sum
    # -----------------
    def sum(self, terms: List[Expression]) -> Expression:
        """Canonical sum of canonical terms."""
        flat: List[Expression] = []
        for t in terms:
            if t.kind == SUM:
                flat.extend(t.terms)
            else:
                flat.append(t)
        constant = Rational(0, 1)
        like: Dict[Expression, Rational] = {}
        for t in flat:
            c, shape = split_term(t)
            if shape is None:
                constant = constant + c
            else:
                like[shape] = like.get(shape, Rational(0, 1)) + c
        out: List[Expression] = []
        if not constant.is_zero():
            out.append(constant.collapse())
        nested = False
        for shape, c in like.items():
            if c.is_zero():
                continue
            term = self.product([c.collapse(), shape])
            nested = nested or term.kind == SUM
            out.append(term)
        if nested:
            return self.sum(out)
        if not out:
            return ZERO
        if len(out) == 1:
            return out[0]
        return Sum(tuple(canonical_sort(out)))


def simplify(expr: Expression, memoize: bool = True) -> Expression:
    """
    Canonical form of expr.

    Raises DivisionByZero or InvalidRadical from the arithmetic underneath;
    nothing is returned for a tree that fails part way.
    """
    s = Simplifier(memoize=memoize)
    out = s.simplify(expr)
    if memoize:
        logger.debug("simplify: %d cache hits, %d misses", s.hits, s.misses)
    return out
