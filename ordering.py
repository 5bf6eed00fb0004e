"""
Canonical total order over expressions.

Nodes compare by a fixed per-kind rank first, then by a per-kind
tie-break: numeric value for numbers, (index, radicand, coeff) for
radicals, the symbol for variables, and children recursively for
composites (a sequence that is a prefix of another sorts first).
Two expressions have equal keys exactly when they are structurally equal.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Tuple

from atom import (
    Expression,
    INTEGER,
    RATIONAL,
    RADICAL,
    VARIABLE,
    POWER,
    PRODUCT,
    SUM,
)

RANK: Dict[str, int] = {
    INTEGER: 0,
    RATIONAL: 1,
    RADICAL: 2,
    VARIABLE: 3,
    POWER: 4,
    PRODUCT: 5,
    SUM: 6,
}

SortKey = Tuple[Any, ...]


def sort_key(expr: Expression) -> SortKey:
    kind = expr.kind
    rank = RANK[kind]
    if kind == INTEGER:
        return (rank, expr.value)
    if kind == RATIONAL:
        return (rank, expr.fraction())
    if kind == RADICAL:
        return (rank, expr.index, expr.radicand.fraction(), expr.coeff.fraction())
    if kind == VARIABLE:
        return (rank, expr.symbol)
    if kind == POWER:
        return (rank, sort_key(expr.base), sort_key(expr.exponent))
    if kind in (PRODUCT, SUM):
        return (rank, tuple(sort_key(c) for c in expr.children()))
    raise TypeError(f"unknown expression kind {kind!r}")


def compare(a: Expression, b: Expression) -> int:
    """-1, 0 or 1 as a sorts before, equal to, or after b."""
    ka, kb = sort_key(a), sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def canonical_sort(items: Iterable[Expression]) -> List[Expression]:
    return sorted(items, key=sort_key)
