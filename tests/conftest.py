"""Shared fixtures: random expression trees and a float cross-check evaluator."""

import numpy as np
import pytest

from atom import Integer, Variable
from expression import Power, Product, Sum
from radical import Radical
from rational import Rational

SYMBOLS = ("x", "y", "z")


def _leaf(rng):
    pick = rng.integers(0, 4)
    if pick == 0:
        return Integer(int(rng.integers(-3, 4)))
    if pick == 1:
        return Rational(int(rng.integers(-4, 5)), int(rng.integers(1, 5)))
    if pick == 2:
        return Radical(int(rng.integers(-2, 3)), int(rng.choice([2, 3])), int(rng.integers(1, 13)))
    return Variable(str(rng.choice(SYMBOLS)))


def _tree(rng, depth):
    if depth == 0 or rng.random() < 0.3:
        return _leaf(rng)
    pick = rng.integers(0, 4)
    if pick == 0:
        n = int(rng.integers(2, 4))
        return Sum(tuple(_tree(rng, depth - 1) for _ in range(n)))
    if pick == 1:
        n = int(rng.integers(2, 4))
        return Product(tuple(_tree(rng, depth - 1) for _ in range(n)))
    if pick == 2:
        return Power(_tree(rng, depth - 1), Integer(int(rng.integers(0, 4))))
    return Power(Variable(str(rng.choice(SYMBOLS))), Rational(1, 2))


def _value(expr, env, magnitude=False):
    """Float value of expr; with magnitude=True, a bound on the size of every intermediate."""
    kind = expr.kind
    if kind == "INTEGER":
        v = np.float64(expr.value)
    elif kind == "RATIONAL":
        v = np.float64(expr.numerator()) / np.float64(expr.denominator())
    elif kind == "RADICAL":
        q = np.float64(expr.radicand.numerator()) / np.float64(expr.radicand.denominator())
        c = np.float64(expr.coeff.numerator()) / np.float64(expr.coeff.denominator())
        v = c * np.sign(q) * np.power(np.abs(q), 1.0 / expr.index)
    elif kind == "VARIABLE":
        v = np.float64(env[expr.symbol])
    elif kind == "POWER":
        v = np.power(_value(expr.base, env, magnitude), _value(expr.exponent, env, False))
    elif kind == "PRODUCT":
        v = np.prod([_value(f, env, magnitude) for f in expr.factors])
    elif kind == "SUM":
        v = np.sum([_value(t, env, magnitude) for t in expr.terms])
    else:
        raise TypeError(kind)
    return np.abs(v) if magnitude else v


@pytest.fixture
def random_expr():
    """Factory: random_expr(seed, depth=3) -> a seeded random expression tree."""
    def make(seed, depth=3):
        return _tree(np.random.default_rng(seed), depth)
    return make


@pytest.fixture
def evaluate():
    """Factory: evaluate(expr, env, magnitude=False) -> numpy float."""
    return _value


@pytest.fixture
def env():
    rng = np.random.default_rng(12345)
    return {s: float(rng.uniform(0.5, 2.0)) for s in SYMBOLS}
