"""Tests for structural equality between canonical expressions."""

import pytest

from atom import Integer, Variable
from equality import equals, is_canonical
from errors import NonCanonicalExpression
from expression import Power, Product, Sum
from radical import Radical
from rational import Rational
from simplifier import simplify

x = Variable("x")


class TestEquals:
    """Tests for equals()."""

    def test_same_tree(self):
        assert equals(Product((Integer(2), x)), Product((Integer(2), x)))

    def test_different_kind(self):
        assert not equals(Integer(2), Rational(2, 1))
        assert not equals(Rational(1, 2), Radical(1, 2, Rational(1, 4)))

    def test_child_order_matters(self):
        assert not equals(Sum((Integer(1), x)), Sum((x, Integer(1))))

    def test_different_length(self):
        assert not equals(Product((Integer(2), x)), Product((Integer(2), x, x)))

    def test_radical_fields(self):
        assert equals(Radical(2, 3, 2), Radical(Rational(2, 1), 3, Rational(2, 1)))
        assert not equals(Radical(2, 3, 2), Radical(2, 2, 2))

    def test_does_not_simplify(self):
        assert not equals(Sum((Integer(1), Integer(2))), Integer(3))


class TestCanonicalCheck:
    """Tests for the debug check."""

    def test_is_canonical(self):
        assert is_canonical(Product((Integer(2), x)))
        assert not is_canonical(Product((x, Integer(2))))
        assert not is_canonical(Radical(1, 2, 8))

    def test_simplified_is_canonical(self):
        e = Sum((Power(x, Integer(1)), Product((Integer(3), x)), Radical(1, 2, 8)))
        assert is_canonical(simplify(e))

    def test_check_raises(self):
        with pytest.raises(NonCanonicalExpression) as info:
            equals(Sum((Integer(1), Integer(2))), Integer(3), check=True)
        assert info.value.expr == Sum((Integer(1), Integer(2)))

    def test_check_passes_canonical(self):
        assert equals(Integer(3), simplify(Sum((Integer(1), Integer(2)))), check=True)
