"""Tests for the canonical total order."""

import itertools

import networkx as nx

from atom import Integer, Variable
from expression import Power, Product, Sum
from ordering import canonical_sort, compare, sort_key
from radical import Radical
from rational import Rational

x, y = Variable("x"), Variable("y")

SAMPLE = [
    Integer(-2),
    Integer(0),
    Integer(3),
    Rational(-1, 2),
    Rational(1, 3),
    Radical(1, 2, 2),
    Radical(2, 2, 2),
    Radical(1, 2, 3),
    Radical(1, 3, 2),
    x,
    y,
    Power(x, Integer(2)),
    Power(x, Integer(3)),
    Power(y, Rational(1, 2)),
    Product((Integer(2), x)),
    Product((Integer(2), x, y)),
    Product((Integer(3), x)),
    Sum((Integer(1), x)),
    Sum((x, y)),
    Radical(-1, 2, 2),
    Power(Radical(1, 2, 2), x),
    Power(Radical(-1, 2, 2), x),
    Power(Radical(1, 3, 2), Integer(2)),
]


class TestRanks:
    """Kinds sort by rank before anything else."""

    def test_kind_order(self):
        shuffled = [SAMPLE[i] for i in (18, 10, 5, 0, 13, 16, 3)]
        kinds = [e.kind for e in canonical_sort(shuffled)]
        assert kinds == ["INTEGER", "RATIONAL", "RADICAL", "VARIABLE", "POWER", "PRODUCT", "SUM"]

    def test_numbers_by_value(self):
        assert compare(Integer(-2), Integer(3)) == -1
        assert compare(Rational(1, 3), Rational(-1, 2)) == 1

    def test_radicals_by_index_then_radicand(self):
        assert compare(Radical(5, 2, 3), Radical(1, 3, 2)) == -1
        assert compare(Radical(5, 2, 2), Radical(1, 2, 3)) == -1

    def test_radicals_by_coefficient_last(self):
        assert compare(Radical(-1, 2, 2), Radical(1, 2, 2)) == -1
        assert compare(Radical(5, 2, 2), Radical(-5, 2, 3)) == -1

    def test_powers_by_radical_base(self):
        assert compare(Power(Radical(-1, 2, 2), x), Power(Radical(1, 2, 2), x)) == -1
        assert compare(Power(Radical(1, 3, 2), Integer(2)), Power(x, Integer(2))) == -1

    def test_prefix_sorts_first(self):
        assert compare(Product((Integer(2), x)), Product((Integer(2), x, y))) == -1


class TestTotalOrder:
    """Checks over every pair and triple of the sample."""

    def test_reflexive_and_distinct(self):
        for a, b in itertools.product(SAMPLE, repeat=2):
            assert (compare(a, b) == 0) == (a == b)

    def test_antisymmetric(self):
        for a, b in itertools.product(SAMPLE, repeat=2):
            assert compare(a, b) == -compare(b, a)

    def test_transitive(self):
        for a, b, c in itertools.product(SAMPLE, repeat=3):
            if compare(a, b) < 0 and compare(b, c) < 0:
                assert compare(a, c) < 0

    def test_less_than_graph_is_acyclic(self):
        g = nx.DiGraph()
        for a, b in itertools.product(range(len(SAMPLE)), repeat=2):
            if compare(SAMPLE[a], SAMPLE[b]) < 0:
                g.add_edge(a, b)
        assert nx.is_directed_acyclic_graph(g)
        order = list(nx.topological_sort(g))
        assert [SAMPLE[i] for i in order] == canonical_sort(SAMPLE)

    def test_sort_key_equal_for_equal_trees(self):
        assert sort_key(Sum((x, y))) == sort_key(Sum((Variable("x"), Variable("y"))))
