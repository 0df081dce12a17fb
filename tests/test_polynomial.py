import pytest

from dsworkbench.polynomial import Polynomial, Term, format_together


def test_from_pairs_keeps_order():
    poly = Polynomial.from_pairs([(3, 2), (2, 1), (5, 0)])
    assert poly.pairs() == [(3, 2), (2, 1), (5, 0)]
    assert len(poly) == 3
    assert list(poly)[0] == Term(3, 2)


def test_init_accepts_tuples_and_terms():
    assert Polynomial([(1, 1), Term(2, 0)]) == Polynomial.from_pairs([(1, 1), (2, 0)])


def test_add_merges_and_drops_cancelled_terms():
    p1 = Polynomial.from_pairs([(3, 2), (2, 1)])
    p2 = Polynomial.from_pairs([(1, 2), (-2, 1), (1, 0)])
    assert (p1 + p2).pairs() == [(4, 2), (1, 0)]


def test_add_with_empty_is_identity():
    p = Polynomial.from_pairs([(2, 3), (1, 0)])
    assert p + Polynomial() == p
    assert Polynomial() + p == p


def test_add_opposites_is_empty():
    p = Polynomial.from_pairs([(4, 2), (-1, 1)])
    negated = Polynomial.from_pairs([(-c, e) for c, e in p.pairs()])
    assert len(p + negated) == 0


def test_add_is_commutative():
    p1 = Polynomial.from_pairs([(5, 4), (1, 2), (7, 0)])
    p2 = Polynomial.from_pairs([(2, 3), (-1, 2), (3, 1)])
    assert p1 + p2 == p2 + p1


def test_multiply_difference_of_squares():
    p1 = Polynomial.from_pairs([(1, 1), (1, 0)])
    p2 = Polynomial.from_pairs([(1, 1), (-1, 0)])
    assert (p1 * p2).pairs() == [(1, 2), (-1, 0)]


def test_multiply_by_one_is_identity():
    p = Polynomial.from_pairs([(3, 5), (-2, 2), (4, 0)])
    one = Polynomial.from_pairs([(1, 0)])
    assert p * one == p


def test_multiply_with_empty_is_empty():
    p = Polynomial.from_pairs([(3, 1)])
    assert len(p * Polynomial()) == 0
    assert len(Polynomial() * p) == 0


def test_multiply_is_commutative_and_descending():
    p1 = Polynomial.from_pairs([(2, 3), (-1, 1), (4, 0)])
    p2 = Polynomial.from_pairs([(3, 2), (5, 1), (-2, 0)])
    product = p1 * p2
    assert product == p2 * p1
    exponents = [e for _, e in product.pairs()]
    assert exponents == sorted(exponents, reverse=True)
    assert all(c != 0 for c, _ in product.pairs())


def test_format():
    poly = Polynomial.from_pairs([(3, 2), (-1, 0)])
    assert poly.format("P1") == "P1: 3x^2 + -1x^0"


def test_format_empty():
    assert Polynomial().format("P2") == "P2: "


def test_format_together_lines():
    p1 = Polynomial.from_pairs([(1, 1)])
    p2 = Polynomial.from_pairs([(1, 0)])
    text = format_together(p1, p2, p1 + p2, p1 * p2)
    lines = text.splitlines()
    assert lines[0] == p1.format("P1")
    assert lines[1] == p2.format("P2")
    assert lines[2] == (p1 + p2).format("P1 + P2")
    assert lines[3] == (p1 * p2).format("P1 * P2")


def test_add_rejects_non_polynomial():
    with pytest.raises(TypeError):
        Polynomial.from_pairs([(1, 0)]) + 3