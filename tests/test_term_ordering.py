"""
Tests for Term ordering and like-term detection.

The order looks at exponents only, so like terms with different
coefficients compare as equal in order while staying unequal as values.
"""

import pytest

from ecpoly.common.term import Term, compare_terms, same_order, sort_terms


class TestSameOrder:
    def test_ignores_coefficient(self):
        assert same_order(Term(3, 2, 1), Term(-8, 2, 1))
        assert Term(0, 2, 1).same_order(Term(5, 2, 1))

    def test_requires_both_exponents(self):
        assert not same_order(Term(1, 2, 1), Term(1, 2, 0))
        assert not same_order(Term(1, 2, 1), Term(1, 1, 1))

    def test_reflexive_symmetric_transitive(self):
        a, b, c = Term(1, 4, 2), Term(-2, 4, 2), Term(0, 4, 2)
        assert same_order(a, a)
        assert same_order(a, b) and same_order(b, a)
        assert same_order(a, b) and same_order(b, c) and same_order(a, c)


class TestCompare:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Term(1, 1, 5), Term(1, 2, 0), -1),
            (Term(1, 2, 0), Term(1, 1, 5), 1),
            (Term(1, 2, 0), Term(1, 2, 1), -1),
            (Term(1, 2, -1), Term(1, 2, 0), -1),
            (Term(9, 2, 1), Term(-9, 2, 1), 0),
        ],
    )
    def test_x_then_y(self, a, b, expected):
        assert compare_terms(a, b) == expected

    def test_consistent_with_same_order(self):
        pairs = [
            (Term(1, 3, 3), Term(100, 3, 3)),
            (Term(0, 0, 0), Term(1, 0, 0)),
            (Term(-1, -2, 7), Term(4, -2, 7)),
        ]
        for a, b in pairs:
            assert same_order(a, b)
            assert compare_terms(a, b) == 0

    def test_like_terms_are_order_equal_but_not_equal(self):
        a, b = Term(3, 2, 1), Term(4, 2, 1)
        assert a <= b and a >= b
        assert not a < b and not a > b
        assert a != b

    def test_rich_comparisons(self):
        assert Term(5, 1, 0) < Term(1, 2, 0)
        assert Term(1, 2, 0) > Term(5, 1, 0)
        assert Term(1, 2, 3) >= Term(1, 2, 2)

    def test_comparison_with_non_term(self):
        with pytest.raises(TypeError):
            Term(1) < 2


class TestSortTerms:
    def test_ascending_degree_order(self):
        terms = [Term(1, 2, 0), Term(5, 0, 1), Term(2, 1, 0), Term(7)]
        assert sort_terms(terms) == [Term(7), Term(5, 0, 1), Term(2, 1, 0), Term(1, 2, 0)]

    def test_like_terms_keep_input_order(self):
        terms = [Term(3, 1, 1), Term(0, 0, 0), Term(-3, 1, 1)]
        assert sort_terms(terms) == [Term(0, 0, 0), Term(3, 1, 1), Term(-3, 1, 1)]

    def test_reverse(self):
        terms = [Term(1, 0, 1), Term(1, 1, 0)]
        assert sort_terms(terms, reverse=True) == [Term(1, 1, 0), Term(1, 0, 1)]

    def test_builtin_sorted_agrees(self):
        terms = [Term(1, 3, 0), Term(1, 0, 2), Term(1, 1, 1)]
        assert sorted(terms) == sort_terms(terms)
