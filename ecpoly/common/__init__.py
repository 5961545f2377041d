"""
Common building blocks for ecpoly.

This module provides:
    - Monomial terms over the curve coordinates x and y (Term)
    - The arithmetic errors raised by term operations
    - Helpers for comparing and sorting terms
"""

from .term import (
    Term,
    DivisionByZero,
    InvalidModulus,
    multiply,
    divide,
    negate,
    is_zero_term,
    has_y_component,
    same_order,
    compare_terms,
    sort_terms,
)

__all__ = [
    "Term",
    "DivisionByZero",
    "InvalidModulus",
    "multiply",
    "divide",
    "negate",
    "is_zero_term",
    "has_y_component",
    "same_order",
    "compare_terms",
    "sort_terms",
]
