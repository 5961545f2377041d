"""
ecpoly
======

Exact monomial arithmetic for polynomials over elliptic-curve coordinates.

Modules:
    - common: The Term value type (coefficient · x^a · y^b) and helpers
    - demo: Worked examples of every Term operation

Quick Start:
    >>> from ecpoly import Term
    >>> t = Term(3, 2, 1)
    >>> print(t ** 2)
    9 x^4 y^2
"""

__version__ = "0.1.0"

from . import common
from .common import Term, DivisionByZero, InvalidModulus

__all__ = [
    "common",
    "Term",
    "DivisionByZero",
    "InvalidModulus",
]
