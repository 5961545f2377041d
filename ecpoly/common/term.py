"""
Monomial Terms for Elliptic-Curve Polynomial Arithmetic.

This module implements the atomic building block of the polynomial layer:
a single monomial term

    coefficient · x^exponent_x · y^exponent_y

over the two curve coordinates x and y. Coefficient and exponents are
Python ints, so every operation is exact no matter how large the numbers
get (cryptographic curves routinely need 256-bit coefficients and, after
a Frobenius twist x -> x^p, exponents of the same size).

Key Concepts:
    - Multiplication: coefficients multiply, exponents add
    - Division: coefficients divide (truncating toward zero), exponents subtract
    - Power: (c x^a y^b)^n = c^n x^(a*n) y^(b*n)
    - Frobenius twist: c x^a y^b -> c x^(a*n) y^(b*n)  (coefficient untouched)
    - Modular reduction: only the coefficient is reduced
    - Order: by (exponent_x, exponent_y); coefficients never take part

Like Terms:
    Two terms with the same exponents are "like terms" and may be combined
    by addition in a polynomial container. The ordering below therefore
    treats 3 x^2 y and -7 x^2 y as equal in order even though the terms
    themselves are different (== still compares all three fields).

Example:
    >>> a = Term(3, 2, 1)    # 3 x^2 y
    >>> b = Term(-2, 1, 0)   # -2 x
    >>> print(a * b)
    - 6 x^3 y
    >>> print(a.rescale_frobenius(5))
    3 x^10 y^5
    >>> a.same_order(Term(7, 2, 1))
    True
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union
import operator


class DivisionByZero(ZeroDivisionError):
    """Raised when a term is divided by a term with a zero coefficient."""


class InvalidModulus(ValueError):
    """Raised when a reduction modulus is zero or negative."""


def _trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero (Python's // rounds toward -inf)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_rem(a: int, b: int) -> int:
    """Remainder matching _trunc_div, so the sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _check_count(n: int, what: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must be non-negative, got {n}")
    return n


def _check_modulus(m: int) -> int:
    m = operator.index(m)
    if m <= 0:
        raise InvalidModulus(f"Modulus must be positive, got {m}")
    return m


@dataclass(frozen=True)
class Term:
    """
    A single monomial coefficient · x^exponent_x · y^exponent_y.

    Terms are immutable values: every operation returns a new Term.
    Negative exponents are allowed (division subtracts exponents without
    checking), and a zero coefficient is a valid zero term whatever its
    exponents are.

    Attributes:
        coefficient: Integer multiplier (default 0)
        exponent_x: Power of x (default 0)
        exponent_y: Power of y (default 0)

    Example:
        >>> print(Term())
        0
        >>> print(Term(-1, 2, 1))
        - x^2 y
        >>> print(Term(4) * Term(3))
        12
    """
    coefficient: int = 0
    exponent_x: int = 0
    exponent_y: int = 0

    VARIABLES = ("x", "y")

    def __post_init__(self):
        """Store every field as a plain int."""
        for name in ("coefficient", "exponent_x", "exponent_y"):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, operator.index(value))
            except TypeError:
                raise TypeError(
                    f"Term.{name} must be an integer, got {type(value).__name__}"
                ) from None

    @classmethod
    def zero(cls) -> Term:
        """Return the zero term (0)."""
        return cls(0, 0, 0)

    @classmethod
    def one(cls) -> Term:
        """Return the multiplicative identity (1)."""
        return cls(1, 0, 0)

    @staticmethod
    def _coerce(other: Union[Term, int]) -> Optional[Term]:
        if isinstance(other, Term):
            return other
        if isinstance(other, int):
            return Term(other, 0, 0)
        return None

    # Arithmetic Operations

    def __mul__(self, other: Union[Term, int]) -> Term:
        """Multiplication: coefficients multiply, exponents add."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Term(
            self.coefficient * other.coefficient,
            self.exponent_x + other.exponent_x,
            self.exponent_y + other.exponent_y,
        )

    def __rmul__(self, other: int) -> Term:
        return self.__mul__(other)

    def __truediv__(self, other: Union[Term, int]) -> Term:
        """
        Division: coefficients divide, exponents subtract.

        The coefficient quotient is truncated toward zero, so
        Term(-7) / Term(2) has coefficient -3, not -4.

        Raises:
            DivisionByZero: If the divisor's coefficient is 0
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.coefficient == 0:
            raise DivisionByZero(f"Cannot divide {self} by a zero term ({other})")
        return Term(
            _trunc_div(self.coefficient, other.coefficient),
            self.exponent_x - other.exponent_x,
            self.exponent_y - other.exponent_y,
        )

    def __rtruediv__(self, other: int) -> Term:
        return Term(other, 0, 0).__truediv__(self)

    def __neg__(self) -> Term:
        """Negation: only the coefficient changes sign."""
        return Term(-self.coefficient, self.exponent_x, self.exponent_y)

    def __pow__(self, n: int) -> Term:
        return self.power(n)

    def __mod__(self, m: int) -> Term:
        if not isinstance(m, int):
            return NotImplemented
        return self.modulo(m)

    def power(self, n: int) -> Term:
        """
        Raise the whole term to the n-th power.

        The coefficient is exponentiated and both exponents are scaled
        by n. Any term to the 0th power is Term(1, 0, 0), the zero term
        included.

        Args:
            n: Non-negative exponent

        Raises:
            ValueError: If n is negative
        """
        n = _check_count(n, "Power")
        return Term(self.coefficient ** n, self.exponent_x * n, self.exponent_y * n)

    def rescale_frobenius(self, n: int) -> Term:
        """
        Apply the Frobenius twist x -> x^n, y -> y^n.

        Unlike power(), the coefficient is left as it is: only the
        exponents are multiplied by n.

        Args:
            n: Non-negative twist factor (typically the field characteristic)

        Raises:
            ValueError: If n is negative
        """
        n = _check_count(n, "Frobenius factor")
        return Term(self.coefficient, self.exponent_x * n, self.exponent_y * n)

    def modulo(self, m: int) -> Term:
        """
        Reduce the coefficient modulo m, leaving the exponents alone.

        This is the truncated remainder: the result carries the sign of
        the coefficient, so Term(-7) % 5 has coefficient -2. Exponents are
        never reduced.

        Raises:
            InvalidModulus: If m is zero or negative
        """
        m = _check_modulus(m)
        return Term(_trunc_rem(self.coefficient, m), self.exponent_x, self.exponent_y)

    # Predicates

    def is_zero(self) -> bool:
        """Check if this is a zero term (exponents are irrelevant)."""
        return self.coefficient == 0

    def is_one(self) -> bool:
        """Check if this is exactly the multiplicative identity."""
        return self.coefficient == 1 and self.is_constant()

    def is_constant(self) -> bool:
        """Check if neither variable appears."""
        return self.exponent_x == 0 and self.exponent_y == 0

    def has_y_component(self) -> bool:
        """Check if y appears with a non-zero exponent."""
        return self.exponent_y != 0

    # Ordering

    def order_key(self) -> Tuple[int, int]:
        """Sort key: exponent of x first, then exponent of y."""
        return (self.exponent_x, self.exponent_y)

    def same_order(self, other: Term) -> bool:
        """
        Check whether two terms are like terms.

        Coefficients are ignored: Term(0, 2, 1) and Term(9, 2, 1) have
        the same order.
        """
        return self.order_key() == other.order_key()

    def __lt__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.order_key() < other.order_key()

    def __le__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.order_key() <= other.order_key()

    def __gt__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.order_key() > other.order_key()

    def __ge__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.order_key() >= other.order_key()

    # Evaluation

    def evaluate(self, x: int, y: int, modulus: Optional[int] = None) -> int:
        """
        Evaluate the term at the point (x, y).

        Without a modulus the result is an exact integer, so negative
        exponents are rejected. With a modulus the result lies in
        [0, modulus) and a negative exponent uses the modular inverse
        of its base.

        Args:
            x: Value substituted for x
            y: Value substituted for y
            modulus: Optional positive modulus (e.g. the curve's field prime)

        Returns:
            coefficient * x^exponent_x * y^exponent_y (mod modulus)

        Raises:
            ValueError: Negative exponent without a modulus, or a base
                        with no inverse modulo `modulus`
            InvalidModulus: If modulus is zero or negative
        """
        if modulus is None:
            if self.exponent_x < 0 or self.exponent_y < 0:
                raise ValueError(
                    f"Cannot evaluate {self} over the integers: negative exponent"
                )
            return self.coefficient * x ** self.exponent_x * y ** self.exponent_y

        modulus = _check_modulus(modulus)
        try:
            xs = pow(x, self.exponent_x, modulus)
            ys = pow(y, self.exponent_y, modulus)
        except ValueError as exc:
            raise ValueError(
                f"Cannot evaluate {self} at ({x}, {y}) mod {modulus}: {exc}"
            ) from exc
        return (self.coefficient * xs * ys) % modulus

    # Rendering

    @staticmethod
    def _exponent_part(symbol: str, exponent: int) -> str:
        if exponent == 0:
            return ""
        if exponent == 1:
            return symbol
        return f"{symbol}^{exponent}"

    def _variable_parts(self) -> List[str]:
        parts = [
            self._exponent_part(symbol, exponent)
            for symbol, exponent in zip(self.VARIABLES, self.order_key())
        ]
        return [p for p in parts if p]

    def __str__(self) -> str:
        """
        Canonical rendering.

        Examples of each branch:
            Term(1, 0, 0)   -> "1"
            Term(1, 1, 2)   -> "x y^2"
            Term(-1, 0, 0)  -> "- 1"
            Term(-1, 3, 0)  -> "- x^3"
            Term(0, 0, 0)   -> "0"
            Term(-12, 0, 1) -> "- 12 y"
        """
        variables = " ".join(self._variable_parts())

        if self.coefficient == 1:
            return variables or "1"
        if self.coefficient == -1:
            return "- " + (variables or "1")

        if self.coefficient >= 0:
            head = str(self.coefficient)
        else:
            head = f"- {-self.coefficient}"
        return f"{head} {variables}".rstrip()

    def __repr__(self) -> str:
        return f"Term({self.coefficient}, {self.exponent_x}, {self.exponent_y})"


# Utility functions

def multiply(a: Term, b: Term) -> Term:
    """Multiply two terms."""
    return a * b


def divide(a: Term, b: Term) -> Term:
    """Divide two terms (truncating coefficient quotient)."""
    return a / b


def negate(a: Term) -> Term:
    """Negate a term."""
    return -a


def is_zero_term(a: Term) -> bool:
    return a.is_zero()


def has_y_component(a: Term) -> bool:
    return a.has_y_component()


def same_order(a: Term, b: Term) -> bool:
    return a.same_order(b)


def compare_terms(a: Term, b: Term) -> int:
    """
    Three-way comparison by order.

    Returns -1, 0 or 1. Like terms compare as 0 even when their
    coefficients differ.
    """
    ka, kb = a.order_key(), b.order_key()
    return (ka > kb) - (ka < kb)


def sort_terms(terms: Iterable[Term], reverse: bool = False) -> List[Term]:
    """
    Sort terms into degree order (stable, so like terms keep their input order).

    Example:
        >>> sort_terms([Term(1, 2, 0), Term(5, 0, 1), Term(2, 1, 0)])
        [Term(5, 0, 1), Term(2, 1, 0), Term(1, 2, 0)]
    """
    return sorted(terms, key=Term.order_key, reverse=reverse)
