"""
Term Arithmetic Demo

Walks through every Term operation on small, hand-checkable examples,
ending with a Frobenius twist over a toy curve field.

Run with:
    python -m ecpoly.demo
"""

from ecpoly.common.term import (
    Term,
    DivisionByZero,
    InvalidModulus,
    compare_terms,
    sort_terms,
)

# Small prime for demonstration (easy to verify by hand)
DEMO_PRIME = 97


def print_banner():
    """Print the demo banner."""
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 21 + "ECPOLY TERM ARITHMETIC DEMO" + " " * 20 + "║")
    print("╚" + "═" * 68 + "╝")


def print_section(title: str):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def demo_rendering():
    """Show the canonical string for each coefficient branch."""
    print_section("DEMO 1: CANONICAL RENDERING")

    examples = [
        Term(),
        Term(3),
        Term(1),
        Term(-1),
        Term(1, 1, 0),
        Term(-1, 2, 1),
        Term(-12, 0, 1),
        Term(5, -3, 0),
    ]
    for term in examples:
        print(f"  {term!r:<22} -> {str(term)!r}")


def demo_arithmetic():
    """Multiply, divide and negate two terms."""
    print_section("DEMO 2: ARITHMETIC")

    a = Term(6, 3, 2)
    b = Term(-4, 1, 1)
    print(f"\na = {a}")
    print(f"b = {b}")
    print(f"a * b = {a * b}   (6 * -4 = -24, exponents add)")
    print(f"a / b = {a / b}   (6 / -4 truncates to -1, exponents subtract)")
    print(f"-a    = {-a}")

    try:
        a / Term(0, 1, 0)
    except DivisionByZero as e:
        print(f"a / (0 x) -> DivisionByZero: {e}")


def demo_power_and_frobenius():
    """Compare numeric exponentiation with the Frobenius twist."""
    print_section("DEMO 3: POWER vs FROBENIUS TWIST")

    t = Term(2, 1, 1)
    print(f"\nt = {t}")
    print(f"t ** 3                  = {t ** 3}   (coefficient is cubed)")
    print(f"t.rescale_frobenius(3)  = {t.rescale_frobenius(3)}   (coefficient untouched)")
    print(f"Term(0, 4, 4) ** 0      = {Term(0, 4, 4) ** 0}")


def demo_modular_reduction():
    """Reduce coefficients modulo a small prime."""
    print_section(f"DEMO 4: MODULAR REDUCTION (p = {DEMO_PRIME})")

    big = Term(10 ** 30, DEMO_PRIME, 1)
    neg = Term(-200, 1, 0)
    print(f"\n{big} mod {DEMO_PRIME} = {big % DEMO_PRIME}")
    print(f"{neg} mod {DEMO_PRIME} = {neg % DEMO_PRIME}   (sign follows the coefficient)")

    try:
        big % 0
    except InvalidModulus as e:
        print(f"mod 0 -> InvalidModulus: {e}")

    t = Term(3, 2, -1)
    value = t.evaluate(5, 7, modulus=DEMO_PRIME)
    print(f"\n{t} at (x, y) = (5, 7) mod {DEMO_PRIME} = {value}")


def demo_ordering():
    """Sort terms and detect like terms."""
    print_section("DEMO 5: ORDERING AND LIKE TERMS")

    terms = [Term(1, 2, 0), Term(5, 0, 1), Term(-3, 2, 0), Term(2, 1, 3), Term(7)]
    print(f"\nInput:  {[str(t) for t in terms]}")
    print(f"Sorted: {[str(t) for t in sort_terms(terms)]}")

    a, b = Term(1, 2, 0), Term(-3, 2, 0)
    print(f"\n'{a}' and '{b}':")
    print(f"  same_order     = {a.same_order(b)}")
    print(f"  compare_terms  = {compare_terms(a, b)}")
    print(f"  equal as terms = {a == b}")


def main():
    """Run all demos."""
    print_banner()

    demos = [
        demo_rendering,
        demo_arithmetic,
        demo_power_and_frobenius,
        demo_modular_reduction,
        demo_ordering,
    ]
    for demo_func in demos:
        demo_func()

    print("\n" + "═" * 70)
    print("DEMOS COMPLETE")
    print("═" * 70)
    return 0


if __name__ == "__main__":
    main()
