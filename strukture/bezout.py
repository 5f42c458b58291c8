"""Greatest common divisor with Bezout coefficients (extended Euclid)."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

DEFAULT_NUMBERS = (150, -105, -12, 8)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def bezout(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, k_a, k_b)`` with ``g == k_a * a + k_b * b`` and ``g >= 0``."""
    k11, k12, k21, k22 = 1, 0, 0, 1
    while b != 0:
        quotient = _truncating_div(a, b)
        k11, k12, k21, k22 = k21, k22, k11 - quotient * k21, k12 - quotient * k22
        a, b = b, a - b * quotient
    if a < 0:
        a, k11, k12 = -a, -k11, -k12
    return a, k11, k12


def bezout_many(numbers: Sequence[int]) -> tuple[int, list[int]]:
    """Return the gcd of ``numbers`` and coefficients combining them into it."""
    if len(numbers) < 2:
        raise ValueError("at least 2 numbers are expected")
    divisor, first, second = bezout(numbers[0], numbers[1])
    coefficients = [first, second]
    for number in numbers[2:]:
        divisor, factor, coefficient = bezout(divisor, number)
        coefficients = [c * factor for c in coefficients]
        coefficients.append(coefficient)
    return divisor, coefficients


def format_combination(
    gcd_value: int, coefficients: Sequence[int], numbers: Sequence[int]
) -> str:
    """Render ``g = (k1) * n1 + (k2) * n2 + ...``."""
    terms = " + ".join(f"({k}) * {n}" for k, n in zip(coefficients, numbers))
    return f"{gcd_value} = {terms}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the gcd of the given numbers as a linear combination of them."""
    parser = argparse.ArgumentParser(
        description="Express the gcd of integers as their linear combination."
    )
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    numbers = args.numbers or list(DEFAULT_NUMBERS)
    if len(numbers) < 2:
        parser.error("at least 2 numbers are expected")
    divisor, coefficients = bezout_many(numbers)
    print(format_combination(divisor, coefficients, numbers))
    return 0