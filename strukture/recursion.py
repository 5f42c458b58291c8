"""Fibonacci numbers and greatest common divisor."""


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def _truncating_mod(x: int, y: int) -> int:
    remainder = abs(x) % abs(y)
    return -remainder if x < 0 else remainder


def gcd(x: int, y: int) -> int:
    """Euclid's algorithm; stops as soon as the second argument is not positive."""
    while y > 0:
        x, y = y, _truncating_mod(x, y)
    return x