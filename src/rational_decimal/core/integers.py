"""
Big-integer helpers on Python's arbitrary-precision ``int``.

``int`` already provides add, subtract, multiply, truncating/floor division,
remainder, negation and ordering. The helpers here name the few derived
operations the rational core relies on, so the rest of the package never has
to reason about ``bool`` being an ``int`` or about negative operands to gcd.
"""

from __future__ import annotations

from typing import Any

from .constants import BASE


def is_integer(x: Any) -> bool:
    """True for genuine integers; ``bool`` is rejected even though it subclasses int."""
    return isinstance(x, int) and not isinstance(x, bool)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` by the Euclidean algorithm.

    gcd(a, 0) == |a|, and gcd(0, 0) == 0.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def sign(a: int) -> int:
    """Return -1, 0 or 1."""
    return (a > 0) - (a < 0)


def ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("ten_pow expects non-negative exponent")
    return BASE ** n


__all__ = [
    "is_integer",
    "gcd",
    "sign",
    "ten_pow",
]
