from __future__ import annotations
import random
from typing import Callable, List

import pytest

# Import project primitives
from rational_decimal.core import Rational
from rational_decimal.core import rational as rational_mod
from rational_decimal.core import expansion as expansion_mod


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

def random_rational(rng: random.Random, bits: int = 64) -> Rational:
    """Signed Rational with numerator/denominator up to `bits` bits (denominator nonzero)."""
    p = rng.randint(-(1 << bits), 1 << bits)
    q = 0
    while q == 0:
        q = rng.randint(-(1 << bits), 1 << bits)
    return Rational(p, q)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def rng() -> random.Random:
    return random.Random(20240917)


@pytest.fixture()
def make_rationals(rng: random.Random) -> Callable[[int], List[Rational]]:
    def _make(count: int, bits: int = 64) -> List[Rational]:
        return [random_rational(rng, bits) for _ in range(count)]
    return _make


@pytest.fixture()
def sample_rationals() -> List[Rational]:
    """Hand-picked values covering signs, zero, integers and repeating expansions."""
    return [
        Rational(-7, 2),
        Rational(-1, 3),
        Rational(-1, 1000),
        Rational(0, 1),
        Rational(1, 1000),
        Rational(1, 3),
        Rational(1, 2),
        Rational(2, 3),
        Rational(1, 1),
        Rational(5, 3),
        Rational(5, 2),
        Rational(22, 7),
        Rational(10 ** 30 + 1, 10 ** 30),
    ]


@pytest.fixture()
def debug_tracing():
    """Enable core debug printing for one test and restore it afterwards."""
    rational_mod.DEBUG_RATIONAL = True
    expansion_mod.DEBUG_EXPANSION = True
    yield
    rational_mod.DEBUG_RATIONAL = False
    expansion_mod.DEBUG_EXPANSION = False
