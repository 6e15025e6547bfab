"""
Rational primitive: exact fractions over Python's arbitrary-precision ints.

- Representation: non-negative numerator and positive denominator magnitudes
  plus a separate `is_negative` flag.
- Canonical form: fully reduced; zero is always (0, 1, False). Two Rationals
  are equal iff their (numerator, denominator, is_negative) triples are equal.
- Immutable: every operation returns a new instance built through the
  normalising constructor.
- No float is produced or consumed anywhere; ordering is by cross-multiplication.

# Sign-case reduction notes:
# - add() of a negative operand is subtraction of its negation, and subtract()
#   of a negative minuend is the negation of an addition, so only the
#   non-negative formulas are ever evaluated.
# - multiply() keeps the magnitudes apart from the sign and XORs the flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
from typing import Optional, Union

from .integers import gcd, is_integer, sign, ten_pow
from .exc import RationalZeroDivisionError, RationalTypeError

# Debug printing control
DEBUG_RATIONAL = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONAL:
        print(msg)


# ----------------------------
# Normaliser
# ----------------------------

def _normalize(p: int, q: int, negative: bool = False) -> tuple[int, int, bool]:
    """Reduce p/q to (numerator, denominator, is_negative) in canonical form.

    - q == 0 is rejected
    - each negative component, and a true `negative` flag, flips the sign
    - zero is canonicalised to (0, 1, False)
    """
    if not is_integer(p) or not is_integer(q):
        raise RationalTypeError(
            f"Rational components must be integers, got {type(p).__name__}/{type(q).__name__}"
        )
    if not isinstance(negative, bool):
        raise RationalTypeError(f"is_negative must be a bool, got {type(negative).__name__}")
    if q == 0:
        raise RationalZeroDivisionError("Rational denominator must not be zero")

    negative = negative != ((p < 0) != (q < 0))
    p, q = abs(p), abs(q)
    if p == 0:
        return 0, 1, False

    g = gcd(p, q)
    _dbg(f"normalize: |p|={p}, |q|={q}, gcd={g}, negative={negative}")
    return p // g, q // g, negative


# ----------------------------
# Rational value type
# ----------------------------

@dataclass(frozen=True, eq=False, repr=False)
class Rational:
    """Exact fraction in lowest terms (signed via `is_negative`).

    ``Rational(p, q)`` accepts any signed integers with ``q != 0`` and stores
    the canonical magnitudes, so ``Rational(2, -4)`` holds (1, 2, True).
    ``is_negative=True`` negates whatever p/q gives, so a stored triple
    rebuilds the same value (e.g. through ``dataclasses.replace``).
    """
    numerator: int
    denominator: int = 1
    is_negative: bool = False

    def __post_init__(self):
        n, d, neg = _normalize(self.numerator, self.denominator, self.is_negative)
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)
        object.__setattr__(self, "is_negative", neg)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Rational":
        return Rational(0, 1)

    @staticmethod
    def one() -> "Rational":
        return Rational(1, 1)

    @classmethod
    def from_fraction(cls, f: Fraction) -> "Rational":
        """Bridge from fractions.Fraction (exact)."""
        if not isinstance(f, Fraction):
            raise RationalTypeError("from_fraction(): expected fractions.Fraction")
        return cls(f.numerator, f.denominator)

    # ------------- predicates / views -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        return sign(self.signed_numerator())

    def signed_numerator(self) -> int:
        return -self.numerator if self.is_negative else self.numerator

    def as_fraction(self) -> Fraction:
        """Return the value as an exact Fraction."""
        return Fraction(self.signed_numerator(), self.denominator)

    # ------------- unary operations -------------

    def negate(self) -> "Rational":
        """Flip the sign; magnitudes are unchanged and zero stays canonical."""
        if self.is_negative:
            return Rational(self.numerator, self.denominator)
        return Rational(-self.numerator, self.denominator)

    def reciprocal(self) -> "Rational":
        """Return 1/self; raises RationalZeroDivisionError for zero."""
        return Rational(
            -self.denominator if self.is_negative else self.denominator,
            self.numerator,
        )

    def scale10(self, k: int) -> "Rational":
        """Return self * 10**k exactly (k may be negative)."""
        if not is_integer(k):
            raise RationalTypeError("scale10(): exponent must be an integer")
        if k >= 0:
            return Rational(self.signed_numerator() * ten_pow(k), self.denominator)
        return Rational(self.signed_numerator(), self.denominator * ten_pow(-k))

    # ------------- rendering -------------

    def to_decimal_places(self, n: int) -> str:
        """Decimal rendering truncated to ``n`` significant digits."""
        from .expansion import to_decimal_places
        return to_decimal_places(self, n)

    def __str__(self) -> str:
        return f"{'-' if self.is_negative else ''}{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.signed_numerator()}, {self.denominator})"

    # ------------- equality / hashing -------------

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return (self.numerator, self.denominator, self.is_negative) == (
            o.numerator, o.denominator, o.is_negative
        )

    def __hash__(self) -> int:
        # Equal to hash(int) / hash(Fraction) for the same value.
        return hash(self.as_fraction())

    def __bool__(self) -> bool:
        return self.numerator != 0

    # ------------- comparisons -------------

    def __lt__(self, other: "RationalLike") -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return cmp(self, o) < 0

    def __le__(self, other: "RationalLike") -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return cmp(self, o) <= 0

    def __gt__(self, other: "RationalLike") -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return cmp(self, o) > 0

    def __ge__(self, other: "RationalLike") -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return cmp(self, o) >= 0

    # ------------- arithmetic operators -------------

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.negate() if self.is_negative else self

    def __add__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _add(self, o)

    def __radd__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _add(o, self)

    def __sub__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _subtract(self, o)

    def __rsub__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _subtract(o, self)

    def __mul__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _multiply(self, o)

    def __rmul__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _multiply(o, self)

    def __truediv__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _divide(self, o)

    def __rtruediv__(self, other: "RationalLike") -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _divide(o, self)


# Operand type accepted by the operator protocol
RationalLike = Union[Rational, int]


def _coerce(x: object) -> Optional[Rational]:
    """Promote an int to Rational(x, 1); None for unsupported operand types."""
    if isinstance(x, Rational):
        return x
    if is_integer(x):
        return Rational(x, 1)
    return None


# ----------------------------
# Pairwise arithmetic
# ----------------------------

def _add(x: Rational, y: Rational) -> Rational:
    if y.is_negative:
        return _subtract(x, y.negate())
    if x.is_negative:
        return _subtract(y, x.negate())
    return Rational(
        x.numerator * y.denominator + y.numerator * x.denominator,
        x.denominator * y.denominator,
    )


def _subtract(x: Rational, y: Rational) -> Rational:
    if x.is_negative:
        return _add(x.negate(), y).negate()
    if y.is_negative:
        return _add(x, y.negate())
    return Rational(
        x.numerator * y.denominator - y.numerator * x.denominator,
        x.denominator * y.denominator,
    )


def _multiply(x: Rational, y: Rational) -> Rational:
    n = x.numerator * y.numerator
    if x.is_negative != y.is_negative:
        n = -n
    return Rational(n, x.denominator * y.denominator)


def _divide(x: Rational, y: Rational) -> Rational:
    if y.is_zero():
        raise RationalZeroDivisionError("division by zero Rational")
    return _multiply(x, y.reciprocal())


# ----------------------------
# Public operators (variadic)
# ----------------------------

def negate(x: Rational) -> Rational:
    return x.negate()


def add(*args: Rational) -> Rational:
    """Sum of all operands; add() is 0/1."""
    return reduce(_add, args, Rational.zero())


def subtract(x: Rational, *args: Rational) -> Rational:
    """x minus each following operand in turn; subtract(x) is x."""
    return reduce(_subtract, args, x)


def multiply(*args: Rational) -> Rational:
    """Product of all operands; multiply() is 1/1."""
    return reduce(_multiply, args, Rational.one())


def divide(x: Rational, *args: Rational) -> Rational:
    """x divided by each following operand in turn; divide(x) is x."""
    return reduce(_divide, args, x)


# ----------------------------
# Comparator
# ----------------------------

def cmp(x: Rational, y: Rational) -> int:
    """Return -1, 0 or 1 by comparing x and y exactly (cross-multiplication)."""
    a = x.signed_numerator() * y.denominator
    b = y.signed_numerator() * x.denominator
    return (a > b) - (a < b)


__all__ = [
    "Rational",
    "RationalLike",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "cmp",
]
