"""
Formatting helpers for Rational values (display only).

Core arithmetic never goes through text. These helpers give stable strings
for logs, tests and the command line.
"""

from __future__ import annotations

from .constants import DEFAULT_SIGNIFICANT_DIGITS, LOG_SIGNIFICANT_DIGITS
from .exc import RationalTypeError
from .expansion import to_decimal_places
from .rational import Rational


def _require_rational(x: object, where: str) -> Rational:
    if not isinstance(x, Rational):
        raise RationalTypeError(f"{where}(): expected Rational, got {type(x).__name__}")
    return x


def to_fraction_string(x: Rational) -> str:
    """Return "[-]<numerator>/<denominator>", e.g. "-3/7"."""
    return str(_require_rational(x, "to_fraction_string"))


def to_decimal_string(x: Rational, digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """Truncated decimal text with the default Decimal128 budget."""
    return to_decimal_places(_require_rational(x, "to_decimal_string"), digits)


def fmt_rational(x: Rational, digits: int = LOG_SIGNIFICANT_DIGITS) -> str:
    """Compact log form showing both views, e.g. "1/3 (~0.333333)".

    The "~" is dropped when the decimal text is the exact value.
    """
    x = _require_rational(x, "fmt_rational")
    dec = to_decimal_places(x, digits)
    return f"{x} ({'' if is_exact_rendering(x, digits) else '~'}{dec})"


def is_exact_rendering(x: Rational, digits: int) -> bool:
    """True when `digits` significant digits render `x` with no remainder left.

    One more digit of budget changes the text iff the division had not
    terminated yet.
    """
    x = _require_rational(x, "is_exact_rendering")
    return to_decimal_places(x, digits) == to_decimal_places(x, digits + 1)


__all__ = [
    "to_fraction_string",
    "to_decimal_string",
    "fmt_rational",
    "is_exact_rendering",
]
