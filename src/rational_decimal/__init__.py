"""
Top-level API for rational_decimal (integer domain).

This module exposes the stable interface:
  - Rational: exact, immutable, always-canonical fraction
  - add / subtract / multiply / divide / negate / cmp: operators over Rationals
  - to_decimal_places: truncating long-division rendering to N significant digits

The command-line front end lives in `rational_decimal.cli` and is not
imported here.
"""

from __future__ import annotations

from .core import (
    Rational,
    negate,
    add,
    subtract,
    multiply,
    divide,
    cmp,
    to_decimal_places,
    DecimalPoint,
    RationalZeroDivisionError,
    RationalTypeError,
    InvalidDigitCountError,
    DigitCountRangeError,
)

__all__ = [
    # value type and operators
    "Rational",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "cmp",
    # rendering
    "to_decimal_places",
    "DecimalPoint",
    # exceptions
    "RationalZeroDivisionError",
    "RationalTypeError",
    "InvalidDigitCountError",
    "DigitCountRangeError",
]
