"""
Rational Decimal Core
=====================

Unified exports for the exact rational engine: the Rational value type, its
arithmetic and ordering, and the long-division decimal renderer.
All arithmetic is on Python ints; no float is involved anywhere.
"""

# NOTE:
#   Rational values are immutable and always canonical (lowest terms, positive
#   denominator, single zero). Decimal text is produced only by truncating
#   long division, never by rounding.

# Integer-domain constants
from .constants import (
    BASE,
    DECIMAL128_PRECISION,
    DEFAULT_SIGNIFICANT_DIGITS,
    LOG_SIGNIFICANT_DIGITS,
)

# Digit-stream vocabulary
from .digits import (
    DecimalPoint,
    DigitOrPoint,
    count_significant_digits,
)

# Rational value type and operators
from .rational import (
    Rational,
    RationalLike,
    negate,
    add,
    subtract,
    multiply,
    divide,
    cmp,
)

# Decimal expansion engine
from .expansion import (
    decimal_digits,
    render_digits,
    to_decimal_places,
)

# Formatting helpers (display only)
from .fmt import (
    to_fraction_string,
    to_decimal_string,
    fmt_rational,
    is_exact_rendering,
)

# Core exceptions
from .exc import (
    RationalZeroDivisionError,
    RationalTypeError,
    InvalidDigitCountError,
    DigitCountRangeError,
    InvariantViolation,
)

__all__ = [
    # constants
    "BASE",
    "DECIMAL128_PRECISION",
    "DEFAULT_SIGNIFICANT_DIGITS",
    "LOG_SIGNIFICANT_DIGITS",
    # digits
    "DecimalPoint",
    "DigitOrPoint",
    "count_significant_digits",
    # rational
    "Rational",
    "RationalLike",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "cmp",
    # expansion
    "decimal_digits",
    "render_digits",
    "to_decimal_places",
    # fmt
    "to_fraction_string",
    "to_decimal_string",
    "fmt_rational",
    "is_exact_rendering",
    # exceptions
    "RationalZeroDivisionError",
    "RationalTypeError",
    "InvalidDigitCountError",
    "DigitCountRangeError",
    "InvariantViolation",
]
