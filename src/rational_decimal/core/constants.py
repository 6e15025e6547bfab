"""
Rational Decimal Core Constants (integer domain)
================================================

Only integer constants live here. The digit-stream marker type is defined in
`digits.py` alongside the significant-digit counter that consumes it.
"""

# NOTE: BASE is fixed; the expansion engine renders base-10 strings only.

# ---------------------------------------------------------------------------
# Long division
# ---------------------------------------------------------------------------

#: Radix of the generated digit stream.
BASE: int = 10


# ---------------------------------------------------------------------------
# Display precision
# ---------------------------------------------------------------------------

#: An IEEE-754 Decimal128 coefficient carries 34 significant digits.
DECIMAL128_PRECISION: int = 34

#: Significant-digit budget used when a caller (e.g. the CLI) gives none.
DEFAULT_SIGNIFICANT_DIGITS: int = DECIMAL128_PRECISION

#: Significant-digit budget of the compact log form (`fmt.fmt_rational`).
LOG_SIGNIFICANT_DIGITS: int = 6


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "BASE",
    "DECIMAL128_PRECISION",
    "DEFAULT_SIGNIFICANT_DIGITS",
    "LOG_SIGNIFICANT_DIGITS",
]
