"""
Core exception types for rational_decimal.core.

These are dependency-free and may be imported by all core modules. Each one
subclasses the builtin a caller would naturally catch for the same failure.
"""

__all__ = [
    "RationalZeroDivisionError",
    "RationalTypeError",
    "InvalidDigitCountError",
    "DigitCountRangeError",
    "InvariantViolation",
]


class RationalZeroDivisionError(ZeroDivisionError):
    """Raised when a Rational would be built with a zero denominator."""
    pass


class RationalTypeError(TypeError):
    """Raised when a numerator or denominator is not an integer."""
    pass


class InvalidDigitCountError(TypeError):
    """Raised when a significant-digit budget is not an integer.

    Attributes
    ----------
    digits : Any
        The rejected budget, for context.
    """

    def __init__(self, digits):
        super().__init__(
            f"Cannot render to a non-integer number of digits: {digits!r}"
        )
        self.digits = digits


class DigitCountRangeError(ValueError):
    """Raised when a significant-digit budget is negative."""

    def __init__(self, digits):
        super().__init__(
            f"Cannot render to a negative number of digits: {digits}"
        )
        self.digits = digits


class InvariantViolation(Exception):
    """Raised when arithmetic or digit generation would break core invariants."""
    pass
