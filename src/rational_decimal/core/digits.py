"""
Digit-stream vocabulary shared by the expansion engine and the renderer.

A decimal expansion is produced as a stream whose elements are either an
``int`` digit in 0..9 or ``DecimalPoint.MARK``. The marker says "insert the
decimal point here"; it never carries a value of its own.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .exc import InvariantViolation


class DecimalPoint(Enum):
    """Marker distinguishing the decimal point from digit values in a stream."""
    MARK = "."


#: Element type of a digit stream.
DigitOrPoint = Union[int, DecimalPoint]


def count_significant_digits(digits: str) -> int:
    """Count the digits of ``digits`` that lie after its leading zeros.

    The argument is a partially built expansion; a sign and a decimal point
    are ignored, so ``"0.0305"`` counts 3 and ``"120"`` counts 3. Trailing
    zeros are significant. A string of zeros counts 0.
    """
    s = digits.lstrip("-").replace(DecimalPoint.MARK.value, "")
    if s and not s.isdigit():
        raise InvariantViolation(f"count_significant_digits(): not a digit string: {digits!r}")
    return len(s.lstrip("0"))


def digit_char(d: DigitOrPoint) -> str:
    """Single-character text for a stream element."""
    if d is DecimalPoint.MARK:
        return DecimalPoint.MARK.value
    if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9:
        raise InvariantViolation(f"digit stream yielded a non-digit: {d!r}")
    return str(d)


__all__ = [
    "DecimalPoint",
    "DigitOrPoint",
    "count_significant_digits",
    "digit_char",
]
