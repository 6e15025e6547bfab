"""
Decimal expansion of a Rational by long division (integer domain).

Key behaviours:
- Digits are generated one at a time from the magnitudes (x = numerator,
  y = denominator) with repeated multiply-by-ten / divmod steps.
- The budget counts *significant* digits: zeros before the first nonzero
  digit are free. Counting is done by `count_significant_digits` on the
  partially built expansion with its decimal point removed.
- Truncation, never rounding: generation simply stops once the budget is met,
  so 5/3 to 2 digits is "1.6".
- The integer part is emitted whole by the first division step, even when it
  alone exceeds the budget.

Look-ahead rule:
- After scaling a remainder that was smaller than the divisor, if it is
  *still* smaller, the next quotient digit is known to be 0 and is emitted
  immediately instead of spending another loop iteration on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

from .constants import BASE
from .digits import DecimalPoint, DigitOrPoint, count_significant_digits, digit_char
from .exc import InvalidDigitCountError, DigitCountRangeError
from .integers import is_integer

if TYPE_CHECKING:
    from .rational import Rational

# Debug printing control
DEBUG_EXPANSION = False

def _dbg(msg: str) -> None:
    if DEBUG_EXPANSION:
        print(msg)


# ----------------------------
# Preconditions
# ----------------------------

def check_digit_budget(n: object) -> int:
    """Validate a significant-digit budget; return it unchanged."""
    if not is_integer(n):
        raise InvalidDigitCountError(n)
    if n < 0:
        raise DigitCountRangeError(n)
    return n


# ----------------------------
# Digit generator
# ----------------------------

def decimal_digits(x: int, y: int, n: int) -> Iterator[DigitOrPoint]:
    """Yield the decimal expansion of x/y, at most `n` significant digits.

    Preconditions: x >= 0, y > 0. Elements are ints 0..9 or DecimalPoint.MARK.
    The generator is single-use; each call performs its own division.
    """
    built = ""  # expansion so far, used only for budget accounting
    point_emitted = False

    while count_significant_digits(built) < n:
        if x == 0:
            _dbg("decimal_digits: exact, stop")
            return
        if x < y:
            if not point_emitted:
                point_emitted = True
                built = (built or "0") + DecimalPoint.MARK.value
                _dbg(f"decimal_digits: point after {built[:-1]!r}")
                yield DecimalPoint.MARK
            x *= BASE
            if x < y:
                _dbg(f"decimal_digits: look-ahead zero, x={x}, y={y}")
                built += "0"
                yield 0
        else:
            q, x = divmod(x, y)
            q_str = str(q)
            _dbg(f"decimal_digits: q={q_str}, r={x}")
            built += q_str
            for c in q_str:
                yield int(c)


# ----------------------------
# Renderer
# ----------------------------

def render_digits(digits: Iterable[DigitOrPoint], *, negative: bool = False) -> str:
    """Concatenate a digit stream into display text.

    A decimal point with no digits before it gets a leading "0"; an empty
    stream renders as "0" and is never signed.
    """
    out = ""
    for d in digits:
        if d is DecimalPoint.MARK:
            out = (out or "0") + digit_char(d)
        else:
            out += digit_char(d)
    if not out:
        return "0"
    return ("-" if negative else "") + out


def to_decimal_places(value: "Rational", n: int) -> str:
    """Render `value` as a decimal string with at most `n` significant digits.

    Raises InvalidDigitCountError for a non-integer `n` and
    DigitCountRangeError for a negative one. Zero renders as "0".
    """
    check_digit_budget(n)
    if value.numerator == 0:
        return "0"
    digits = decimal_digits(value.numerator, value.denominator, n)
    return render_digits(digits, negative=value.is_negative)


__all__ = [
    "check_digit_budget",
    "decimal_digits",
    "render_digits",
    "to_decimal_places",
]
