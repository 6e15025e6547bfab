"""Command-line front end: combine fractions exactly and print the result.

Examples:
  rational-decimal 1/2 1/3                 -> 0.8333333333333333333333333333333333
  rational-decimal --op mul --digits 4 2/3 3/7 -> 0.2857
  rational-decimal --fraction -- -3/7 1    -> 4/7

Negative operands must follow a literal "--" so they are not read as options.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional

from .core import (
    DEFAULT_SIGNIFICANT_DIGITS,
    Rational,
    add,
    subtract,
    multiply,
    divide,
    to_decimal_places,
    fmt_rational,
    RationalZeroDivisionError,
    InvalidDigitCountError,
    DigitCountRangeError,
)
from .core import rational as _rational_mod
from .core import expansion as _expansion_mod


OPS: Dict[str, Callable[..., Rational]] = {
    "add": add,
    "sub": subtract,
    "mul": multiply,
    "div": divide,
}


def parse_operand(text: str) -> Rational:
    """argparse type: "P/Q" or "P" with integer P, Q."""
    num, sep, den = text.partition("/")
    try:
        p = int(num)
        q = int(den) if sep else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer fraction: {text!r}")
    try:
        return Rational(p, q)
    except RationalZeroDivisionError as e:
        raise argparse.ArgumentTypeError(f"{text!r}: {e}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rational-decimal",
        description="Exact rational arithmetic with truncated decimal output.",
    )
    parser.add_argument("operands", nargs="+", type=parse_operand, help="Fractions as P/Q or P")
    parser.add_argument("--op", choices=sorted(OPS.keys()), default="add", help="Operator folded over the operands")
    parser.add_argument(
        "--digits",
        type=int,
        default=DEFAULT_SIGNIFICANT_DIGITS,
        help=f"Significant digits to print (default {DEFAULT_SIGNIFICANT_DIGITS})",
    )
    form = parser.add_mutually_exclusive_group()
    form.add_argument("--fraction", action="store_true", help="Print P/Q instead of decimal digits")
    form.add_argument("--both", action="store_true", help="Print P/Q followed by the decimal digits")
    parser.add_argument("--debug", action="store_true", help="Trace normalisation and digit generation")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.debug:
        _rational_mod.DEBUG_RATIONAL = True
        _expansion_mod.DEBUG_EXPANSION = True

    try:
        result = OPS[args.op](*args.operands)
        if args.fraction:
            out = str(result)
        elif args.both:
            out = fmt_rational(result, args.digits)
        else:
            out = to_decimal_places(result, args.digits)
    except (RationalZeroDivisionError, InvalidDigitCountError, DigitCountRangeError) as e:
        print(f"rational-decimal: error: {e}", file=sys.stderr)
        return 2
    finally:
        _rational_mod.DEBUG_RATIONAL = False
        _expansion_mod.DEBUG_EXPANSION = False

    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
