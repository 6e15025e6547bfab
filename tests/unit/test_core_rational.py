import dataclasses

import pytest
from fractions import Fraction

from rational_decimal.core.rational import Rational
from rational_decimal.core.integers import gcd
from rational_decimal.core.exc import RationalZeroDivisionError, RationalTypeError


# -----------------------------
# Construction & normalisation
# -----------------------------

def test_zero_denominator_raises():
    print("[ctor-zero-den] Rational(1, 0) -> expect RationalZeroDivisionError")
    with pytest.raises(RationalZeroDivisionError):
        Rational(1, 0)
    # Callers catching the builtin class see it too
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0)


def test_normalisation_happens_at_construction():
    print("[ctor-normalise] Rational(2, 4) -> expect 1/2")
    r = Rational(2, 4)
    print("numerator ->", r.numerator, "; denominator ->", r.denominator)
    assert r.numerator == 1
    assert r.denominator == 2
    assert r == Rational(1, 2)


@pytest.mark.parametrize(
    "p,q,negative",
    [
        (-1, 2, True),
        (1, -2, True),
        (-1, -2, False),
        (1, 2, False),
    ],
)
def test_sign_rules(p, q, negative):
    r = Rational(p, q)
    print(f"[ctor-sign] Rational({p}, {q}).is_negative -> {r.is_negative}")
    assert r.is_negative is negative
    assert r.numerator == 1
    assert r.denominator == 2


@pytest.mark.parametrize("p,q", [(0, 1), (0, -5), (0, 123456789), (-0, -1)])
def test_canonical_zero(p, q):
    print(f"[ctor-zero] Rational({p}, {q}) -> expect (0, 1, False)")
    z = Rational(p, q)
    assert (z.numerator, z.denominator, z.is_negative) == (0, 1, False)
    assert z == Rational.zero()
    assert z.is_zero()
    assert not z


def test_default_denominator_is_one():
    print("[ctor-int] Rational(-9) -> -9/1")
    r = Rational(-9)
    assert (r.numerator, r.denominator, r.is_negative) == (9, 1, True)


@pytest.mark.parametrize("p,q", [(1.5, 2), (1, 2.0), ("1", 2), (True, 2), (1, None)])
def test_non_integer_components_rejected(p, q):
    print(f"[ctor-type] Rational({p!r}, {q!r}) -> expect RationalTypeError")
    with pytest.raises(RationalTypeError):
        Rational(p, q)


def test_random_values_are_reduced(make_rationals):
    print("[ctor-reduced] 200 random signed pairs -> denominator > 0 and gcd == 1")
    for r in make_rationals(200):
        assert r.denominator > 0
        assert r.numerator >= 0
        if r.numerator == 0:
            assert (r.denominator, r.is_negative) == (1, False)
        else:
            assert gcd(r.numerator, r.denominator) == 1


def test_big_integers_stay_exact():
    big = 3 ** 200
    print("[ctor-big] (3^200 * 7) / (3^200 * 11) -> 7/11")
    r = Rational(big * 7, -big * 11)
    assert r == Rational(-7, 11)


def test_immutable():
    print("[immutable] assignment to any field raises")
    r = Rational(1, 2)
    for name in ("numerator", "denominator", "is_negative"):
        with pytest.raises(AttributeError):
            setattr(r, name, 5)
    assert r == Rational(1, 2)


@pytest.mark.parametrize("value", [Rational(-1, 2), Rational(3, 7), Rational(-22, 7), Rational(0)])
def test_dataclass_replace_keeps_value(value):
    print(f"[replace] dataclasses.replace({value!r}) -> same triple")
    copy = dataclasses.replace(value)
    assert copy == value
    assert (copy.numerator, copy.denominator, copy.is_negative) == (
        value.numerator, value.denominator, value.is_negative
    )


def test_dataclass_replace_single_field():
    print("[replace-field] replace(-1/2, denominator=4) -> -1/4; replace(-1/2, is_negative=False) -> 1/2")
    r = Rational(-1, 2)
    assert dataclasses.replace(r, denominator=4) == Rational(-1, 4)
    assert dataclasses.replace(r, is_negative=False) == Rational(1, 2)


@pytest.mark.parametrize(
    "p,q,flag,expected",
    [
        (1, 2, True, Rational(-1, 2)),
        (-1, 2, True, Rational(1, 2)),
        (1, -2, True, Rational(1, 2)),
        (-1, -2, True, Rational(-1, 2)),
        (0, 3, True, Rational(0)),
    ],
)
def test_is_negative_flag_flips_sign(p, q, flag, expected):
    print(f"[ctor-flag] Rational({p}, {q}, is_negative={flag}) -> {expected}")
    r = Rational(p, q, is_negative=flag)
    assert r == expected
    assert r.is_negative is expected.is_negative


def test_is_negative_flag_must_be_bool():
    with pytest.raises(RationalTypeError):
        Rational(1, 2, 1)  # type: ignore[arg-type]


# -----------------------------
# Views & unary operations
# -----------------------------

def test_str_and_repr():
    print("[str] 1/2 and -3/7")
    assert str(Rational(1, 2)) == "1/2"
    assert str(Rational(-3, 7)) == "-3/7"
    assert str(Rational(0, 4)) == "0/1"
    assert repr(Rational(3, -7)) == "Rational(-3, 7)"


def test_negate_keeps_magnitudes():
    print("[negate] -(3/7) and -(-3/7)")
    r = Rational(3, 7)
    n = r.negate()
    assert (n.numerator, n.denominator, n.is_negative) == (3, 7, True)
    assert n.negate() == r
    assert -r == n
    # original untouched
    assert r.is_negative is False


def test_negate_zero_stays_canonical():
    print("[negate-zero] -(0/1) is (0, 1, False)")
    z = Rational.zero().negate()
    assert z.is_negative is False
    assert z == Rational.zero()


def test_sign_and_abs():
    assert Rational(-2, 3).sign == -1
    assert Rational(0).sign == 0
    assert Rational(2, 3).sign == 1
    assert abs(Rational(-2, 3)) == Rational(2, 3)
    assert abs(Rational(2, 3)) == Rational(2, 3)
    assert +Rational(-2, 3) == Rational(-2, 3)


def test_reciprocal():
    print("[reciprocal] 1/(-3/7) -> -7/3; 1/0 raises")
    assert Rational(-3, 7).reciprocal() == Rational(-7, 3)
    with pytest.raises(RationalZeroDivisionError):
        Rational.zero().reciprocal()


@pytest.mark.parametrize(
    "value,k,expected",
    [
        (Rational(3, 7), 2, Rational(300, 7)),
        (Rational(-3, 7), -3, Rational(-3, 7000)),
        (Rational(25, 1), -2, Rational(1, 4)),
        (Rational(5, 3), 0, Rational(5, 3)),
    ],
)
def test_scale10(value, k, expected):
    print(f"[scale10] {value} * 10^{k} -> {expected}")
    assert value.scale10(k) == expected


def test_scale10_rejects_non_integer_exponent():
    with pytest.raises(RationalTypeError):
        Rational(1, 2).scale10(1.0)


def test_fraction_bridge(make_rationals):
    print("[fraction-bridge] as_fraction/from_fraction agree with fractions.Fraction")
    for r in make_rationals(50):
        f = r.as_fraction()
        assert f == Fraction(r.signed_numerator(), r.denominator)
        assert Rational.from_fraction(f) == r
    with pytest.raises(RationalTypeError):
        Rational.from_fraction(0.5)  # type: ignore[arg-type]


def test_hash_matches_equal_values():
    print("[hash] equal Rationals hash equal; integral values hash like int")
    assert hash(Rational(2, 4)) == hash(Rational(-1, -2))
    assert hash(Rational(6, 3)) == hash(2)
    assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1


def test_equality_with_int_and_foreign_types():
    assert Rational(6, 3) == 2
    assert Rational(-4, 2) == -2
    assert Rational(1, 2) != 0
    assert Rational(1, 2) != "1/2"
    assert Rational(1, 2) != 0.5
