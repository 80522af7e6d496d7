import decimal
import math
import operator
import sys
import pytest
from decimal import Decimal
from fractions import Fraction

from hypothesis import given, strategies as st

from rational import Rational, InvalidOperation


EQUALITY_OPS = (operator.eq, operator.ne)
ORDERING_OPS = (operator.le, operator.lt, operator.ge, operator.gt)
CMP_OPS = EQUALITY_OPS + ORDERING_OPS

LARGE = "1" * 2259 + "." + "4" * 33 + "0" * 19


def chk_eq(rn, equiv):
    assert rn == equiv
    assert equiv == rn
    assert rn >= equiv
    assert equiv <= rn
    assert rn <= equiv
    assert equiv >= rn
    assert not (rn != equiv)
    assert not (equiv != rn)
    assert not (rn > equiv)
    assert not (equiv < rn)
    assert not (rn < equiv)
    assert not (equiv > rn)
    assert hash(rn) == hash(equiv)


def chk_lt(rn, smaller):
    assert rn != smaller
    assert smaller != rn
    assert rn > smaller
    assert smaller < rn
    assert rn >= smaller
    assert smaller <= rn
    assert not (rn == smaller)
    assert not (smaller == rn)
    assert not (rn < smaller)
    assert not (smaller > rn)
    assert not (rn <= smaller)
    assert not (smaller >= rn)


# -----------------------------
# Own type vs Fraction oracle
# -----------------------------

@pytest.mark.parametrize("y", ("17.800", LARGE, "-14/33333", "-0"),
                         ids=("compact", "large", "fraction", "zero"))
@pytest.mark.parametrize("x", ("17.800", LARGE, "-14/33333", "0"),
                         ids=("compact", "large", "fraction", "zero"))
@pytest.mark.parametrize("op", CMP_OPS, ids=[op.__name__ for op in CMP_OPS])
def test_cmp(op, x, y):
    x1, x2 = Rational(x), Fraction(x)
    y1, y2 = Rational(y), Fraction(y)
    assert op(x1, y1) == op(x2, y2)
    assert op(y1, x1) == op(y2, x2)
    assert op(-x1, y1) == op(-x2, y2)
    assert op(x1, -y1) == op(x2, -y2)


@given(a=st.fractions(max_denominator=10 ** 9), b=st.fractions(max_denominator=10 ** 9))
def test_cmp_hypo(a, b):
    ra, rb = Rational(a), Rational(b)
    for op in CMP_OPS:
        assert op(ra, rb) == op(a, b)
        assert op(ra, b) == op(a, b)
    if ra < rb:
        assert not ra == rb
        assert ra != rb


# -----------------------------
# Equality with peers (and hash law)
# -----------------------------

@pytest.mark.parametrize("trail", (".000", ".", ""), ids=("trail='000'", "trail='.'", "trail=''"))
@pytest.mark.parametrize("value", ("-17", "1" * 3097 + "4" * 33 + "0" * 19, "-0"),
                         ids=("compact", "large", "zero"))
def test_eq_integral(value, trail):
    rn = Rational(value + trail)
    print(f"[eq-int] {value[:8]}{trail} == int")
    chk_eq(rn, int(value))


@pytest.mark.parametrize("trail2", ("0000", ""), ids=("trail2='0000'", "trail2=''"))
@pytest.mark.parametrize("trail1", ("000", ""), ids=("trail1='000'", "trail1=''"))
@pytest.mark.parametrize("value", ("17.800", LARGE, "-0.00014"),
                         ids=("compact", "large", "fraction"))
@pytest.mark.parametrize("kind", (Rational, Decimal, Fraction),
                         ids=("Rational", "Decimal", "Fraction"))
def test_eq_rational(kind, value, trail1, trail2):
    rn = Rational(value + trail1)
    equiv = kind(value + trail2)
    print(f"[eq-{kind.__name__}] {value[:8]!r}{trail1} vs {trail2}")
    chk_eq(rn, equiv)


@pytest.mark.parametrize("value", ("17.500", sys.float_info.max * 0.9, "%1.63f" % 2 ** -63),
                         ids=("compact", "large", "tiny"))
def test_eq_real(value):
    rn = Rational(value)
    print(f"[eq-float] {value!r}")
    chk_eq(rn, float(value))


@pytest.mark.parametrize("value", ("17.500", sys.float_info.max, "%1.63f" % 2 ** -63),
                         ids=("compact", "large", "tiny"))
def test_eq_complex(value):
    rn = Rational(value)
    equiv = complex(float(value))
    non_equiv = complex(float(value), 1)
    print(f"[eq-complex] {value!r}")
    assert rn == equiv
    assert equiv == rn
    assert not (rn != equiv)
    assert not (equiv != rn)
    assert rn != non_equiv
    assert non_equiv != rn
    assert not (rn == non_equiv)
    assert not (non_equiv == rn)


@pytest.mark.parametrize("op", ORDERING_OPS, ids=[op.__name__ for op in ORDERING_OPS])
def test_ordering_complex_raises(op):
    print(f"[cmp-complex] {op.__name__} against complex -> TypeError")
    with pytest.raises(TypeError):
        op(Rational("1.5"), 1.5 + 0j)
    with pytest.raises(TypeError):
        op(1.5 + 0j, Rational("1.5"))


# -----------------------------
# Inequality with peers
# -----------------------------

@pytest.mark.parametrize("value", ("-17", "1" * 759 + "4" * 33 + "0" * 19, "-0"),
                         ids=("compact", "large", "zero"))
def test_ne_integral(value):
    other = int(value)
    delta = Fraction(1, 10 ** len(value))
    print(f"[ne-int] {value[:8]} +/- 10**-{len(value)}")
    chk_lt(Rational(other + delta), other)
    chk_lt(other, Rational(other - delta))


@pytest.mark.parametrize("value", ("17.800", LARGE, "-0.00014"),
                         ids=("compact", "large", "fraction"))
@pytest.mark.parametrize("kind", (Decimal, Fraction), ids=("Decimal", "Fraction"))
def test_ne_rational(kind, value):
    other = kind(value)
    delta = Fraction(1, 10 ** 80)
    print(f"[ne-{kind.__name__}] {value[:8]!r} +/- 1e-80")
    chk_lt(Rational(Fraction(value) + delta), other)
    chk_lt(other, Rational(Fraction(value) - delta))


def test_ne_real():
    print("[ne-float] 17.5 +/- 1e-30 vs 17.5")
    chk_lt(Rational("17.500000000000000000000000000001"), 17.5)
    chk_lt(17.5, Rational("17.499999999999999999999999999999"))
    # equality is exact, no float rounding involved
    assert Rational("0.1") != 0.1
    assert Rational(0.1) == 0.1


# -----------------------------
# Special values
# -----------------------------

@pytest.mark.parametrize("nan", [math.nan, float("-nan")], ids=["nan", "-nan"])
def test_float_nan(nan):
    rn = Rational("17.5")
    print("[nan-float] == False, != True, ordering False (no raise)")
    assert not (rn == nan)
    assert rn != nan
    assert not (nan == rn)
    assert nan != rn
    for op in ORDERING_OPS:
        assert op(rn, nan) is False
        assert op(nan, rn) is False


@pytest.mark.parametrize("nan", [Decimal("NaN"), Decimal("-NaN")], ids=["nan", "-nan"])
def test_decimal_nan(nan):
    rn = Rational("17.5")
    print("[nan-decimal] == False, != True, ordering raises InvalidOperation")
    assert not (rn == nan)
    assert rn != nan
    for op in ORDERING_OPS:
        with pytest.raises(InvalidOperation):
            op(rn, nan)
        with pytest.raises(decimal.InvalidOperation):
            op(rn, nan)


@pytest.mark.parametrize("inf", [math.inf, Decimal("Infinity")], ids=["float", "Decimal"])
@pytest.mark.parametrize("value", ["17.5", LARGE, "-1/3", "0"], ids=["compact", "large", "fraction", "zero"])
def test_infinities(value, inf):
    rn = Rational(value)
    print(f"[inf] {value[:8]!r} vs +/-{inf!r}")
    assert rn < inf and rn <= inf and not rn > inf and not rn >= inf
    assert rn > -inf and rn >= -inf and not rn < -inf and not rn <= -inf
    assert rn != inf and not rn == inf
    assert rn != -inf and not rn == -inf
    assert inf > rn and -inf < rn


@pytest.mark.parametrize("other", ["17.5", b"17.5", None, object(), [17.5]],
                         ids=["str", "bytes", "None", "object", "list"])
def test_non_numbers(other):
    rn = Rational("17.5")
    print(f"[non-number] {other!r}: equality definite, ordering TypeError")
    assert not (rn == other)
    assert rn != other
    for op in ORDERING_OPS:
        with pytest.raises(TypeError):
            op(rn, other)


# -----------------------------
# Hash
# -----------------------------

@pytest.mark.parametrize(
    "rn,peer",
    [
        (Rational(-1), -1),
        (Rational("0.000"), 0),
        (Rational("-2.50"), -2.5),
        (Rational("-2.50"), Decimal("-2.5000")),
        (Rational(1, 3), Fraction(1, 3)),
        (Rational(-7, 2 ** 61 - 1), Fraction(-7, 2 ** 61 - 1)),
        (Rational(2 ** 61 - 1, 3), Fraction(2 ** 61 - 1, 3)),
        (Rational(10 ** 50), 10 ** 50),
    ],
    ids=["minus-one", "zero", "float", "Decimal", "third", "modulus-den",
         "modulus-num", "big-int"],
)
def test_hash_matches_peer(rn, peer):
    print(f"[hash] {rn!r} ~ {peer!r} -> {hash(rn)}")
    assert hash(rn) == hash(peer)


def test_hash_in_sets_and_dicts():
    print("[hash] equal values collapse in a set")
    values = {Rational("1.00"), 1, Fraction(1), Decimal("1.0"), 1.0, Rational(2, 2)}
    assert len(values) == 1
    table = {Rational("0.5"): "half"}
    assert table[Fraction(1, 2)] == "half"
    assert table[0.5] == "half"


@given(value=st.fractions())
def test_hash_hypo(value):
    assert hash(Rational(value)) == hash(value)
