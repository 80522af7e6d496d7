import pytest

from rational.core.constants import MAX_PREC
from rational.core.exc import FormatError, PrecisionLimitError
from rational.core.parse import digits_to_int, parse_literal


# -----------------------------
# Decimal forms
# -----------------------------

@pytest.mark.parametrize(
    "literal,num,den,prec",
    [
        (".174e2", 87, 5, 1),
        ("17.4", 87, 5, 1),
        ("  -12.50 ", -25, 2, 2),
        ("+7", 7, 1, 0),
        ("5e3", 5000, 1, -3),
        ("5.E3", 5000, 1, -3),
        ("1.", 1, 1, 0),
        ("-00000000", 0, 1, 0),
        ("-000.00000", 0, 1, 5),
        ("12345678901234567e12", 12345678901234567 * 10 ** 12, 1, -12),
        ("0.00014", 7, 50000, 5),
    ],
    ids=[
        "exp-shift", "plain", "blanks-sign", "plus", "pos-exp", "point-exp",
        "trailing-point", "neg-zero", "zero-with-point", "int-exp",
        "small-fraction",
    ],
)
def test_parse_decimal_literals(literal, num, den, prec):
    parsed = parse_literal(literal)
    print(f"[parse] {literal!r} -> {parsed}")
    assert not parsed.is_quotient
    assert parsed.precision == prec
    assert parsed.numerator * den == num * parsed.denominator


@pytest.mark.parametrize(
    "literal,value",
    [
        ("᠑᠗.᠔", (174, 10)),
        ("༠.༤", (4, 10)),
        ("١٢/٣", (12, 3)),
    ],
    ids=["mongolian", "tibetan", "arabic-indic-quotient"],
)
def test_parse_non_ascii_digits(literal, value):
    parsed = parse_literal(literal)
    print(f"[parse-unicode] {literal!r} -> {parsed}")
    assert parsed.numerator * value[1] == value[0] * parsed.denominator


# -----------------------------
# Quotient form
# -----------------------------

@pytest.mark.parametrize(
    "literal,num,den",
    [("2/777", 2, 777), ("-14/33333", -14, 33333), (" +6/4 ", 6, 4),
     ("1/0", 1, 0)],
    ids=["simple", "negative", "unreduced", "zero-den"],
)
def test_parse_quotient(literal, num, den):
    parsed = parse_literal(literal)
    print(f"[parse-quotient] {literal!r} -> {parsed}")
    assert parsed.is_quotient
    assert parsed.precision is None
    assert (parsed.numerator, parsed.denominator) == (num, den)


# -----------------------------
# Errors
# -----------------------------

@pytest.mark.parametrize(
    "literal",
    [" 1.23.5", "1.24e", "--4.92", "", "   ", "3,49E-3", "\t+   \r\n",
     "1/-2", "1.5/2", "inf", "NaN", "0x1F", "1_000", "."],
    ids=["two-points", "missing-exp", "double-sign", "empty", "blanks",
         "invalid-char", "sign-only", "signed-den", "decimal-num",
         "inf", "nan", "hex", "underscore", "point-only"],
)
def test_parse_invalid_literals(literal):
    print(f"[parse-invalid] {literal!r} -> FormatError")
    with pytest.raises(FormatError) as excinfo:
        parse_literal(literal)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.literal == literal


def test_parse_precision_limit():
    literal = f"1e-{MAX_PREC + 1}"
    print(f"[parse-limit] {literal} -> PrecisionLimitError")
    with pytest.raises(PrecisionLimitError):
        parse_literal(literal)
    with pytest.raises(PrecisionLimitError):
        parse_literal(f"1e{MAX_PREC + 1}")


def test_digits_to_int_large():
    print("[digits_to_int] 5000 digits (beyond int/str limit)")
    value = digits_to_int("7" * 5000)
    assert value.bit_length() > 16000
    assert value % 10 == 7
    assert (value - 7) % 70 == 0
