"""
Formatting helpers (text, repr and ``format()`` support).

Rendering works on the raw (numerator, denominator, precision) triple so
that this module does not depend on the Rational class itself.

Decimal is used here only as an I/O vehicle: it converts big integers to
digit strings without the interpreter's int/str digit limit, and it
implements the standard format mini-language. No arithmetic on values
is done in Decimal.
"""

from __future__ import annotations

import re
from decimal import Decimal, localcontext
from typing import Optional

from .constants import DEFAULT_FORMAT_PRECISION
from .rounding import Rounding, round_div

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Digit strings
# ---------------------------------------------------------------------------

def int_to_str(i: int) -> str:
    """Return the decimal digits of `i` (with '-' if negative)."""
    return str(Decimal(i))


def n_digits(i: int) -> int:
    """Number of decimal digits of a positive int."""
    return Decimal(i).adjusted() + 1


def ratio_magnitude(num: int, den: int) -> int:
    """Exponent e with 10**e <= abs(num / den) < 10**(e+1); `num` non-zero."""
    num = abs(num)
    exp = n_digits(num) - n_digits(den)
    # here 10**(exp-1) < num/den < 10**(exp+1)
    if exp >= 0:
        at_least = num >= den * 10 ** exp
    else:
        at_least = num * 10 ** -exp >= den
    return exp if at_least else exp - 1


# ---------------------------------------------------------------------------
# str / repr
# ---------------------------------------------------------------------------

def rational_to_str(num: int, den: int, prec: Optional[int]) -> str:
    """Canonical text of a Rational given by its reduced triple.

    - no precision (non-decimal value): '<num>/<den>'
    - precision <= 0: the integer value, no point
    - precision > 0: exactly `prec` fractional digits
    """
    if prec is None:
        return f"{int_to_str(num)}/{int_to_str(den)}"
    if prec <= 0:
        # value is integral, so den == 1
        return int_to_str(num)
    coeff = num * 10 ** prec // den
    sign = "-" if coeff < 0 else ""
    digits = int_to_str(abs(coeff)).rjust(prec + 1, "0")
    return f"{sign}{digits[:-prec]}.{digits[-prec:]}"


def rational_repr(cls_name: str, num: int, den: int, prec: Optional[int],
                  natural_prec: Optional[int]) -> str:
    """repr() of a Rational; evaluating it gives back an equal instance."""
    if prec is None:
        return f"{cls_name}({int_to_str(num)}, {int_to_str(den)})"
    if den == 1:
        body = int_to_str(num)
    else:
        body = repr(rational_to_str(num, den, natural_prec))
    if prec != natural_prec:
        body = f"{body}, precision={prec}"
    return f"{cls_name}({body})"


# ---------------------------------------------------------------------------
# format()
# ---------------------------------------------------------------------------

_FMT_SPEC = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<zeropad>0)?"
    r"(?P<width>\d+)?"
    r"(?P<grouping>[,_])?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<type>[eEfFgGn%])?\Z",
    re.DOTALL)


def _exact_decimal(num: int, den: int, prec: int) -> Decimal:
    """Decimal equal to num/den, which must have at most `prec` fractional digits."""
    if prec <= 0:
        return Decimal(num)
    coeff = num * 10 ** prec // den
    digits = Decimal(abs(coeff)).as_tuple().digits
    return Decimal((1 if coeff < 0 else 0, digits, -prec))


def _round_significant(num: int, den: int, n_sig: int,
                       rounding: Rounding) -> Decimal:
    """Decimal equal to num/den rounded to `n_sig` significant digits."""
    if num == 0:
        return Decimal(0)
    shift = n_sig - 1 - ratio_magnitude(num, den)
    if shift >= 0:
        coeff = round_div(num * 10 ** shift, den, rounding)
        return _exact_decimal(coeff, 10 ** shift, shift)
    scale = 10 ** -shift
    return Decimal(round_div(num, den * scale, rounding) * scale)


def format_rational(num: int, den: int, prec: Optional[int], fmt_spec: str,
                    rounding: Rounding) -> str:
    """Format a Rational triple according to `fmt_spec`.

    Where digits are dropped, the value is rounded once, in the integer
    domain, using `rounding`; ``format`` then only lays out exact digits.
    """
    if not fmt_spec:
        return rational_to_str(num, den, prec)
    match = _FMT_SPEC.match(fmt_spec)
    if match is None:
        raise ValueError(f"Invalid format specifier: {fmt_spec!r}")
    fmt_type = match.group("type")
    fmt_prec = match.group("precision")
    if DEBUG_FMT:
        _dbg(f"format_rational: num bits={num.bit_length()}, "
             f"den bits={den.bit_length()}, prec={prec}, spec={fmt_spec!r}")

    with localcontext() as ctx:
        ctx.rounding = rounding.name
        if fmt_type in ("f", "F", "%") and fmt_prec is not None:
            # round once, to the digits that will be shown
            n_frac = int(fmt_prec) + (2 if fmt_type == "%" else 0)
            coeff = round_div(num * 10 ** n_frac, den, rounding)
            dec = _exact_decimal(coeff, 10 ** n_frac, n_frac)
        elif fmt_type in ("e", "E", "g", "G", "n", None) and fmt_prec is not None:
            if fmt_type in ("e", "E"):
                n_sig = int(fmt_prec) + 1
            else:
                n_sig = max(int(fmt_prec), 1)
            dec = None
            if prec is not None:
                dec = _exact_decimal(num, den, prec)
                if len(dec.as_tuple().digits) > n_sig:
                    dec = None
            if dec is None:
                dec = _round_significant(num, den, n_sig, rounding)
        elif prec is not None:
            dec = _exact_decimal(num, den, prec)
        else:
            # ROUND_05UP result survives the rounding done by format()
            ctx.prec = DEFAULT_FORMAT_PRECISION
            ctx.rounding = "ROUND_05UP"
            dec = Decimal(num) / Decimal(den)
            ctx.rounding = rounding.name
        return format(dec, fmt_spec)


__all__ = [
    "int_to_str",
    "n_digits",
    "ratio_magnitude",
    "rational_to_str",
    "rational_repr",
    "format_rational",
]
