"""
Parsing of Rational literals.

Accepted forms (surrounding whitespace is ignored, digits may come from
any Unicode decimal-digit script):

    [+|-]<int>[.<frac>][<e|E>[+|-]<exp>]
    [+|-].<frac>[<e|E>[+|-]<exp>]
    [+|-]<num>/<den>

The decimal forms carry a display precision: the number of fractional
digits, reduced by the exponent (so it may be negative, e.g. "5e3" -> -3).
The quotient form has the natural precision of its value, or none when
the value has no finite decimal expansion.

Digit strings are converted via ``Decimal``, which is not subject to the
int/str digit limit of the interpreter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from .constants import MAX_PREC
from .exc import FormatError, PrecisionLimitError

# In str patterns \d matches every Unicode decimal digit (category Nd).
_DEC_LITERAL = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\Z")
_QUOT_LITERAL = re.compile(
    r"(?P<sign>[+-]?)(?P<num>\d+)/(?P<den>\d+)\Z")


@dataclass(frozen=True)
class ParsedLiteral:
    """Result of parsing: exact ratio (not reduced) plus display precision."""

    numerator: int
    denominator: int
    precision: Optional[int]
    is_quotient: bool = False


def digits_to_int(digits: str) -> int:
    """Convert a run of (possibly non-ASCII) decimal digits to int."""
    return Decimal(digits).as_integer_ratio()[0]


def parse_literal(literal: str) -> ParsedLiteral:
    """Parse `literal`, raising FormatError if it is not a valid Rational literal.

    The returned precision is None for quotient literals; the caller
    derives it from the reduced value.
    """
    s = literal.strip()
    match = _QUOT_LITERAL.match(s)
    if match is not None:
        num = digits_to_int(match.group("num"))
        den = digits_to_int(match.group("den"))
        if match.group("sign") == "-":
            num = -num
        return ParsedLiteral(num, den, None, is_quotient=True)

    if _DEC_LITERAL.match(s) is None:
        raise FormatError(literal)
    try:
        dec = Decimal(s)
    except InvalidOperation:
        raise FormatError(literal) from None
    exp = dec.as_tuple().exponent
    prec = -exp
    if not -MAX_PREC <= prec <= MAX_PREC:
        raise PrecisionLimitError(prec)
    num, den = dec.as_integer_ratio()
    return ParsedLiteral(num, den, prec)


__all__ = [
    "ParsedLiteral",
    "digits_to_int",
    "parse_literal",
]
