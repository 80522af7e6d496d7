"""
Rounding modes and the integer rounding engine.

- Eight modes, named like (and equivalent to) those of the stdlib ``decimal``.
- All rounding is done in the integer domain: a signed dividend is divided
  by a positive divisor, the truncated quotient is kept or its magnitude is
  incremented by one, depending on the mode.
- No Decimal or float is involved; operands may be arbitrarily large.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Callable, Dict

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> "Rounding":
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_05UP = (1, "Round away from zero if last digit after rounding "
                     "towards zero would have been 0 or 5; otherwise round "
                     "towards zero.")
    ROUND_CEILING = (2, "Round towards Infinity.")
    ROUND_DOWN = (3, "Round towards zero.")
    ROUND_FLOOR = (4, "Round towards -Infinity.")
    ROUND_HALF_DOWN = (5, "Round to nearest with ties going towards zero.")
    ROUND_HALF_EVEN = (6, "Round to nearest with ties going to nearest even "
                          "integer.")
    ROUND_HALF_UP = (7, "Round to nearest with ties going away from zero.")
    ROUND_UP = (8, "Round away from zero.")


# ----------------------------
# Per-mode decision rules
# ----------------------------
#
# Each rule gets the truncated quotient magnitude, the (non-zero) remainder
# magnitude, the divisor and the sign of the exact value, and answers
# whether the magnitude of the quotient has to be incremented.

_Rule = Callable[[int, int, int, bool], bool]


def _rule_05up(quot: int, rem: int, div: int, neg: bool) -> bool:
    return quot % 5 == 0


def _rule_ceiling(quot: int, rem: int, div: int, neg: bool) -> bool:
    return not neg


def _rule_down(quot: int, rem: int, div: int, neg: bool) -> bool:
    return False


def _rule_floor(quot: int, rem: int, div: int, neg: bool) -> bool:
    return neg


def _rule_half_down(quot: int, rem: int, div: int, neg: bool) -> bool:
    return 2 * rem > div


def _rule_half_even(quot: int, rem: int, div: int, neg: bool) -> bool:
    twice = 2 * rem
    return twice > div or (twice == div and quot & 1 == 1)


def _rule_half_up(quot: int, rem: int, div: int, neg: bool) -> bool:
    return 2 * rem >= div


def _rule_up(quot: int, rem: int, div: int, neg: bool) -> bool:
    return True


ROUNDING_RULES: Dict[Rounding, _Rule] = {
    Rounding.ROUND_05UP: _rule_05up,
    Rounding.ROUND_CEILING: _rule_ceiling,
    Rounding.ROUND_DOWN: _rule_down,
    Rounding.ROUND_FLOOR: _rule_floor,
    Rounding.ROUND_HALF_DOWN: _rule_half_down,
    Rounding.ROUND_HALF_EVEN: _rule_half_even,
    Rounding.ROUND_HALF_UP: _rule_half_up,
    Rounding.ROUND_UP: _rule_up,
}


# ----------------------------
# Engine
# ----------------------------

def round_div(dividend: int, divisor: int, rounding: Rounding) -> int:
    """Return ``dividend / divisor`` rounded to an integer using `rounding`.

    The divisor must be positive; the sign of the result follows the
    dividend. Exact quotients are returned unchanged in every mode.
    """
    if divisor <= 0:
        raise ValueError("round_div expects a positive divisor")
    neg = dividend < 0
    quot, rem = divmod(-dividend if neg else dividend, divisor)
    if rem != 0 and ROUNDING_RULES[rounding](quot, rem, divisor, neg):
        if DEBUG_ROUNDING:
            _dbg(f"round_div: q bits={quot.bit_length()}, "
                 f"d bits={divisor.bit_length()} -> increment ({rounding.name})")
        quot += 1
    return -quot if neg else quot


def round_to_multiple(num: int, den: int, quant_num: int, quant_den: int,
                      rounding: Rounding) -> int:
    """Return the integer k so that k * quant is closest to num / den.

    Both ratios must have positive denominators; ``quant_num`` must be
    non-zero (its sign is honoured).
    """
    if quant_num == 0:
        raise ValueError("round_to_multiple expects a non-zero quantum")
    # (num / den) / (quant_num / quant_den) = num * quant_den / (den * quant_num)
    dividend = num * quant_den
    divisor = den * quant_num
    if divisor < 0:
        dividend, divisor = -dividend, -divisor
    return round_div(dividend, divisor, rounding)


__all__ = [
    "Rounding",
    "ROUNDING_RULES",
    "round_div",
    "round_to_multiple",
]
