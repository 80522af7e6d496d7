# Top-level API for rational.
"""
Top-level API for rational.

This module exposes the stable interface:
  - Rational: exact rational number with decimal display precision
  - Rounding: the eight rounding modes (also importable as ROUND_* names)
  - rounding context helpers: get/set/reset of the default mode, localrounding

Engine internals (rounding engine, operand classification, parsing) live
under `rational.core` and are not part of the stable surface.
"""

from __future__ import annotations

from .core import (
    Rational,
    Rounding,
    get_dflt_rounding_mode,
    set_dflt_rounding_mode,
    reset_dflt_rounding_mode,
    localrounding,
    MAX_PREC,
    MAX_APPROX_PREC,
    RationalError,
    FormatError,
    PrecisionLimitError,
    DivisionByZero,
    InvalidOperation,
)

__version__ = "0.1.0"

# Module-level aliases of the rounding modes
ROUND_05UP = Rounding.ROUND_05UP
ROUND_CEILING = Rounding.ROUND_CEILING
ROUND_DOWN = Rounding.ROUND_DOWN
ROUND_FLOOR = Rounding.ROUND_FLOOR
ROUND_HALF_DOWN = Rounding.ROUND_HALF_DOWN
ROUND_HALF_EVEN = Rounding.ROUND_HALF_EVEN
ROUND_HALF_UP = Rounding.ROUND_HALF_UP
ROUND_UP = Rounding.ROUND_UP

__all__ = [
    # value type
    "Rational",
    # rounding modes
    "Rounding",
    "ROUND_05UP",
    "ROUND_CEILING",
    "ROUND_DOWN",
    "ROUND_FLOOR",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_UP",
    # rounding context
    "get_dflt_rounding_mode",
    "set_dflt_rounding_mode",
    "reset_dflt_rounding_mode",
    "localrounding",
    # limits
    "MAX_PREC",
    "MAX_APPROX_PREC",
    # exceptions
    "RationalError",
    "FormatError",
    "PrecisionLimitError",
    "DivisionByZero",
    "InvalidOperation",
]
