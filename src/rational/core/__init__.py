"""
Rational Core
=============

Unified exports for the exact rational number type and its engine.
All arithmetic and rounding are done on Python ints (numerator / denominator).
Decimal helpers are used *only* for text formatting.

Core exposes Rational (value type) and Rounding (modes) as public API.
"""

# NOTE:
#   The `core` package holds the value type, the integer rounding engine and the
#   rounding context. Foreign operands (int, Fraction, Decimal, float, complex)
#   are classified once in `peers` before any arithmetic or comparison runs.

# Precision bounds and hash parameters
from .constants import (
    MAX_PREC,
    MIN_PREC,
    MAX_APPROX_PREC,
    DEFAULT_FORMAT_PRECISION,
)

# Rounding modes and integer rounding engine
from .rounding import (
    Rounding,
    round_div,
    round_to_multiple,
)

# Rounding context (current default mode)
from .context import (
    get_dflt_rounding_mode,
    set_dflt_rounding_mode,
    reset_dflt_rounding_mode,
    localrounding,
)

# Operand classification
from .peers import (
    Peer,
    PeerKind,
    classify,
)

# Literal parsing and text rendering
from .parse import parse_literal
from .fmt import rational_to_str

# Value type
from .rational import Rational

# Core exceptions
from .exc import (
    RationalError,
    FormatError,
    PrecisionLimitError,
    DivisionByZero,
    InvalidOperation,
)

__all__ = [
    # constants
    "MAX_PREC",
    "MIN_PREC",
    "MAX_APPROX_PREC",
    "DEFAULT_FORMAT_PRECISION",
    # rounding
    "Rounding",
    "round_div",
    "round_to_multiple",
    # context
    "get_dflt_rounding_mode",
    "set_dflt_rounding_mode",
    "reset_dflt_rounding_mode",
    "localrounding",
    # peers
    "Peer",
    "PeerKind",
    "classify",
    # text
    "parse_literal",
    "rational_to_str",
    # value type
    "Rational",
    # exceptions
    "RationalError",
    "FormatError",
    "PrecisionLimitError",
    "DivisionByZero",
    "InvalidOperation",
]
