"""
Rational Core Constants
=======================

Precision bounds and numeric-hash parameters shared by all core modules.
Nothing here depends on the rounding context.
"""

# NOTE: Precision counts fractional decimal digits; negative values mean
#       "rounded to tens, hundreds, ...". The bound applies symmetrically.

import math
import sys

# ---------------------------------------------------------------------------
# Precision bounds
# ---------------------------------------------------------------------------

#: Largest accepted precision (number of fractional decimal digits).
MAX_PREC: int = 999_999
MIN_PREC: int = -MAX_PREC

#: Precision used by ``Rational.from_real(..., exact=False)`` for values
#: without a finite decimal expansion.
MAX_APPROX_PREC: int = 2 ** 16 - 1

#: Significant digits used when a non-decimal value is formatted without
#: an explicit precision.
DEFAULT_FORMAT_PRECISION: int = 28


# ---------------------------------------------------------------------------
# Numeric hash (see "Hashing of numeric types" in the library docs)
# ---------------------------------------------------------------------------

HASH_MODULUS: int = sys.hash_info.modulus
HASH_INF: int = sys.hash_info.inf


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------

#: log2(5), used to guess the exponent of a power of five from its bit length.
LOG2_5: float = math.log2(5)


__all__ = [
    "MAX_PREC",
    "MIN_PREC",
    "MAX_APPROX_PREC",
    "DEFAULT_FORMAT_PRECISION",
    "HASH_MODULUS",
    "HASH_INF",
    "LOG2_5",
]
