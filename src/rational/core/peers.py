"""
Classification of foreign numeric operands ("peers").

Every operand that is not a Rational is mapped once, up front, onto a
`Peer`: a small tagged record holding the operand's kind and its exact
integer ratio (or its special state). Constructors, comparisons and
arithmetic then work on `Peer` only and never probe types themselves.

Kinds and how they are recognised (first match wins):

- INTEGER  instances of ``numbers.Integral`` (``int(x)``)
- RATIO    instances of ``numbers.Rational`` (``numerator`` / ``denominator``)
- DECIMAL  ``decimal.Decimal`` or anything with ``as_tuple`` / ``is_nan`` /
           ``is_infinite`` (sign, coefficient, exponent + NaN / Infinity)
- FLOAT    ``float``, or a ``numbers.Real`` exposing ``as_integer_ratio``
- COMPLEX  instances of ``numbers.Complex`` (``real`` / ``imag``)

Anything else (strings included) is not a number for this package.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Tuple


class PeerKind(Enum):
    INTEGER = "integer"
    RATIO = "ratio"
    DECIMAL = "decimal"
    FLOAT = "float"
    COMPLEX = "complex"


@dataclass(frozen=True)
class Peer:
    """Classified foreign operand.

    For finite real kinds `numerator` / `denominator` hold the exact value
    (denominator > 0, not necessarily in lowest terms). `is_nan` and `sign`
    describe NaN / Infinity (sign is +1 / -1 for infinities, 0 otherwise).
    `exponent` is only set for finite DECIMAL peers; `real` / `imag` only
    for COMPLEX peers.
    """

    kind: PeerKind
    numerator: int = 0
    denominator: int = 1
    is_nan: bool = False
    is_infinite: bool = False
    sign: int = 0
    exponent: Optional[int] = None
    real: Any = None
    imag: Any = None

    @property
    def is_finite(self) -> bool:
        return not (self.is_nan or self.is_infinite)

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self.numerator, self.denominator


# ----------------------------
# Duck-typing predicates
# ----------------------------

def _is_decimal_like(obj: Any) -> bool:
    if isinstance(obj, Decimal):
        return True
    return (hasattr(obj, "as_tuple") and hasattr(obj, "is_nan")
            and hasattr(obj, "is_infinite"))


def _is_float_like(obj: Any) -> bool:
    if isinstance(obj, float):
        return True
    return isinstance(obj, numbers.Real) and hasattr(obj, "as_integer_ratio")


# ----------------------------
# Per-kind adapters
# ----------------------------

def _integer_peer(obj: Any) -> Peer:
    return Peer(PeerKind.INTEGER, numerator=int(obj))


def _ratio_peer(obj: Any) -> Peer:
    num, den = int(obj.numerator), int(obj.denominator)
    if den < 0:
        num, den = -num, -den
    return Peer(PeerKind.RATIO, numerator=num, denominator=den)


def _decimal_peer(obj: Any) -> Peer:
    if obj.is_nan():
        return Peer(PeerKind.DECIMAL, is_nan=True)
    sign, digits, exp = obj.as_tuple()
    if obj.is_infinite():
        return Peer(PeerKind.DECIMAL, is_infinite=True,
                    sign=-1 if sign else 1)
    if hasattr(obj, "as_integer_ratio"):
        num, den = obj.as_integer_ratio()
    else:
        coeff = 0
        for digit in digits:
            coeff = coeff * 10 + digit
        if sign:
            coeff = -coeff
        if exp >= 0:
            num, den = coeff * 10 ** exp, 1
        else:
            num, den = coeff, 10 ** -exp
    return Peer(PeerKind.DECIMAL, numerator=num, denominator=den,
                exponent=exp)


def _float_peer(obj: Any) -> Peer:
    f = float(obj)
    if math.isnan(f):
        return Peer(PeerKind.FLOAT, is_nan=True)
    if math.isinf(f):
        return Peer(PeerKind.FLOAT, is_infinite=True,
                    sign=1 if f > 0 else -1)
    num, den = obj.as_integer_ratio()
    return Peer(PeerKind.FLOAT, numerator=num, denominator=den)


def _complex_peer(obj: Any) -> Peer:
    return Peer(PeerKind.COMPLEX, real=obj.real, imag=obj.imag)


# ----------------------------
# Entry point
# ----------------------------

def classify(obj: Any) -> Optional[Peer]:
    """Return the `Peer` for `obj`, or None if `obj` is not a supported number."""
    if isinstance(obj, int):
        return Peer(PeerKind.INTEGER, numerator=int(obj))
    if isinstance(obj, str):
        return None
    if isinstance(obj, numbers.Integral):
        return _integer_peer(obj)
    if isinstance(obj, numbers.Rational):
        return _ratio_peer(obj)
    if _is_decimal_like(obj):
        return _decimal_peer(obj)
    if _is_float_like(obj):
        return _float_peer(obj)
    if isinstance(obj, numbers.Complex):
        return _complex_peer(obj)
    return None


__all__ = [
    "PeerKind",
    "Peer",
    "classify",
]
